"""Minimal bridge to the GitHub Actions runner.

Inputs arrive as ``INPUT_<NAME>`` environment variables and failures are
reported with the ``::error::`` workflow command plus a non-zero exit code.
"""
import os
import sys

FAILURE_EXIT_CODE = 1


def input_env_var(name: str) -> str:
    # Runner keeps hyphens, upper-cases and swaps spaces for underscores
    return "INPUT_" + name.replace(" ", "_").upper()


def get_input(name: str, env=None) -> str:
    env = os.environ if env is None else env
    return (env.get(input_env_var(name)) or "").strip()


def _escape_data(message: str) -> str:
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def set_failed(message: str, stream=None) -> int:
    stream = stream or sys.stdout
    print(f"::error::{_escape_data(message)}", file=stream, flush=True)
    return FAILURE_EXIT_CODE
