import argparse
import logging
import os
import sys
from pathlib import Path

from .actions import get_input, set_failed
from .backends import BACKEND_CHOICES, build_backend
from .errors import RegistrationError
from .params import INPUT_NAMES, resolve_parameters
from .workflow import ensure_model_registered

logger = logging.getLogger("aml_register")

INPUT_HELP = {
    "resource-group": "Resource group that contains the workspace",
    "workspace-name": "Azure ML workspace name",
    "model-name": "Model name to check/register",
    "model-version": "Model version to check/register",
    "model-path": "Local path (or Azure ML URI) of the model artifact",
    "model-type": "Azure ML model type, e.g. custom_model or mlflow_model",
}


def configure_logging(verbose: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        stream=sys.stdout,
    )


def parse_args(argv=None, env=None):
    env = os.environ if env is None else env
    p = argparse.ArgumentParser(
        prog="aml-register",
        description="Ensure a model version is registered in an Azure ML workspace. "
                    "Every input falls back to its INPUT_<NAME> environment variable.",
    )
    for name in INPUT_NAMES:
        p.add_argument(f"--{name}", default=get_input(name, env), help=INPUT_HELP[name])
    p.add_argument("--backend", default=get_input("backend", env) or "cli",
                   help=f"Registry backend: {' or '.join(BACKEND_CHOICES)} (default: cli)")
    p.add_argument("--az-path", default=env.get("AZ_CLI_PATH") or "az",
                   help="Azure CLI executable used by the cli backend")
    p.add_argument("--subscription-id", default=None,
                   help="Subscription id for the sdk backend (default: AZURE_SUBSCRIPTION_ID)")
    p.add_argument("--verbose", action="store_true",
                   default=env.get("RUNNER_DEBUG") == "1")
    return p.parse_args(argv)


def warn_if_missing_path(model_path: str):
    # URIs (azureml:..., https://...) are resolved by Azure, not locally
    if ":" in model_path and not Path(model_path).drive:
        return
    if not Path(model_path).exists():
        logger.warning("⚠️ Model path '%s' does not exist locally.", model_path)


def main(argv=None, env=None, backend=None) -> int:
    env = os.environ if env is None else env
    args = parse_args(argv, env)
    configure_logging(args.verbose)

    try:
        params = resolve_parameters(
            {name: getattr(args, name.replace("-", "_")) for name in INPUT_NAMES})
        warn_if_missing_path(params.model_path)
        if backend is None:
            backend = build_backend(args.backend, az_path=args.az_path,
                                    subscription_id=args.subscription_id, env=env)
        result = ensure_model_registered(params, backend)
        if not result.succeeded:
            raise result.error
    except RegistrationError as e:
        logger.error("❌ %s", e)
        print(f"FATAL: {e}", file=sys.stderr)
        return set_failed(f"❌ Action failed: {e}")
    except Exception as e:
        logger.error("❌ Unexpected error: %r", e)
        print(f"FATAL: {e!r}", file=sys.stderr)
        return set_failed(f"❌ Action failed: {type(e).__name__}: {e}")
    return 0
