import logging
import shlex
import subprocess
from dataclasses import dataclass
from typing import Sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    stdout: str = ""
    stderr: str = ""
    returncode: int | None = None
    error: str | None = None   # set when the command could not run at all

    @property
    def ok(self) -> bool:
        return self.error is None and self.returncode == 0

    def diagnostic(self, fallback: str) -> str:
        """Best available explanation of a failure."""
        return self.stderr.strip() or (self.error or "").strip() or fallback


def run_command(args: Sequence[str]) -> CommandResult:
    """Run a program with a discrete argument list and capture its output."""
    args = [str(a) for a in args]
    logger.debug("Running: %s", shlex.join(args))
    try:
        proc = subprocess.run(args, capture_output=True, text=True, check=False)
    except OSError as e:
        return CommandResult(error=f"{type(e).__name__}: {e}")
    return CommandResult(stdout=proc.stdout or "", stderr=proc.stderr or "",
                         returncode=proc.returncode)
