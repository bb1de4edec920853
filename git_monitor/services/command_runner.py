"""External command execution for repository probes.

Every call spawns exactly one process and waits for it. Failures of any
kind (nonzero exit, missing executable, timeout) are reported in the
returned CommandResult rather than raised.
"""

import logging
import os
import subprocess
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    """Captured outcome of one external command."""

    stdout: str
    stderr: str
    succeeded: bool
    returncode: int | None = None
    timed_out: bool = False

    @property
    def completed(self) -> bool:
        """True when the process started and exited on its own."""
        return self.returncode is not None


class CommandRunner:
    """Runs commands synchronously and captures their output."""

    def __init__(self, timeout: float | None = None):
        """Initialize the runner.

        Args:
            timeout: Default seconds before a command is killed. None waits forever.
        """
        self.timeout = timeout

    def run(
        self,
        args: Sequence[str],
        env: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ) -> CommandResult:
        """Run a command.

        Args:
            args: Command vector (argv).
            env: Environment overrides merged over the current environment.
            timeout: Seconds before the command is killed. Defaults to the runner timeout.

        Returns:
            CommandResult with stdout, stderr and success flag.
        """
        timeout = timeout if timeout is not None else self.timeout
        merged_env = {**os.environ, **env} if env else None
        logger.debug(f"Running: {' '.join(args)}")

        try:
            result = subprocess.run(
                list(args),
                capture_output=True,
                text=True,
                env=merged_env,
                timeout=timeout,
            )
        except subprocess.TimeoutExpired:
            logger.debug(f"Command timed out after {timeout}s: {args[0]}")
            return CommandResult(
                stdout="",
                stderr=f"Command timed out after {timeout}s",
                succeeded=False,
                timed_out=True,
            )
        except (FileNotFoundError, OSError) as e:
            logger.debug(f"Command failed to start: {e}")
            return CommandResult(stdout="", stderr=str(e), succeeded=False)

        return CommandResult(
            stdout=result.stdout or "",
            stderr=result.stderr or "",
            succeeded=result.returncode == 0,
            returncode=result.returncode,
        )
