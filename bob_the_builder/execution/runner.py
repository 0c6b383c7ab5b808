"""Process runner used to invoke the external toolchain.

Contract:
- Inputs: Command arguments, working directory, environment overrides
- Outputs: Process exit status
- Side Effects: Spawns a child process and blocks until it exits
"""

import logging
import os
import shlex
import subprocess
from collections.abc import Mapping
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from ..errors import ToolchainInvocationError

logger = logging.getLogger(__name__)


class ProcessRunner(Protocol):
    """Capability to run a command to completion."""

    def run(self, args: Sequence[str], cwd: Path, env: Mapping[str, str]) -> int:
        """Run a command and return its exit status.

        Args:
            args: Command and arguments
            cwd: Working directory of the child process
            env: Variables to set on top of the inherited environment
        """
        ...


class SubprocessRunner:
    """Runs commands with subprocess, streaming output to the console.

    There is no timeout: a hung toolchain hangs the build.
    """

    def run(self, args: Sequence[str], cwd: Path, env: Mapping[str, str]) -> int:
        logger.debug(f"Running in {cwd}: {shlex.join(args)}")

        child_env = dict(os.environ)
        child_env.update(env)

        try:
            result = subprocess.run(list(args), cwd=str(cwd), env=child_env)
        except OSError as e:
            raise ToolchainInvocationError(f"Failed to start {args[0]!r} in {cwd}: {e}") from e

        return result.returncode
