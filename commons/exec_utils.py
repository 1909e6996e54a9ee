"""
External process execution with merged stdout/stderr.
"""

import os
import subprocess
import threading
from typing import IO, List, Optional, Sequence, Union

from commons.logger import setup_logger

logger = setup_logger('exec_utils')

PathLike = Union[str, os.PathLike]

# Exit codes treated as success by the output-reading variants (ffmpeg -i exits 1)
ACCEPTED_EXIT_CODES = (0, 1)


class ExecUtil:
    """Runs external commands; standard error is merged into standard output."""

    @staticmethod
    def _cwd(work_dir: Optional[PathLike]) -> Optional[str]:
        if work_dir is not None and os.path.isdir(work_dir):
            return os.fspath(work_dir)
        return None

    def _start(self, work_dir: Optional[PathLike], cmd: Sequence[str]) -> subprocess.Popen:
        if not cmd:
            raise ValueError("Command must not be empty.")
        logger.debug(f"Executing: {' '.join(str(c) for c in cmd)}")
        return subprocess.Popen(
            [str(c) for c in cmd],
            cwd=self._cwd(work_dir),
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            errors='replace'
        )

    @staticmethod
    def _drain(stream: IO[str]) -> None:
        for line in stream:
            logger.debug(line.rstrip())

    def execute(self, work_dir: Optional[PathLike], *cmd: str) -> Optional[int]:
        """
        Run a command, discarding its output.

        Output is drained on a background thread so the child never blocks on
        a full pipe.

        Args:
            work_dir: Working directory; ignored unless it is an existing directory
            *cmd: Program and arguments

        Returns:
            Exit code, or None if the process could not be started
        """
        try:
            process = self._start(work_dir, cmd)
        except OSError as e:
            logger.error(f"Failed to start {cmd[0]}: {e}")
            return None

        with process:
            drain = threading.Thread(target=self._drain, args=(process.stdout,), daemon=True)
            drain.start()
            exit_code = process.wait()
            # Leaving the block closes stdout; the reader must be done with it
            drain.join()
        return exit_code

    def exe_and_read_line(self, work_dir: Optional[PathLike], *cmd: str) -> Optional[str]:
        """
        Run a command and return the first line of its output.

        Returns:
            The first line (without newline), or None when the exit code is
            neither 0 nor 1 or the process could not be started
        """
        try:
            process = self._start(work_dir, cmd)
        except OSError as e:
            logger.error(f"Failed to start {cmd[0]}: {e}")
            return None

        with process:
            line = process.stdout.readline()
            # Keep reading so the child can exit
            self._drain(process.stdout)
            exit_code = process.wait()

        if exit_code in ACCEPTED_EXIT_CODES:
            return line.rstrip('\r\n')
        logger.warning(f"{cmd[0]} exited with {exit_code}")
        return None

    def exe_and_read_all_output(self, work_dir: Optional[PathLike], cmds: List[str]) -> Optional[str]:
        """
        Run a command and return everything it printed.

        Returns:
            All output lines joined with newlines, or None when the exit code
            is neither 0 nor 1 or the process could not be started
        """
        try:
            process = self._start(work_dir, cmds)
        except OSError as e:
            logger.error(f"Failed to start {cmds[0] if cmds else '?'}: {e}")
            return None

        with process:
            lines = [line.rstrip('\r\n') + '\n' for line in process.stdout]
            exit_code = process.wait()

        if exit_code in ACCEPTED_EXIT_CODES:
            return ''.join(lines)
        logger.warning(f"{cmds[0]} exited with {exit_code}")
        return None
