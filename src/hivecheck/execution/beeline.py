"""Execute HiveQL through the beeline command-line client."""

from __future__ import annotations

import logging
import shutil
import subprocess
from collections.abc import Sequence

from hivecheck.config import HiveSettings
from hivecheck.exceptions import (
    ConnectionFailureError,
    QueryExecutionError,
    ToolUnavailableError,
)


class BeelineExecutor:
    """Runs statements with ``beeline -u <jdbc url> -e <sql>``.

    A new beeline process, and with it a new HiveServer2 session, is started
    for every statement.
    """

    def __init__(self, settings: HiveSettings | None = None) -> None:
        """Initialize the executor.

        Args:
            settings: Connection settings; read from the environment if omitted

        """
        self.settings = settings or HiveSettings()
        self.logger = logging.getLogger(self.__class__.__name__)

    def build_command(
        self, binary: str, sql: str, options: Sequence[str] | None = None
    ) -> list[str]:
        """Assemble the beeline argument list for one statement."""
        command = [
            binary,
            f"--fastConnect={str(self.settings.fast_connect).lower()}",
            f"--silent={str(self.settings.silent).lower()}",
        ]
        command.extend(self.settings.extra_options)
        command.extend(options or [])
        command.extend(["-u", self.settings.jdbc_url, "-e", sql])
        return command

    def execute(self, sql: str, options: Sequence[str] | None = None) -> str:
        """Run a statement and return beeline's stdout.

        Args:
            sql: Statement to run
            options: Extra beeline flags for this call, e.g. --outputformat=csv2

        Returns:
            Tabular text printed by beeline

        Raises:
            ToolUnavailableError: If beeline cannot be found or started
            ConnectionFailureError: If no HiveServer2 host is configured
            QueryExecutionError: If beeline exits with a non-zero status

        """
        binary = shutil.which(self.settings.beeline_path)
        if binary is None:
            msg = f"beeline not available (looked for {self.settings.beeline_path!r})"
            raise ToolUnavailableError(msg)

        if not self.settings.server:
            msg = "No HiveServer2 host configured (set HIVE_SERVER)"
            raise ConnectionFailureError(msg, sql=sql)

        command = self.build_command(binary, sql, options)
        self.logger.debug(f"Running beeline against {self.settings.jdbc_url}: {sql}")

        try:
            result = subprocess.run(command, capture_output=True, text=True, check=True)
        except FileNotFoundError as e:
            msg = f"beeline not available: {e}"
            raise ToolUnavailableError(msg) from e
        except subprocess.CalledProcessError as e:
            stderr = e.stderr or ""
            msg = stderr.strip() or f"beeline exited with status {e.returncode}"
            raise QueryExecutionError(
                msg, sql=sql, returncode=e.returncode, stderr=stderr
            ) from e

        return result.stdout


__all__ = ["BeelineExecutor"]
