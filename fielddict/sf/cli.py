"""Thin wrapper around the Salesforce ``sf`` command-line tool."""

from __future__ import annotations

import os
import subprocess
from typing import Callable, Sequence

from ..logging import get_logger

logger = get_logger("sf.cli")


class SalesforceCLIError(RuntimeError):
    """Raised when the Salesforce CLI cannot be run or reports a failure."""


class SalesforceCLI:
    """Runs ``sf`` commands and returns their stdout."""

    def __init__(
        self,
        executable: str | None = None,
        *,
        runner: Callable[[Sequence[str]], str] | None = None,
    ) -> None:
        self.executable = executable.strip() if executable and executable.strip() else "sf"
        self._runner = runner or self._default_runner

    def query_csv(self, org: str, soql: str) -> str:
        """Run a Tooling API query against ``org`` and return the CSV output."""
        args = [
            "data",
            "query",
            "--use-tooling-api",
            "--target-org",
            org,
            "--query",
            soql,
            "--result-format",
            "csv",
        ]
        return self.run(args)

    def run(self, args: Sequence[str]) -> str:
        command = self._build_command(args)
        logger.debug("Running: %s", " ".join(_quote(part) for part in command))
        return self._runner(command)

    def _build_command(self, args: Sequence[str]) -> list[str]:
        if self._is_windows():
            # cmd.exe resolves the sf.cmd shim through PATHEXT.
            return ["cmd.exe", "/c", self.executable, *args]
        return [self.executable, *args]

    @staticmethod
    def _default_runner(command: Sequence[str]) -> str:
        try:
            completed = subprocess.run(
                list(command),
                check=True,
                capture_output=True,
                text=True,
            )
        except FileNotFoundError as exc:
            raise SalesforceCLIError(
                f"Unable to locate '{command[0]}'. Install the Salesforce CLI or set sf_path."
            ) from exc
        except subprocess.CalledProcessError as exc:
            message = (exc.stderr or str(exc)).strip()
            raise SalesforceCLIError(f"Salesforce CLI failed. {message}") from exc
        return completed.stdout

    @staticmethod
    def _is_windows() -> bool:
        return os.name == "nt"


def _quote(part: str) -> str:
    return f'"{part}"' if any(char.isspace() for char in part) else part


__all__ = ["SalesforceCLI", "SalesforceCLIError"]
