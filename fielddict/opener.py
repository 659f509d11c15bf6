"""Open generated files with the operating system's default application."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path
from typing import Callable, List, Sequence

from .logging import get_logger

logger = get_logger("opener")

Launcher = Callable[[Sequence[str]], None]


def is_wsl() -> bool:
    """Return True when running inside Windows Subsystem for Linux."""
    if os.environ.get("WSL_DISTRO_NAME"):
        return True
    try:
        return "microsoft" in Path("/proc/version").read_text(encoding="utf-8").lower()
    except OSError:
        return False


def open_commands(path: Path, platform: str | None = None, wsl: bool | None = None) -> List[List[str]]:
    """Return launcher commands to try, in order, for ``path`` on ``platform``."""
    platform = platform or sys.platform
    target = str(path)
    if platform.startswith("linux") and (is_wsl() if wsl is None else wsl):
        return [["powershell.exe", "-NoProfile", "-Command", "Start-Process", target]]
    if platform == "win32":
        return [
            ["explorer.exe", target],
            ["cmd.exe", "/c", "start", "", target],
            ["powershell", "-NoProfile", "-Command", "Start-Process", target],
        ]
    if platform == "darwin":
        return [["open", target]]
    return [["xdg-open", target], ["gio", "open", target]]


def _spawn_detached(command: Sequence[str]) -> None:
    kwargs: dict[str, object] = {
        "stdin": subprocess.DEVNULL,
        "stdout": subprocess.DEVNULL,
        "stderr": subprocess.DEVNULL,
    }
    if os.name == "nt":
        kwargs["creationflags"] = getattr(subprocess, "DETACHED_PROCESS", 0)
    else:
        kwargs["start_new_session"] = True
    subprocess.Popen(list(command), **kwargs)


def open_file(path: Path, *, launcher: Launcher | None = None) -> bool:
    """Try each platform launcher until one starts; return whether any did."""
    if not path.exists():
        logger.error("Cannot open: file not found at %s", path)
        return False

    launch = launcher or _spawn_detached
    for command in open_commands(path):
        try:
            launch(command)
        except OSError as exc:
            logger.debug("Launcher %s failed: %s", command[0], exc)
            continue
        logger.info("Opening %s via %s", path.name, command[0])
        return True

    logger.warning("Failed to open %s with any known launcher", path)
    return False


__all__ = ["is_wsl", "open_commands", "open_file"]
