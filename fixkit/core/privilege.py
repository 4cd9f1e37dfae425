"""Elevated-privilege detection."""
from __future__ import annotations

import os

PRIVILEGE_MESSAGE = (
    "Administrator privileges are required. "
    "Right-click the console and choose 'Run as administrator', then try again."
)


def is_admin() -> bool:
    """Return True when the process holds administrative rights."""
    if os.name == "nt":
        try:
            import ctypes

            return bool(ctypes.windll.shell32.IsUserAnAdmin())
        except (AttributeError, OSError):
            return False
    try:
        return os.geteuid() == 0
    except AttributeError:
        return False
