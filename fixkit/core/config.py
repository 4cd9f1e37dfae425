"""Configuration helpers for fixkit."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

CONFIG_PATH = Path(__file__).resolve().parents[1] / "configs" / "fixkit.yaml"
CONFIG_ENV = "FIXKIT_CONFIG_PATH"

DEFAULTS: Dict[str, Any] = {
    "log_dir": None,
    "confirm_token": "Y",
    "system_drive": "C:",
    "critical_services": ["RpcSs", "EventLog", "Winmgmt", "Dnscache", "Dhcp", "CryptSvc", "LanmanWorkstation"],
    "temp_dirs": ["%TEMP%", "%SystemRoot%\\Temp"],
    "update_log_path": None,
    "clear_screen": True,
    "log_view_lines": 20,
}


@dataclass
class FixConfig:
    """Represents the settings used by the repair console."""

    raw: Dict[str, Any]

    @classmethod
    def from_file(cls, path: str | Path) -> "FixConfig":
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError("Configuration root must be a mapping")
        return cls(raw={**DEFAULTS, **data})

    @classmethod
    def defaults(cls) -> "FixConfig":
        return cls(raw=dict(DEFAULTS))

    def get(self, key: str, default: Any = None) -> Any:
        value = self.raw.get(key, default)
        return default if value is None else value

    def require(self, key: str) -> Any:
        if key not in self.raw:
            raise KeyError(f"Missing configuration key: {key}")
        return self.raw[key]

    @property
    def confirm_token(self) -> str:
        return str(self.get("confirm_token", "Y")).strip() or "Y"

    @property
    def log_dir(self) -> Optional[str]:
        return self.get("log_dir")

    @property
    def system_drive(self) -> str:
        return str(self.get("system_drive", "C:"))

    @property
    def critical_services(self) -> List[str]:
        return [str(s) for s in self.get("critical_services", [])]

    @property
    def temp_dirs(self) -> List[Path]:
        """Configured temp directories with environment variables expanded."""
        paths = []
        for entry in self.get("temp_dirs", []):
            expanded = os.path.expandvars(os.path.expanduser(str(entry)))
            # Unresolved variables stay as literal %NAME% text.
            if "%" in expanded or "$" in expanded:
                continue
            paths.append(Path(expanded))
        return paths

    @property
    def update_log_path(self) -> Path:
        configured = self.get("update_log_path")
        if configured:
            return Path(os.path.expandvars(str(configured))).expanduser()
        return Path.home() / "Desktop" / "WindowsUpdate.log"

    @property
    def clear_screen(self) -> bool:
        return bool(self.get("clear_screen", True))

    @property
    def log_view_lines(self) -> int:
        return int(self.get("log_view_lines", 20))


def load_config(path: str | Path | None = None) -> FixConfig:
    """Load configuration from ``path``, ``$FIXKIT_CONFIG_PATH`` or the packaged defaults."""
    candidate = path or os.environ.get(CONFIG_ENV)
    if candidate:
        return FixConfig.from_file(candidate)
    if CONFIG_PATH.exists():
        return FixConfig.from_file(CONFIG_PATH)
    return FixConfig.defaults()
