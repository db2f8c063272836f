from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

from .constants import SETTINGS_JSON_PATH

log = logging.getLogger(__name__)

BACKUP_FREQUENCIES = ("hourly", "daily", "weekly", "monthly")
APPEARANCE_MODES = ("Light", "Dark")


def _as_bool(value: Any, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        v = value.strip().lower()
        if v in ("true", "1", "yes", "on"):
            return True
        if v in ("false", "0", "no", "off"):
            return False
    return default


@dataclass
class Settings:
    school_name: str = "SchoolAdmin Academy"
    school_address: str = "123 Education Street, Learning City, LC 12345"
    school_phone: str = "+1 (555) 123-4567"
    school_email: str = "admin@schooladmin.edu"
    academic_year: str = "2024-2025"
    currency: str = "USD"
    language: str = "en"
    timezone: str = "America/New_York"
    email_notifications: bool = True
    sms_notifications: bool = False
    push_notifications: bool = True
    auto_backup: bool = True
    backup_frequency: str = "daily"  # hourly | daily | weekly | monthly
    maintenance_mode: bool = False
    appearance_mode: str = "Light"  # Light | Dark

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "Settings":
        defaults = Settings()
        values: dict[str, Any] = {}
        for f in fields(Settings):
            default = getattr(defaults, f.name)
            raw = d.get(f.name, default)
            if isinstance(default, bool):
                values[f.name] = _as_bool(raw, default)
            else:
                values[f.name] = default if raw is None else str(raw)

        if values["backup_frequency"] not in BACKUP_FREQUENCIES:
            values["backup_frequency"] = defaults.backup_frequency
        if values["appearance_mode"] not in APPEARANCE_MODES:
            values["appearance_mode"] = defaults.appearance_mode
        return Settings(**values)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @property
    def dark_mode(self) -> bool:
        return self.appearance_mode == "Dark"


class SettingsStore:
    def __init__(self, path: Path = SETTINGS_JSON_PATH):
        self.path = path

    def load(self) -> Settings:
        if not self.path.exists():
            settings = Settings()
            self.save(settings)
            return settings

        with self.path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        return Settings.from_dict(data if isinstance(data, dict) else {})

    def save(self, settings: Settings) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as f:
            json.dump(settings.to_dict(), f, indent=2)
            f.write("\n")
        log.info("Saving settings: %s", settings.to_dict())


# Data export and import are placeholders until a backend exists.
def export_data() -> None:
    log.info("Exporting data...")


def import_data() -> None:
    log.info("Importing data...")
