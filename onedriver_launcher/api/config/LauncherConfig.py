"""Top-level launcher configuration."""

import json
import os
from contextlib import suppress
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ...constants import APP_ID, LOG_LEVELS, ONEDRIVER_SERVICE_TEMPLATE
from ...utils.get_launcher_home import get_launcher_home


class LauncherConfig(BaseModel):
    """Configuration handed to the launcher window and the CLI commands."""

    model_config = ConfigDict(extra="forbid")

    app_id: str = Field(APP_ID, description="GTK application id")
    unit_template: str = Field(ONEDRIVER_SERVICE_TEMPLATE, description="Template unit instantiated per mountpoint")
    user_manager: bool = Field(True, description="Talk to the per-user systemd instance (systemctl --user)")
    systemctl_timeout: float = Field(10.0, gt=0, description="Seconds to wait for each systemctl call")
    validate_mountpoint: bool = Field(True, description="Require new mountpoints to be empty directories")
    cache_dir: str | None = Field(None, description="onedriver cache directory, default $XDG_CACHE_HOME/onedriver")
    log_level: str = Field("INFO", description="Log level for launcher.log")

    @field_validator("unit_template", "app_id")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be empty")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"must be one of {', '.join(LOG_LEVELS)}, got {v!r}")
        return level

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get launcher home directory (ONEDRIVER_LAUNCHER_HOME or the XDG config dir)."""
        return get_launcher_home()

    @classmethod
    def get_config_path(cls) -> Path:
        return cls.get_home_dir() / "config.json"

    def get_cache_dir(self) -> Path:
        """Directory where onedriver keeps one cache folder per mountpoint."""
        if self.cache_dir:
            return Path(self.cache_dir).expanduser()
        xdg_cache = os.environ.get("XDG_CACHE_HOME")
        base = Path(xdg_cache).expanduser() if xdg_cache else Path.home() / ".cache"
        return base / "onedriver"

    @classmethod
    def load(cls) -> "LauncherConfig":
        """Load and validate config from file.

        A missing file is not an error; every field has a default.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must contain a JSON object, got {type(raw).__name__}")

        try:
            return cls(**raw)
        except ValidationError as e:
            first = e.errors()[0]
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc)
            detail = f"{field}: {first.get('msg', str(e))}" if field else first.get("msg", str(e))
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")

    def save(self) -> None:
        """Save the configuration atomically (temp file, then rename)."""
        path = self.get_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            with temp_path.open("w") as fh:
                json.dump(self.to_dict(), fh, indent=4)
            temp_path.replace(path)
        except OSError as e:
            with suppress(OSError):
                if temp_path.exists():
                    temp_path.unlink()
            raise RuntimeError(f"Failed to save config: {e}") from e
