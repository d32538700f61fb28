from __future__ import annotations

import logging
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from modnote.domain.interfaces import IConfigService
from modnote.domain.models import DEFAULT_CORNER_RADIUS
from modnote.domain.zoom import MAX_FONT_SIZE, MIN_FONT_SIZE
from modnote.services.config.ini_config_service import IniConfigService
from modnote.utils.constants import RESIZE_MARGIN
from modnote.utils.logging import parse_level

DEFAULT_FONT_FAMILY = "Consolas"
DEFAULT_FONT_SIZE = 14.0


def _project_root_fallback() -> Path:
    """
    Best-effort project root resolution that also works in PyInstaller:
      - PyInstaller onefile/onedir uses sys._MEIPASS as bundle root
      - dev mode uses this file location to walk upward
    """
    meipass = getattr(sys, "_MEIPASS", None)  # type: ignore[attr-defined]
    if meipass:
        return Path(meipass)

    # app_config.py -> modnote/services/config/app_config.py
    return Path(__file__).resolve().parents[3]


@dataclass(frozen=True)
class AppConfig:
    """
    Typed view over the INI configuration with editor defaults.

      [editor]  font_family = Consolas, font_size = 14   (clamped to the zoom range)
      [window]  corner_radius = 8, resize_margin = 6     (negative values fall back to defaults)
      [logging] level = INFO, console = true
    """

    ini: IConfigService
    project_root: Path

    def font_family(self) -> str:
        value = (self.ini.get("editor", "font_family", None) or "").strip()
        return value or DEFAULT_FONT_FAMILY

    def font_size(self) -> float:
        raw = self.ini.get("editor", "font_size", None)
        try:
            size = float(raw) if raw is not None else DEFAULT_FONT_SIZE
        except ValueError:
            size = DEFAULT_FONT_SIZE
        return max(MIN_FONT_SIZE, min(MAX_FONT_SIZE, size))

    def corner_radius(self) -> int:
        value = self.ini.get_int("window", "corner_radius", DEFAULT_CORNER_RADIUS)
        return value if value is not None and value >= 0 else DEFAULT_CORNER_RADIUS

    def resize_margin(self) -> int:
        value = self.ini.get_int("window", "resize_margin", RESIZE_MARGIN)
        return value if value is not None and value >= 0 else RESIZE_MARGIN

    def log_level(self) -> int:
        return parse_level(self.ini.get("logging", "level", None))

    def log_to_console(self) -> bool:
        return bool(self.ini.get_bool("logging", "console", True))

    def as_dict(self) -> Mapping[str, Mapping[str, str]]:
        return self.ini.as_dict()

    @property
    def loaded_from(self) -> Path | None:
        return getattr(self.ini, "loaded_from", None)


def build_app_config(
    *, explicit_ini: Path | None = None, project_root: Path | None = None
) -> AppConfig:
    root = project_root or _project_root_fallback()
    ini = IniConfigService(explicit_path=explicit_ini, project_root=root)
    return AppConfig(ini=ini, project_root=root)
