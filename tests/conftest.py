from __future__ import annotations

import os
from pathlib import Path

import pytest

# Headless Qt for CI; must be set before the first QApplication is created.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtCore import QSettings  # noqa: E402
from PyQt6.QtWidgets import QApplication  # noqa: E402

from modnote.services.file_service import FileService  # noqa: E402
from modnote.services.settings_service import SettingsService  # noqa: E402


# --- Fallback QApplication fixture (works with or without pytest-qt) ---
@pytest.fixture(scope="session")
def qapp():
    """Provide a QApplication for tests that need Qt.
    Creates one if not present; reuses existing otherwise.
    """
    app = QApplication.instance()
    created = False
    if app is None:
        app = QApplication([])
        created = True
    try:
        yield app
    finally:
        # Don't forcibly quit a shared app; only close if we created it here.
        if created:
            app.quit()


# --- Other common fixtures ---


@pytest.fixture()
def tmp_settings_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.ini"


@pytest.fixture()
def qsettings(tmp_settings_path: Path) -> QSettings:
    # Use an INI file so we don't touch system registry / platform stores
    s = QSettings(str(tmp_settings_path), QSettings.Format.IniFormat)
    s.clear()
    return s


@pytest.fixture()
def settings_service(qsettings: QSettings) -> SettingsService:
    return SettingsService(qsettings)


@pytest.fixture()
def file_service() -> FileService:
    return FileService()


@pytest.fixture()
def app_config(monkeypatch, tmp_path: Path):
    """AppConfig with defaults only: no user or project config file is visible."""
    from modnote.services.config import build_app_config

    monkeypatch.setattr(
        "modnote.services.config.ini_config_service.user_config_dir",
        lambda app: str(tmp_path / "no-user-config"),
        raising=True,
    )
    return build_app_config(project_root=tmp_path)
