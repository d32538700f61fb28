from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import QSettings

from modnote.domain.interfaces import IFileService, ISettingsService
from modnote.domain.zoom import MAX_FONT_SIZE, MIN_FONT_SIZE
from modnote.services.config import AppConfig, build_app_config
from modnote.services.file_service import FileService
from modnote.services.settings_service import SettingsService
from modnote.services.ui.adapters import QtFileDialogService, QtMessageService
from modnote.services.ui.main_window import MainWindow
from modnote.services.ui.ports.dialogs import IFileDialogService
from modnote.services.ui.ports.messages import IMessageService
from modnote.services.ui.presenters import MainPresenter
from modnote.services.ui.theme import DARK_THEME, Fonts, Theme
from modnote.services.ui.widget_factory import WidgetFactory
from modnote.utils.constants import APP_NAME, APP_ORG

LOGGER = logging.getLogger(__name__)


class Container:
    """
    Lightweight DI container:
      - Wires default services if not provided
      - Builds the themed MainWindow and attaches its presenter
    """

    def __init__(
        self,
        files: IFileService | None = None,
        settings: ISettingsService | None = None,
        qsettings: QSettings | None = None,
        dialogs: IFileDialogService | None = None,
        messages: IMessageService | None = None,
        config: AppConfig | None = None,
        theme: Theme = DARK_THEME,
    ) -> None:
        self.file_service: IFileService = files or FileService()
        self.settings_service: ISettingsService = settings or SettingsService(
            qsettings or QSettings()
        )
        self.dialogs: IFileDialogService = dialogs or QtFileDialogService()
        self.messages: IMessageService = messages or QtMessageService()
        self.config: AppConfig = config or build_app_config()
        self.theme = theme

    @staticmethod
    def default(
        qsettings: QSettings | None = None,
        *,
        config: AppConfig | None = None,
        organization: str = APP_ORG,
        application: str = APP_ORG,
    ) -> Container:
        if qsettings is None:
            qsettings = QSettings(organization, application)
        return Container(qsettings=qsettings, config=config)

    # ---------- UI factories ----------

    def initial_font_size(self) -> float:
        """Last persisted zoom level if any, else the configured size."""
        size = self.settings_service.get_font_size()
        if size is None:
            return self.config.font_size()
        return max(MIN_FONT_SIZE, min(MAX_FONT_SIZE, size))

    def build_widget_factory(self) -> WidgetFactory:
        fonts = Fonts(text_family=self.config.font_family(), text_size=self.config.font_size())
        return WidgetFactory(self.theme, fonts)

    def build_main_presenter(self, view: MainWindow) -> MainPresenter:
        return MainPresenter(
            view=view,
            files=self.file_service,
            dialogs=self.dialogs,
            messages=self.messages,
            settings=self.settings_service,
            corner_radius=self.config.corner_radius(),
        )

    def build_main_window(
        self,
        *,
        start_path: Path | None = None,
        app_title: str = APP_NAME,
    ) -> MainWindow:
        window = MainWindow(
            self.build_widget_factory(),
            self.settings_service,
            font_size=self.initial_font_size(),
            resize_margin=self.config.resize_margin(),
            app_title=app_title,
        )
        presenter = self.build_main_presenter(window)
        window.attach_presenter(presenter)
        presenter.start(start_path)
        LOGGER.debug("Main window built (start_path=%s)", start_path)
        return window
