from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Named colors keyed by role; rendered into one Qt style sheet for the whole window."""

    id: str
    background: str
    title_bar: str
    menu_bar: str
    text: str
    hover: str
    close_hover: str
    menu_hover: str
    separator: str
    menu_border: str

    def stylesheet(self) -> str:
        return f"""
            QMainWindow, #FrameContainer {{
                background-color: {self.title_bar};
            }}
            #TitleBar {{
                background-color: {self.title_bar};
            }}
            #TitleLabel {{
                color: {self.text};
                background: transparent;
                padding-left: 12px;
            }}
            #TitleButton, #CloseButton {{
                color: {self.text};
                background-color: {self.title_bar};
                border: none;
            }}
            #TitleButton:hover {{ background-color: {self.hover}; }}
            #CloseButton:hover {{ background-color: {self.close_hover}; }}

            QMenuBar {{
                background-color: {self.menu_bar};
                color: {self.text};
            }}
            QMenuBar::item {{ background: transparent; padding: 4px 10px; }}
            QMenuBar::item:selected {{ background-color: {self.menu_hover}; }}
            QMenu {{
                background-color: {self.menu_bar};
                color: {self.text};
                border: 1px solid {self.menu_border};
            }}
            QMenu::item:selected {{ background-color: {self.menu_hover}; }}
            QMenu::separator {{
                height: 1px;
                background: {self.separator};
                margin: 4px 5px 4px 20px;
            }}

            QPlainTextEdit {{
                background-color: {self.background};
                color: {self.text};
                border: none;
                selection-background-color: {self.menu_hover};
            }}

            QStatusBar {{
                background-color: {self.title_bar};
                color: {self.text};
            }}
            QStatusBar QLabel {{ color: {self.text}; }}
            QStatusBar::item {{ border: none; }}
        """


DARK_THEME = Theme(
    id="dark",
    background="#1E1E1E",
    title_bar="#2D2D2D",
    menu_bar="#3A3A3A",
    text="#FFFFFF",
    hover="#3A3A3A",
    close_hover="#E81123",
    menu_hover="#4A4A4A",
    separator="#5A5A5A",
    menu_border="#2A2A2A",
)


@dataclass(frozen=True)
class Fonts:
    text_family: str = "Consolas"
    text_size: float = 14.0
    ui_family: str = "Segoe UI"
    menu_size: float = 11.0
    title_size: float = 12.0
