"""
Theme support for the Call Break GUI.

Provides dark (default) and light stylesheets, persisted via QSettings.
"""
from __future__ import annotations

from PySide6 import QtCore, QtWidgets

SETTINGS_ORG = "CallBreak"
SETTINGS_APP = "CallBreak"
THEME_KEY = "theme"

DARK = "dark"
LIGHT = "light"
THEMES = (DARK, LIGHT)

DARK_STYLESHEET = """
QWidget { background-color: #1f3b2d; color: #e8f0e8; }
QMainWindow { background-color: #1f3b2d; }
QGroupBox {
    background-color: #264a38;
    border: 1px solid #3d6b54;
    border-radius: 4px;
    margin-top: 12px;
    padding-top: 14px;
    font-weight: bold;
}
QGroupBox::title { subcontrol-origin: margin; left: 10px; padding: 0 4px 2px 4px; background-color: transparent; }
QPushButton {
    background-color: #2f5a45;
    color: #e8f0e8;
    border: 1px solid #3d6b54;
    border-radius: 4px;
    padding: 6px 12px;
}
QPushButton:hover { background-color: #3d6b54; }
QPushButton:pressed { background-color: #4a7d63; }
QPushButton:disabled { background-color: #24453a; color: #7a9585; }
QPushButton[card="true"] {
    background-color: #fafafa;
    color: #202020;
    border: 1px solid #b0b0b0;
    min-width: 44px;
    min-height: 64px;
    font-size: 16px;
}
QPushButton[card="true"][red="true"] { color: #c62828; }
QPushButton[card="true"]:enabled { border: 2px solid #f9a825; }
QPushButton[card="true"]:disabled { background-color: #d0d0d0; color: #808080; }
QSpinBox, QComboBox {
    background-color: #2f5a45;
    color: #e8f0e8;
    border: 1px solid #3d6b54;
    border-radius: 4px;
    padding: 4px;
}
QComboBox QAbstractItemView { background-color: #2f5a45; color: #e8f0e8; }
QLabel { color: #e8f0e8; background-color: transparent; }
QLabel:disabled { color: #7a9585; background-color: transparent; }
"""

LIGHT_STYLESHEET = """
QPushButton[card="true"] { min-width: 44px; min-height: 64px; font-size: 16px; }
QPushButton[card="true"][red="true"] { color: #c62828; }
"""


def get_saved_theme() -> str:
    settings = QtCore.QSettings(SETTINGS_ORG, SETTINGS_APP)
    return settings.value(THEME_KEY, DARK, type=str)


def save_theme(theme: str) -> None:
    settings = QtCore.QSettings(SETTINGS_ORG, SETTINGS_APP)
    settings.setValue(THEME_KEY, theme)


def apply_theme(app: QtWidgets.QApplication, theme: str) -> None:
    if theme == DARK:
        app.setStyleSheet(DARK_STYLESHEET)
    else:
        app.setStyleSheet(LIGHT_STYLESHEET)
