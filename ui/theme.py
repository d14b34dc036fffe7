# -*- coding: utf-8 -*-
"""主题 — 浅色 / 深色调色板与持久化

持久化键: "theme" → "dark" | "light"（QSettings，启动时读取一次，每次切换写入）
"""

import logging

from PyQt5.QtCore import QSettings
from PyQt5.QtGui import QColor, QPalette

logger = logging.getLogger(__name__)

ORG_NAME = "CodecPad"
APP_NAME = "CodecPad"
THEME_KEY = "theme"
LIGHT = "light"
DARK = "dark"

# ── 调色板 ───────────────────────────────────────────────────
PALETTES = {
    LIGHT: {
        QPalette.Window:          "#f0f2f5",
        QPalette.WindowText:      "#1e2433",
        QPalette.Base:            "#ffffff",
        QPalette.AlternateBase:   "#f5f6f8",
        QPalette.Text:            "#1e2433",
        QPalette.Button:          "#e8eaed",
        QPalette.ButtonText:      "#1e2433",
        QPalette.Highlight:       "#0078d4",
        QPalette.HighlightedText: "#ffffff",
        QPalette.ToolTipBase:     "#1e2433",
        QPalette.ToolTipText:     "#ffffff",
    },
    DARK: {
        QPalette.Window:          "#1a1f2e",
        QPalette.WindowText:      "#e0e4ea",
        QPalette.Base:            "#232939",
        QPalette.AlternateBase:   "#2e3650",
        QPalette.Text:            "#e0e4ea",
        QPalette.Button:          "#2e3650",
        QPalette.ButtonText:      "#e0e4ea",
        QPalette.Highlight:       "#0078d4",
        QPalette.HighlightedText: "#ffffff",
        QPalette.ToolTipBase:     "#e0e4ea",
        QPalette.ToolTipText:     "#1a1f2e",
    },
}


def build_palette(theme):
    palette = QPalette()
    for role, color in PALETTES[normalize(theme)].items():
        palette.setColor(role, QColor(color))
    return palette


def apply_theme(app, theme):
    app.setPalette(build_palette(theme))


def normalize(theme):
    """未知值一律视为浅色"""
    return DARK if theme == DARK else LIGHT


# ── 持久化 ───────────────────────────────────────────────────
class ThemeStore:
    """QSettings 包装。测试时可传入基于 ini 文件的 QSettings。"""

    def __init__(self, settings=None):
        self._settings = settings or QSettings(ORG_NAME, APP_NAME)

    def load(self) -> str:
        return normalize(self._settings.value(THEME_KEY, LIGHT, type=str))

    def save(self, theme: str):
        theme = normalize(theme)
        self._settings.setValue(THEME_KEY, theme)
        self._settings.sync()
        logger.debug("theme saved: %s", theme)

    def toggle(self) -> str:
        theme = LIGHT if self.load() == DARK else DARK
        self.save(theme)
        return theme
