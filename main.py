#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""CodecPad — 编码 / 解码小工具  入口"""

import logging
import os
import sys
from PyQt5.QtWidgets import QApplication
from PyQt5.QtGui import QFont
from PyQt5.QtCore import Qt

LOG_LEVEL_ENV = "CODECPAD_LOG_LEVEL"


def setup_logging():
    level = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main():
    setup_logging()

    # High-DPI 支持
    QApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
    QApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)

    app = QApplication(sys.argv)
    app.setStyle('Fusion')

    # ── 全局字体: 中英文兼顾，11pt 舒适阅读 ──────────────
    font = QFont("Microsoft YaHei UI", 11)
    font.setStyleHint(QFont.SansSerif)
    app.setFont(font)

    from ui.theme import ThemeStore, apply_theme
    from ui.main_window import MainWindow

    store = ThemeStore()
    apply_theme(app, store.load())

    window = MainWindow(store)
    window.show()
    sys.exit(app.exec_())


if __name__ == '__main__':
    main()
