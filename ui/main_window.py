# -*- coding: utf-8 -*-
"""主窗口 — 顶部标题栏（含主题切换）+ 编解码面板

布局:
    ┌──────────────────────────────────────────┐
    │  CodecPad                    [☾ 深色]     │
    ├──────────────────────────────────────────┤
    │  CodecPanel                              │
    └──────────────────────────────────────────┘
"""

from PyQt5.QtWidgets import (
    QMainWindow, QWidget, QHBoxLayout, QVBoxLayout,
    QLabel, QPushButton, QApplication,
)
from PyQt5.QtGui import QCursor
from PyQt5.QtCore import Qt

from .panels.codec_panel import CodecPanel
from .theme import DARK, ThemeStore, apply_theme


class MainWindow(QMainWindow):

    def __init__(self, store=None):
        super().__init__()
        self._store = store or ThemeStore()
        self._theme = self._store.load()

        self._setup_window()
        self._build_ui()
        self._refresh_toggle()

    # ── 窗口属性 ─────────────────────────────────────────────
    def _setup_window(self):
        self.setWindowTitle("CodecPad — 编码 / 解码")
        self.resize(860, 640)
        self.setMinimumSize(640, 480)

    # ── 整体布局 ─────────────────────────────────────────────
    def _build_ui(self):
        central = QWidget()
        root = QVBoxLayout(central)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(0)

        header = QWidget()
        header.setObjectName("header")
        header.setStyleSheet(
            "#header{background: qlineargradient("
            "x1:0,y1:0,x2:1,y2:0,"
            "stop:0 #1a1f2e, stop:1 #232939);}")
        hl = QHBoxLayout(header)
        hl.setContentsMargins(18, 10, 18, 10)

        title = QLabel("CodecPad")
        title.setStyleSheet(
            "color:#ffffff; font-size:18px; font-weight:bold; "
            "background:transparent;")
        hl.addWidget(title)
        hl.addStretch()

        self.theme_btn = QPushButton()
        self.theme_btn.setFixedHeight(30)
        self.theme_btn.setCursor(QCursor(Qt.PointingHandCursor))
        self.theme_btn.setStyleSheet(
            "QPushButton{color:#b0b8c4; background:transparent; "
            "border:1px solid #3a4254; border-radius:6px; padding:0 14px;}"
            "QPushButton:hover{background:rgba(255,255,255,0.07); "
            "color:#e0e4ea;}")
        self.theme_btn.clicked.connect(self.toggle_theme)
        hl.addWidget(self.theme_btn)
        root.addWidget(header)

        self.codec_panel = CodecPanel()
        root.addWidget(self.codec_panel, stretch=1)
        self.setCentralWidget(central)

    # ── 主题 ─────────────────────────────────────────────────
    @property
    def theme(self):
        return self._theme

    def toggle_theme(self):
        self._theme = self._store.toggle()
        app = QApplication.instance()
        if app is not None:
            apply_theme(app, self._theme)
        self._refresh_toggle()

    def _refresh_toggle(self):
        if self._theme == DARK:
            self.theme_btn.setText("☀ 浅色")
        else:
            self.theme_btn.setText("☾ 深色")
