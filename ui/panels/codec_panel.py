# -*- coding: utf-8 -*-
"""编码/解码 面板"""

from PyQt5.QtWidgets import (
    QHBoxLayout, QComboBox, QLabel, QGroupBox, QVBoxLayout
)
from .base_panel import BasePanel
from core.encoding import ENCODING_METHODS, Mode, convert


class CodecPanel(BasePanel):

    def build_controls(self, layout):
        group = QGroupBox("编码/解码 选项")
        g_layout = QVBoxLayout(group)

        row1 = QHBoxLayout()
        row1.addWidget(QLabel("方法:"))
        self._method = QComboBox()
        for mode, (label, _enc, _dec) in ENCODING_METHODS.items():
            self._method.addItem(label, mode.value)
        self._method.setMinimumWidth(160)
        row1.addWidget(self._method)
        row1.addStretch()
        g_layout.addLayout(row1)

        layout.addWidget(group)

    def mode(self) -> Mode:
        return Mode(self._method.currentData())

    def set_mode(self, mode):
        idx = self._method.findData(Mode.parse(mode).value)
        self._method.setCurrentIndex(idx)

    def process(self, text, direction):
        result = convert(self.mode(), direction, text)
        return result.display, result.ok
