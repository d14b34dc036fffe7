"""Tests for the codec panel and main window wiring."""

import pytest

from core.encoding import Direction, Mode
from ui.main_window import MainWindow
from ui.panels.codec_panel import CodecPanel
from ui.theme import DARK, LIGHT, ThemeStore


@pytest.fixture
def panel(qapp):
    return CodecPanel()


def test_panel_lists_all_modes(panel):
    modes = [panel._method.itemData(i) for i in range(panel._method.count())]
    assert modes == ["base64", "hex", "url", "html"]
    assert panel.mode() is Mode.BASE64


def test_encode_button_writes_output(panel):
    panel.set_mode("hex")
    panel.input_area.setPlainText("hi")
    panel.encode_btn.click()
    assert panel.output_area.toPlainText() == "6869"
    assert panel.status_text() == "编码完成"


def test_decode_error_is_shown_in_output(panel):
    panel.set_mode(Mode.HEX)
    panel.input_area.setPlainText("4")
    panel.run(Direction.DECODE)
    assert panel.output_area.toPlainText() == (
        "Decoding error: Hex string length must be even")
    assert panel.status_text() == "解码失败"


def test_decode_pretty_prints_json(panel):
    panel.set_mode("base64")
    panel.input_area.setPlainText("eyJhIjoxfQ==")
    panel.decode_btn.click()
    assert panel.output_area.toPlainText() == '{\n  "a": 1\n}'


def test_swap_and_clear(panel):
    panel.set_mode("url")
    panel.input_area.setPlainText("a b")
    panel.run(Direction.ENCODE)
    panel._swap()
    assert panel.input_area.toPlainText() == "a%20b"
    assert panel.output_area.toPlainText() == "a b"
    panel._clear()
    assert panel.input_area.toPlainText() == ""
    assert panel.status_text() == "已清空"


def test_main_window_toggles_and_persists_theme(qapp, settings):
    window = MainWindow(ThemeStore(settings))
    assert window.theme == LIGHT

    window.theme_btn.click()
    assert window.theme == DARK
    assert ThemeStore(settings).load() == DARK

    restored = MainWindow(ThemeStore(settings))
    assert restored.theme == DARK
