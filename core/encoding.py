# -*- coding: utf-8 -*-
"""编码/解码引擎 — 纯函数，无 UI 依赖

支持四种方式: Base64 / Hex / URL / HTML 实体。

    encode(mode, text)  → 结果字符串，失败时为 "Encoding error: ..."
    decode(mode, text)  → 结果字符串，失败时为 "Decoding error: ..."
    convert(mode, direction, text) → ConversionResult

解码后统一尝试 JSON 美化（2 空格缩进），失败则原样返回。
"""

import base64
import binascii
import enum
import logging
import re
import urllib.parse
from dataclasses import dataclass
from typing import Optional

from .html_tools import html_to_text, to_char_refs
from .json_fmt import try_pretty_json

logger = logging.getLogger(__name__)


# ── 错误类型 ─────────────────────────────────────────────────
class CodecError(Exception):
    """编解码失败的基类，message 即展示给用户的文本。"""

    prefix = "Codec error"

    def __init__(self, message):
        super().__init__(message)
        self.message = str(message)

    @property
    def display(self):
        return f"{self.prefix}: {self.message}"


class EncodingFailure(CodecError):
    prefix = "Encoding error"


class DecodingFailure(CodecError):
    prefix = "Decoding error"


class UnknownModeError(CodecError, ValueError):
    pass


# ── 枚举 ─────────────────────────────────────────────────────
class Mode(enum.Enum):
    BASE64 = "base64"
    HEX = "hex"
    URL = "url"
    HTML = "html"

    @classmethod
    def parse(cls, value):
        """接受 Mode 或其字符串值（不区分大小写）。"""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise UnknownModeError(f"unsupported mode: {value}") from None


class Direction(enum.Enum):
    ENCODE = "encode"
    DECODE = "decode"


@dataclass(frozen=True)
class ConversionResult:
    text: str = ""
    error: Optional[CodecError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def display(self) -> str:
        return self.text if self.error is None else self.error.display


# ── 编码函数 ─────────────────────────────────────────────────
def enc_base64(text):
    return base64.b64encode(text.encode('utf-8')).decode('ascii')


def enc_hex(text):
    return text.encode('utf-8').hex()


def enc_url(text):
    # quote() 默认保留 字母/数字/_.-~
    return urllib.parse.quote(text, safe='', errors='strict')


def enc_html(text):
    return to_char_refs(text)


# ── 解码函数 ─────────────────────────────────────────────────
_B64_ALPHABET = re.compile(r'[A-Za-z0-9+/]*')
_ASCII_WS = re.compile(r'[\t\n\f\r ]+')
_BAD_PERCENT = re.compile(r'%(?![0-9A-Fa-f]{2})')


def _b64_bytes(text):
    data = _ASCII_WS.sub('', text)
    if len(data) % 4 == 0 and data.endswith('='):
        stripped = data.rstrip('=')
        if len(data) - len(stripped) > 2:
            raise ValueError("Invalid base64 padding")
    else:
        stripped = data
    if not _B64_ALPHABET.fullmatch(stripped):
        raise ValueError("Invalid character in base64 input")
    if len(stripped) % 4 == 1:
        raise ValueError("Invalid base64 length")
    padded = stripped + '=' * (-len(stripped) % 4)
    return base64.b64decode(padded, validate=True)


def dec_base64(text):
    raw = _b64_bytes(text.strip())
    try:
        decoded = raw.decode('utf-8')
    except UnicodeDecodeError:
        decoded = raw.decode('latin-1')
    if '%' in decoded:
        decoded = try_percent_decode(decoded)
    return decoded


def dec_hex(text):
    if len(text) % 2 != 0:
        raise ValueError("Hex string length must be even")
    raw = bytes(int(text[i:i + 2], 16) for i in range(0, len(text), 2))
    # utf-8-sig: 去掉开头的 BOM
    return raw.decode('utf-8-sig', errors='replace')


def dec_url(text):
    if _BAD_PERCENT.search(text):
        raise ValueError("URI malformed")
    try:
        return urllib.parse.unquote(text, errors='strict')
    except UnicodeDecodeError:
        raise ValueError("URI malformed") from None


def dec_html(text):
    return html_to_text(text)


def try_percent_decode(text):
    """Base64 解码结果含 % 时的二次 URL 解码；失败则保留原文。"""
    try:
        return decode_raw(Mode.URL, text)
    except DecodingFailure as e:
        logger.debug("secondary percent-decode skipped: %s", e.message)
        return text


# ── 方法注册表 ───────────────────────────────────────────────
# {Mode: (显示名, 编码函数, 解码函数)}
ENCODING_METHODS = {
    Mode.BASE64: ("Base64",       enc_base64, dec_base64),
    Mode.HEX:    ("Hex (Base16)", enc_hex,    dec_hex),
    Mode.URL:    ("URL 编码",     enc_url,    dec_url),
    Mode.HTML:   ("HTML 实体",    enc_html,   dec_html),
}

_PRIMARY_ERRORS = (ValueError, UnicodeError, binascii.Error, TypeError)


def encode_text(mode, text: str) -> str:
    """编码；失败抛出 EncodingFailure。"""
    try:
        mode = Mode.parse(mode)
    except UnknownModeError as e:
        raise EncodingFailure(e.message) from e
    _label, enc_fn, _dec_fn = ENCODING_METHODS[mode]
    try:
        return enc_fn(text)
    except _PRIMARY_ERRORS as e:
        raise EncodingFailure(e) from e


def decode_raw(mode, text: str) -> str:
    """解码但不做 JSON 美化；失败抛出 DecodingFailure。"""
    try:
        mode = Mode.parse(mode)
    except UnknownModeError as e:
        raise DecodingFailure(e.message) from e
    _label, _enc_fn, dec_fn = ENCODING_METHODS[mode]
    try:
        return dec_fn(text)
    except DecodingFailure:
        raise
    except _PRIMARY_ERRORS as e:
        raise DecodingFailure(e) from e


def decode_text(mode, text: str) -> str:
    """解码 + JSON 美化；失败抛出 DecodingFailure。"""
    return try_pretty_json(decode_raw(mode, text))


def convert(mode, direction, text: str) -> ConversionResult:
    """统一入口: 根据方式和方向执行编码/解码，错误包装进结果。"""
    direction = Direction(direction)
    fn = encode_text if direction is Direction.ENCODE else decode_text
    try:
        return ConversionResult(text=fn(mode, text))
    except CodecError as e:
        logger.debug("%s %s failed: %s", direction.value, mode, e.message)
        return ConversionResult(error=e)


def encode(mode, text: str) -> str:
    return convert(mode, Direction.ENCODE, text).display


def decode(mode, text: str) -> str:
    return convert(mode, Direction.DECODE, text).display
