# -*- coding: utf-8 -*-
"""HTML 实体工具 — 纯函数，无 UI 依赖

功能:
    - 文本 → 十进制数字字符引用（&#60; 形式）
    - HTML 文档 → 纯文本（基于 lxml，实体解析、标签剥离）
"""

import re

from lxml import etree, html

# 字母、数字、空格之外的字符一律转义
_NEEDS_REF = re.compile(r'[^a-zA-Z0-9 ]')


# ── 编码 ─────────────────────────────────────────────────────
def to_char_refs(text):
    """把字母/数字/空格以外的每个字符替换为 &#<码点>;"""
    return _NEEDS_REF.sub(lambda m: f'&#{ord(m.group())};', text)


# ── 解码 ─────────────────────────────────────────────────────
def html_to_text(html_str):
    """按完整 HTML 文档解析，返回根节点的文本内容。

    注释被丢弃，<script>/<style>/<title> 中的文本保留。
    空白输入、只含注释或 DOCTYPE 的文档返回 ""；
    lxml 无法解析的输入抛出 ValueError。
    """
    if not html_str.strip():
        return ''
    try:
        doc = html.document_fromstring(html_str)
    except etree.ParserError:
        # "Document is empty"
        return ''
    except etree.XMLSyntaxError as e:
        raise ValueError(str(e)) from e
    return str(doc.text_content())
