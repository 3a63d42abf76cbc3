#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
XML 编解码模块

微软翻译API使用的两种XML文档:
1. 字符串数组 <ArrayOfstring><string>..</string>...</ArrayOfstring>
2. 单个字符串 <string>..</string>

生成文档使用 BeautifulSoup, 解析响应使用 lxml 的严格模式:
截断或多余内容、非法编码都会报错, 不会得到不完整的结果。
"""

from typing import Iterable, List

from bs4 import BeautifulSoup
from bs4.dammit import EntitySubstitution
from bs4.formatter import XMLFormatter
from lxml import etree

from mstranslator.base import TranslatorError
from mstranslator.config import ARRAYS_NAMESPACE

ARRAY_TAG = "ArrayOfstring"
STRING_TAG = "string"


def _escape_text(value: str) -> str:
    # 解析器会把换行和制表符规范化, 用字符引用保留原样
    return (EntitySubstitution.substitute_xml(value)
            .replace("\r", "&#13;")
            .replace("\t", "&#9;"))


XML_FORMATTER = XMLFormatter(entity_substitution=_escape_text)


def _local_name(element) -> str:
    """去掉命名空间后的标签名"""
    return etree.QName(element).localname


def _parse_root(body, expected: str):
    """严格解析XML文档并返回根元素

    Raises:
        TranslatorError: 无法解析或根元素不是 expected
    """
    if isinstance(body, str):
        body = body.encode("utf-8")
    parser = etree.XMLParser(recover=False, resolve_entities=False, no_network=True)
    try:
        root = etree.fromstring(body, parser)
    except (etree.XMLSyntaxError, ValueError) as e:
        raise TranslatorError(f"无法解析XML响应, 期望根元素 <{expected}>: {e}") from e

    if _local_name(root) != expected:
        raise TranslatorError(f"XML根元素为 <{_local_name(root)}>, 期望 <{expected}>")
    return root


def _text(element) -> str:
    return "".join(element.itertext())


def encode_string_array(strings: Iterable[str]) -> bytes:
    """将字符串序列编码为 ArrayOfstring 文档

    Args:
        strings: 要编码的字符串序列

    Returns:
        UTF-8 编码的XML文档(不含XML声明)
    """
    soup = BeautifulSoup(features="xml")
    root = soup.new_tag(ARRAY_TAG, attrs={"xmlns": ARRAYS_NAMESPACE})
    for value in strings:
        if not isinstance(value, str):
            raise TranslatorError(f"只能编码字符串, 收到: {type(value).__name__}")
        child = soup.new_tag(STRING_TAG)
        child.string = value
        root.append(child)
    return root.decode(formatter=XML_FORMATTER).encode("utf-8")


def decode_string_array(body) -> List[str]:
    """解码 ArrayOfstring 文档, 按文档顺序返回字符串列表"""
    root = _parse_root(body, ARRAY_TAG)
    return [
        _text(child) for child in root
        if isinstance(child.tag, str) and _local_name(child) == STRING_TAG
    ]


def decode_string(body) -> str:
    """解码单个 <string> 文档"""
    return _text(_parse_root(body, STRING_TAG))
