#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
翻译与语言检测
"""

import urllib.parse
from typing import Optional

from mstranslator.base import HttpClient
from mstranslator.config import CONTENT_TYPE_TEXT
from mstranslator.http_client import read_body
from mstranslator.router import Router
from mstranslator.xml_codec import decode_string


class MicrosoftTranslationProvider:
    """调用 Translate 和 Detect 接口"""

    def __init__(self, http_client: HttpClient, router: Optional[Router] = None):
        self.http_client = http_client
        self.router = router or Router()

    def translate(self, text: str, source: str, target: str) -> str:
        """翻译单个文本

        Args:
            text: 要翻译的文本
            source: 源语言代码
            target: 目标语言代码

        Returns:
            翻译后的文本

        Raises:
            TranslatorError: 请求或解析失败
        """
        query = urllib.parse.urlencode({"text": text, "from": source, "to": target})
        uri = f"{self.router.translation_url()}?{query}"
        response = self.http_client.send_request("GET", uri, None, CONTENT_TYPE_TEXT)
        return decode_string(read_body(response))

    def detect(self, text: str) -> str:
        """检测文本的语言, 返回语言代码"""
        query = urllib.parse.urlencode({"text": text})
        uri = f"{self.router.detect_url()}?{query}"
        response = self.http_client.send_request("GET", uri, None, CONTENT_TYPE_TEXT)
        return decode_string(read_body(response))
