#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
语言目录模块

1. LanguageProvider 从API获取语言代码和语言名称
2. MicrosoftLanguageCatalog 将两者组合为 Language 列表, 首次成功获取后缓存
"""

import threading
from typing import List, Optional, Tuple

from mstranslator.base import HttpClient, Language, LanguageProvider, TranslatorError
from mstranslator.config import CONTENT_TYPE_TEXT, CONTENT_TYPE_XML, LANGUAGE_NAMES_LOCALE
from mstranslator.http_client import read_body
from mstranslator.router import Router
from mstranslator.xml_codec import decode_string_array, encode_string_array


class MicrosoftLanguageProvider:
    """获取API支持的语言代码和名称"""

    def __init__(self, http_client: HttpClient, router: Optional[Router] = None):
        self.http_client = http_client
        self.router = router or Router()

    def codes(self) -> List[str]:
        """获取所有支持的语言代码

        Raises:
            TranslatorError: 请求或解析失败
        """
        response = self.http_client.send_request(
            "GET", self.router.language_codes_url(), None, CONTENT_TYPE_TEXT)
        return decode_string_array(read_body(response))

    def names(self, codes: List[str]) -> List[str]:
        """获取语言代码对应的英文名称, 顺序与 codes 一致

        Args:
            codes: 语言代码列表

        Raises:
            TranslatorError: 请求或解析失败
        """
        payload = encode_string_array(codes)
        uri = f"{self.router.language_names_url()}?locale={LANGUAGE_NAMES_LOCALE}"
        response = self.http_client.send_request("POST", uri, payload, CONTENT_TYPE_XML)
        return decode_string_array(read_body(response))


class MicrosoftLanguageCatalog:
    """API支持的语言列表

    第一次成功获取后缓存, 之后不再请求。获取失败时不缓存, 下次调用重新获取。
    首次获取在锁内进行, 并发调用者只会触发一次请求。
    """

    def __init__(self, provider: LanguageProvider, debug=False):
        self.provider = provider
        self.debug = debug
        self._languages: Tuple[Language, ...] = ()
        self._lock = threading.Lock()

    def debug_print(self, message):
        if self.debug:
            print(message, flush=True)

    def languages(self) -> Tuple[Language, ...]:
        """返回所有支持的语言

        Raises:
            TranslatorError: 获取失败, 或名称数量与代码数量不一致
        """
        if self._languages:
            return self._languages

        with self._lock:
            if self._languages:
                return self._languages

            self.debug_print("[语言目录] 正在获取语言代码...")
            codes = self.provider.codes()
            self.debug_print(f"[语言目录] 获取到 {len(codes)} 个语言代码，正在获取语言名称...")
            names = self.provider.names(codes)

            if len(names) != len(codes):
                raise TranslatorError(
                    f"语言名称数量 ({len(names)}) 与语言代码数量 ({len(codes)}) 不匹配")

            self._languages = tuple(
                Language(code=code, name=name) for code, name in zip(codes, names))
            self.debug_print(f"[语言目录] 已缓存 {len(self._languages)} 种语言")
            return self._languages
