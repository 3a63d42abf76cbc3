#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
mstranslator 的基础类型

包含:
1. 统一的异常类型 TranslatorError
2. 语言记录 Language
3. 各组件之间的接口协议(便于测试时替换为假实现)
"""

from dataclasses import dataclass
from typing import List, Optional, Protocol, Tuple, runtime_checkable

import requests


class TranslatorError(Exception):
    """翻译客户端的统一异常

    所有错误(构造请求、认证、网络、读取响应、XML编解码)都包装成此异常抛出,
    原始异常可以通过 __cause__ 获取。
    """


@dataclass(frozen=True)
class Language:
    """一种受支持的语言: 代码和英文名称"""

    code: str
    name: str


@runtime_checkable
class Authenticator(Protocol):
    def authenticate(self, request: requests.PreparedRequest) -> None:
        """为请求附加凭据(原地修改请求头), 失败时抛出异常"""
        ...


@runtime_checkable
class HttpClient(Protocol):
    def send_request(self, method: str, uri: str, body: Optional[bytes] = None,
                     content_type: str = "text/plain") -> requests.Response:
        ...


@runtime_checkable
class LanguageProvider(Protocol):
    def codes(self) -> List[str]:
        ...

    def names(self, codes: List[str]) -> List[str]:
        ...


@runtime_checkable
class LanguageCatalog(Protocol):
    def languages(self) -> Tuple[Language, ...]:
        ...
