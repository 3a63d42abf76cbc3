#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
mstranslator 的翻译服务模块

这个模块将各组件组合为完整的翻译服务:
1. 访问令牌认证
2. 带认证的 HTTP 客户端
3. 翻译、语言检测
4. 缓存的语言目录
"""

from typing import List, Optional, Tuple

import requests

from mstranslator.auth import TokenAuthenticator
from mstranslator.base import Language, LanguageCatalog
from mstranslator.config import (
    AUTH_URL,
    DEFAULT_SOURCE_LANGUAGE,
    DEFAULT_TARGET_LANGUAGE,
    DEFAULT_TIMEOUT,
    SERVICE_URL,
    TRANSLATION_SERVICE_OPTIONS,
)
from mstranslator.http_client import AuthenticatedHttpClient
from mstranslator.languages import MicrosoftLanguageCatalog, MicrosoftLanguageProvider
from mstranslator.router import Router
from mstranslator.translation import MicrosoftTranslationProvider


class TranslationService:
    """翻译服务的基类，定义了通用接口"""

    def __init__(self, source_language=DEFAULT_SOURCE_LANGUAGE,
                 target_language=DEFAULT_TARGET_LANGUAGE, debug=False):
        """初始化翻译服务

        Args:
            source_language: 默认源语言代码
            target_language: 默认目标语言代码
            debug: 是否显示调试信息
        """
        self.source_language = source_language
        self.target_language = target_language
        self.debug = debug
        self.translated_count = 0
        self.total_chars = 0

    def translate(self, text: str, source: str, target: str) -> str:
        raise NotImplementedError("子类必须实现此方法")

    def detect(self, text: str) -> str:
        raise NotImplementedError("子类必须实现此方法")

    def languages(self) -> Tuple[Language, ...]:
        raise NotImplementedError("子类必须实现此方法")

    def translate_text(self, text: str) -> str:
        """使用默认的源语言和目标语言翻译单个文本"""
        if self.debug:
            preview = text[:30] + "..." if len(text) > 30 else text
            self.debug_print(f"[翻译] 正在翻译单个文本: {preview}")
        return self.translate(text, self.source_language, self.target_language)

    def translate_batch(self, texts: List[str]) -> List[str]:
        """依次翻译一组文本, 任何一个失败都会抛出异常

        Args:
            texts: 要翻译的文本列表

        Returns:
            翻译后的文本列表, 顺序与输入一致
        """
        return [self.translate_text(text) if text.strip() else "" for text in texts]

    def debug_print(self, message):
        """输出调试信息

        Args:
            message: 要输出的信息
        """
        if self.debug:
            print(message, flush=True)


class MicrosoftTranslator(TranslationService):
    """微软翻译API服务实现"""

    def __init__(self, client_id: str, client_secret: str,
                 source_language=DEFAULT_SOURCE_LANGUAGE,
                 target_language=DEFAULT_TARGET_LANGUAGE,
                 timeout: Optional[float] = DEFAULT_TIMEOUT,
                 service_url: str = SERVICE_URL,
                 auth_url: str = AUTH_URL,
                 session: Optional[requests.Session] = None,
                 debug=False):
        """初始化微软翻译服务

        Args:
            client_id: 应用的 client id
            client_secret: 应用的 client secret
            source_language: 默认源语言代码
            target_language: 默认目标语言代码
            timeout: 每个请求的超时(秒), None 表示不限制
            service_url: 翻译服务根地址
            auth_url: 认证服务地址
            session: requests 会话, 默认新建
            debug: 是否显示调试信息
        """
        super().__init__(source_language, target_language, debug)
        session = session or requests.Session()
        self.router = Router(service_url=service_url, auth_url=auth_url)
        self.authenticator = TokenAuthenticator(
            client_id, client_secret, router=self.router, session=session,
            timeout=timeout, debug=debug)
        self.http_client = AuthenticatedHttpClient(self.authenticator, session=session, timeout=timeout, debug=debug)
        self.translation_provider = MicrosoftTranslationProvider(self.http_client, self.router)
        self.language_provider = MicrosoftLanguageProvider(self.http_client, self.router)
        self.catalog: LanguageCatalog = MicrosoftLanguageCatalog(self.language_provider, debug=debug)

    def translate(self, text: str, source: str, target: str) -> str:
        self.debug_print(f"[微软翻译] 从 {source} 翻译到 {target}")
        translated_text = self.translation_provider.translate(text, source, target)
        self.translated_count += 1
        self.total_chars += len(text)
        return translated_text

    def detect(self, text: str) -> str:
        code = self.translation_provider.detect(text)
        self.debug_print(f"[微软翻译] 检测到的语言: {code}")
        return code

    def languages(self) -> Tuple[Language, ...]:
        return self.catalog.languages()


def get_translator(client_id, client_secret, service_name="microsoft", **kwargs):
    """工厂方法，根据名称创建对应的翻译服务实例

    Args:
        client_id: 应用的 client id
        client_secret: 应用的 client secret
        service_name: 翻译服务名称，目前只支持'microsoft'
        **kwargs: 传给服务构造函数的其他参数

    Returns:
        TranslationService: 翻译服务实例

    Raises:
        ValueError: 如果指定的服务名称不支持
    """
    service_name = service_name.lower()

    if service_name == "microsoft":
        return MicrosoftTranslator(client_id, client_secret, **kwargs)
    raise ValueError(
        f"不支持的翻译服务: {service_name}，支持: {', '.join(TRANSLATION_SERVICE_OPTIONS)}")
