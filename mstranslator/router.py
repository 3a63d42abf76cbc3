#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
API地址路由

将逻辑操作名称(翻译、检测、语言代码、语言名称、认证)解析为完整的URL。
"""

from mstranslator.config import (
    AUTH_URL,
    DETECT_PATH,
    LANGUAGE_CODES_PATH,
    LANGUAGE_NAMES_PATH,
    SERVICE_URL,
    TRANSLATE_PATH,
)


class Router:
    """微软翻译API的地址表"""

    def __init__(self, service_url: str = SERVICE_URL, auth_url: str = AUTH_URL):
        """初始化路由

        Args:
            service_url: 服务根地址, 可替换为测试或代理地址
            auth_url: 获取访问令牌的地址
        """
        if not service_url.endswith("/"):
            service_url += "/"
        self.service_url = service_url
        self._auth_url = auth_url

    def auth_url(self) -> str:
        return self._auth_url

    def translation_url(self) -> str:
        return self.service_url + TRANSLATE_PATH

    def detect_url(self) -> str:
        return self.service_url + DETECT_PATH

    def language_codes_url(self) -> str:
        return self.service_url + LANGUAGE_CODES_PATH

    def language_names_url(self) -> str:
        return self.service_url + LANGUAGE_NAMES_PATH
