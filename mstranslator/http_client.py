#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
HTTP 请求模块

构造请求、设置内容类型、调用认证器附加凭据后发送请求,
所有失败都包装为 TranslatorError。
"""

import time
from typing import Optional

import requests

from mstranslator.base import Authenticator, TranslatorError
from mstranslator.config import CONTENT_TYPE_TEXT, DEFAULT_TIMEOUT


class AuthenticatedHttpClient:
    """带认证的 HTTP 客户端"""

    def __init__(self, authenticator: Authenticator,
                 session: Optional[requests.Session] = None,
                 timeout: Optional[float] = DEFAULT_TIMEOUT,
                 debug=False):
        """初始化 HTTP 客户端

        Args:
            authenticator: 认证器, 发送前为请求附加凭据
            session: requests 会话(传输层), 默认新建
            timeout: 请求超时(秒), None 表示不限制
            debug: 是否显示调试信息
        """
        self.authenticator = authenticator
        self.session = session or requests.Session()
        self.timeout = timeout
        self.debug = debug
        self.request_count = 0

    def debug_print(self, message):
        if self.debug:
            print(message, flush=True)

    def send_request(self, method: str, uri: str, body: Optional[bytes] = None,
                     content_type: str = CONTENT_TYPE_TEXT) -> requests.Response:
        """发送请求并返回原始响应

        调用方负责关闭返回的响应。

        Args:
            method: HTTP 方法
            uri: 完整的请求地址
            body: 请求体, 可以为 None
            content_type: Content-Type 请求头的值

        Returns:
            requests.Response

        Raises:
            TranslatorError: 构造请求、认证或网络请求失败
        """
        try:
            request = self.session.prepare_request(requests.Request(method, uri, data=body))
        except Exception as e:
            raise TranslatorError(f"无法构造请求 {method} {uri}: {e}") from e

        request.headers["Content-Type"] = content_type

        try:
            self.authenticator.authenticate(request)
        except Exception as e:
            raise TranslatorError(f"请求认证失败: {e}") from e

        self.request_count += 1
        self.debug_print(f"[HTTP] 发送请求 #{self.request_count}: {method} {uri}")
        start_time = time.time()
        try:
            response = self.session.send(request, timeout=self.timeout)
        except requests.RequestException as e:
            raise TranslatorError(f"请求失败 {method} {uri}: {e}") from e

        elapsed_time = time.time() - start_time
        self.debug_print(f"[HTTP] 状态码: {response.status_code}，耗时: {elapsed_time:.2f}秒")
        return response


def read_body(response: requests.Response) -> bytes:
    """读取完整的响应体并关闭响应

    Raises:
        TranslatorError: 状态码不是 2xx 或读取失败
    """
    with response:
        if not response.ok:
            raise TranslatorError(f"请求失败，状态码: {response.status_code}")
        try:
            return response.content
        except requests.RequestException as e:
            raise TranslatorError(f"读取响应失败: {e}") from e
