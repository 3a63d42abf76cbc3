#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
访问令牌认证模块

使用 client_credentials 方式从认证服务获取访问令牌,
在令牌过期前重复使用, 并将 "Authorization: Bearer <token>" 附加到请求上。
"""

import threading
import time
from dataclasses import dataclass
from typing import Callable, Optional

import requests

from mstranslator.base import TranslatorError
from mstranslator.config import (
    DEFAULT_TIMEOUT,
    TOKEN_EXPIRY_MARGIN,
    TOKEN_GRANT_TYPE,
    TOKEN_SCOPE,
)
from mstranslator.router import Router


@dataclass(frozen=True)
class AccessToken:
    """认证服务返回的访问令牌"""

    token: str
    token_type: str
    scope: str
    expires_at: float

    def expired(self, now: float, margin: float = TOKEN_EXPIRY_MARGIN) -> bool:
        return now >= self.expires_at - margin


class TokenAuthenticator:
    """获取并缓存访问令牌, 为请求附加认证头"""

    def __init__(self, client_id: str, client_secret: str,
                 router: Optional[Router] = None,
                 session: Optional[requests.Session] = None,
                 timeout: Optional[float] = DEFAULT_TIMEOUT,
                 clock: Callable[[], float] = time.time,
                 debug=False):
        """初始化认证器

        Args:
            client_id: 应用的 client id
            client_secret: 应用的 client secret
            router: 地址路由, 默认使用微软的认证地址
            session: requests 会话, 默认新建
            timeout: 获取令牌的请求超时(秒)
            clock: 时间函数, 返回当前时间戳
            debug: 是否显示调试信息
        """
        self.client_id = client_id
        self.client_secret = client_secret
        self.router = router or Router()
        self.session = session or requests.Session()
        self.timeout = timeout
        self.clock = clock
        self.debug = debug
        self._token: Optional[AccessToken] = None
        self._lock = threading.Lock()

    def debug_print(self, message):
        if self.debug:
            print(message, flush=True)

    def authenticate(self, request: requests.PreparedRequest) -> None:
        """为请求附加 Bearer 令牌

        Raises:
            TranslatorError: 无法获取访问令牌
        """
        token = self.access_token()
        request.headers["Authorization"] = f"Bearer {token.token}"

    def access_token(self) -> AccessToken:
        """返回有效的访问令牌, 必要时重新获取"""
        with self._lock:
            if self._token is None or self._token.expired(self.clock()):
                self._token = self._request_token()
            return self._token

    def _request_token(self) -> AccessToken:
        if not self.client_id or not self.client_secret:
            raise TranslatorError("缺少 client_id 或 client_secret")

        self.debug_print(f"[认证] 正在获取访问令牌: {self.router.auth_url()}")
        form = {
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "scope": TOKEN_SCOPE,
            "grant_type": TOKEN_GRANT_TYPE,
        }
        try:
            response = self.session.post(self.router.auth_url(), data=form, timeout=self.timeout)
        except requests.RequestException as e:
            raise TranslatorError(f"获取访问令牌失败: {e}") from e

        with response:
            if not response.ok:
                raise TranslatorError(f"获取访问令牌失败，状态码: {response.status_code}")
            try:
                data = response.json()
            except ValueError as e:
                raise TranslatorError("无法解析访问令牌响应") from e

        if not isinstance(data, dict) or not data.get("access_token"):
            raise TranslatorError("访问令牌响应中缺少 access_token")

        try:
            expires_in = float(data.get("expires_in", 0))
        except (TypeError, ValueError) as e:
            raise TranslatorError(f"无效的 expires_in: {data.get('expires_in')!r}") from e

        token = AccessToken(
            token=data["access_token"],
            token_type=data.get("token_type", ""),
            scope=data.get("scope", ""),
            expires_at=self.clock() + expires_in,
        )
        self.debug_print(f"[认证] 访问令牌获取成功，有效期 {expires_in:.0f} 秒")
        return token
