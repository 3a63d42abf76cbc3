#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
mstranslator 配置模块

这个模块包含了项目的配置信息和常量:
1. 微软翻译API地址
2. XML 命名空间
3. 请求内容类型
4. 认证参数
5. 命令行使用的环境变量名
"""

# 微软翻译API地址
SERVICE_URL = "http://api.microsofttranslator.com/v2/Http.svc/"
AUTH_URL = "https://datamarket.accesscontrol.windows.net/v2/OAuth2-13"

TRANSLATE_PATH = "Translate"
DETECT_PATH = "Detect"
LANGUAGE_CODES_PATH = "GetLanguagesForTranslate"
LANGUAGE_NAMES_PATH = "GetLanguageNames"

# 语言名称的显示语言
LANGUAGE_NAMES_LOCALE = "en"

# XML 命名空间
ARRAYS_NAMESPACE = "http://schemas.microsoft.com/2003/10/Serialization/Arrays"
SERIALIZATION_NAMESPACE = "http://schemas.microsoft.com/2003/10/Serialization/"

# 请求内容类型
CONTENT_TYPE_TEXT = "text/plain"
CONTENT_TYPE_XML = "text/xml"

# 请求超时(秒), None 表示不限制
DEFAULT_TIMEOUT = 10

# 认证参数
TOKEN_SCOPE = "http://api.microsofttranslator.com"
TOKEN_GRANT_TYPE = "client_credentials"
TOKEN_EXPIRY_MARGIN = 30  # 提前30秒刷新令牌

DEFAULT_SOURCE_LANGUAGE = "en"
DEFAULT_TARGET_LANGUAGE = "de"

TRANSLATION_SERVICE_OPTIONS = [
    "microsoft",
]

# 命令行读取凭据的环境变量
ENV_CLIENT_ID = "MSTRANSLATOR_CLIENT_ID"
ENV_CLIENT_SECRET = "MSTRANSLATOR_CLIENT_SECRET"
