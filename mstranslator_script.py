#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
mstranslator 是微软翻译API的命令行工具。
主要功能:
1. 列出所有支持的语言
2. 翻译文本
3. 检测文本的语言
"""

import sys
from mstranslator.cli import main

if __name__ == "__main__":
    sys.exit(main())
