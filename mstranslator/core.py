#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Core command logic for mstranslator.
"""

import time

from mstranslator.translator import TranslationService


def run_languages(translator: TranslationService, stream=None):
    """打印所有支持的语言, 每行 "代码<TAB>名称"

    Returns:
        tuple[Language, ...]: 语言列表

    Raises:
        TranslatorError: 获取语言列表失败
    """
    start_time = time.time()
    languages = translator.languages()
    for language in languages:
        print(f"{language.code}\t{language.name}", file=stream)
    translator.debug_print(f"[主程序] 共 {len(languages)} 种语言，耗时：{time.time() - start_time:.2f}秒")
    return languages


def run_translation(translator: TranslationService, text: str,
                    source_language: str, target_language: str, stream=None):
    """翻译文本并打印结果

    Args:
        translator: 翻译服务实例
        text: 要翻译的文本
        source_language: 源语言代码
        target_language: 目标语言代码
        stream: 输出流, 默认为标准输出

    Returns:
        str: 翻译后的文本

    Raises:
        TranslatorError: 翻译失败
    """
    translator.debug_print(f"[主程序] 源语言：{source_language}，目标语言：{target_language}")
    start_time = time.time()
    translated_text = translator.translate(text, source_language, target_language)
    print(translated_text, file=stream)
    translator.debug_print(f"[主程序] 翻译完成，耗时：{time.time() - start_time:.2f}秒")
    return translated_text


def run_detection(translator: TranslationService, text: str, stream=None):
    """检测文本语言并打印语言代码"""
    code = translator.detect(text)
    print(code, file=stream)
    return code
