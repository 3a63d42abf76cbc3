#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
mstranslator CLI Entry Point

Handles command-line argument parsing and runs the requested command.
"""

import argparse
import os
import sys

from mstranslator.base import TranslatorError
from mstranslator.config import (
    DEFAULT_SOURCE_LANGUAGE,
    DEFAULT_TARGET_LANGUAGE,
    DEFAULT_TIMEOUT,
    ENV_CLIENT_ID,
    ENV_CLIENT_SECRET,
    TRANSLATION_SERVICE_OPTIONS,
)
from mstranslator.core import run_detection, run_languages, run_translation
from mstranslator.translator import get_translator


def add_common_options(parser):
    """添加通用命令行选项

    Args:
        parser: argparse.ArgumentParser 实例
    """
    parser.add_argument("--client-id", dest="client_id", default=os.environ.get(ENV_CLIENT_ID),
                        help=f"应用的 client id，默认读取环境变量 {ENV_CLIENT_ID}")
    parser.add_argument("--client-secret", dest="client_secret", default=os.environ.get(ENV_CLIENT_SECRET),
                        help=f"应用的 client secret，默认读取环境变量 {ENV_CLIENT_SECRET}")
    parser.add_argument("-s", "--service", dest="translation_service",
                        choices=TRANSLATION_SERVICE_OPTIONS, default="microsoft",
                        help=f"翻译服务类型，支持: {', '.join(TRANSLATION_SERVICE_OPTIONS)}")
    parser.add_argument("--timeout", dest="timeout", type=float, default=DEFAULT_TIMEOUT,
                        help=f"请求超时(秒)，默认: {DEFAULT_TIMEOUT}")
    parser.add_argument("-debug", "--verbose", dest="debug", action="store_true", default=False,
                        help="显示调试信息")


def build_parser():
    parser = argparse.ArgumentParser(prog="mstranslator", description="mstranslator - 微软翻译命令行工具")
    add_common_options(parser)
    commands = parser.add_subparsers(dest="command")

    commands.add_parser("languages", help="列出所有支持的语言")

    translate_parser = commands.add_parser("translate", help="翻译文本")
    translate_parser.add_argument("-t", "--text", dest="text", required=True, help="要翻译的文本")
    translate_parser.add_argument("--from", dest="source_language", default=DEFAULT_SOURCE_LANGUAGE,
                                  help=f"源语言代码，默认: {DEFAULT_SOURCE_LANGUAGE}")
    translate_parser.add_argument("--to", dest="target_language", default=DEFAULT_TARGET_LANGUAGE,
                                  help=f"目标语言代码，默认: {DEFAULT_TARGET_LANGUAGE}")

    detect_parser = commands.add_parser("detect", help="检测文本的语言")
    detect_parser.add_argument("-t", "--text", dest="text", required=True, help="要检测的文本")
    return parser


def main(argv=None):
    """命令行入口函数

    解析命令行参数并执行对应的命令
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if not args.client_id or not args.client_secret:
        print(f"\n错误：缺少凭据。请使用 --client-id/--client-secret 或设置 {ENV_CLIENT_ID}/{ENV_CLIENT_SECRET}。",
              file=sys.stderr)
        return 1

    translator = get_translator(
        args.client_id,
        args.client_secret,
        service_name=args.translation_service,
        timeout=args.timeout,
        debug=args.debug,
    )

    try:
        if args.command == "languages":
            run_languages(translator)
        elif args.command == "translate":
            run_translation(translator, args.text, args.source_language, args.target_language)
        elif args.command == "detect":
            run_detection(translator, args.text)
        return 0
    except TranslatorError as e:
        print(f"[错误] {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
