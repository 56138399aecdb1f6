"""Command-line entry point: detect language, translate, print HTML."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from typing import Sequence

from dotenv import find_dotenv, load_dotenv

from .client import TencentTranslateClient
from .config import Config
from .exceptions import ConfigError, SystemClockError, TranslationProviderError
from .language import choose_target, count_languages
from .presenter import extract_error, present
from .utils import setup_logger

PROG = "tmt-translate"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Translate text between Chinese and English with Tencent Cloud TMT",
    )
    parser.add_argument(
        "text",
        nargs="*",
        help="Text to translate; several words are joined with spaces",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log request details to stderr",
    )
    return parser


def _collect_words(argv: Sequence[str], parsed: Sequence[str], extras: Sequence[str]) -> list[str]:
    """Return positional and unrecognised words in their command-line order."""
    remaining = Counter(parsed) + Counter(extras)
    words = []
    for token in argv:
        if remaining[token] > 0:
            remaining[token] -= 1
            words.append(token)
    return words


def main(argv: Sequence[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    # text such as "-abc" is not an option; keep it as part of the input
    args, extras = build_parser().parse_known_args(argv)
    text = " ".join(_collect_words(argv, args.text, extras))
    if not text:
        print(f"Invalid arguments! Usage: {PROG} <text>")
        return 1

    load_dotenv(find_dotenv(usecwd=True))
    logger = setup_logger("tmt_translate", "DEBUG" if args.verbose else None)

    try:
        config = Config.from_env()
    except ConfigError as exc:
        if exc.variable:
            print(f"Please set {exc.variable} environment variable")
        else:
            print(str(exc))
        logger.debug("配置错误: %s", exc)
        return 1

    counts = count_languages(text)
    target = choose_target(text)
    logger.debug("语言统计: chinese=%d latin=%d -> target=%s", counts.chinese, counts.latin, target)

    try:
        client = TencentTranslateClient.from_config(config)
        response = client.translate(text, target)
    except SystemClockError as exc:
        logger.error("无法获取系统时间: %s", exc)
        return 1
    except TranslationProviderError as exc:
        logger.error("翻译请求失败: %s", exc)
        print(f"Translation request failed: {exc}")
        return 1

    output, ok = present(text, response)
    if not ok:
        error = extract_error(response)
        if error:
            logger.warning("腾讯翻译返回错误: code=%s message=%s", *error)
        else:
            logger.warning("腾讯翻译响应缺少 TargetText")
    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
