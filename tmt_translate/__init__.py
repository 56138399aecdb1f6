"""Translate between Chinese and English with Tencent Cloud TMT."""

__version__ = "0.1.0"
