"""Synchronous Tencent Cloud TMT ``TextTranslate`` client."""

from __future__ import annotations

import json
import logging
import time
from typing import Any

import httpx

from .config import DEFAULT_PROJECT_ID, DEFAULT_REGION, Config
from .exceptions import SystemClockError, TranslationProviderError
from .signer import CONTENT_TYPE, SignedRequest, TC3Signer
from .utils import mask_secret

logger = logging.getLogger(__name__)


SERVICE = "tmt"
HOST = "tmt.tencentcloudapi.com"
ENDPOINT = f"https://{HOST}"
VERSION = "2018-03-21"
ACTION = "TextTranslate"
SOURCE_AUTO = "auto"


def current_timestamp() -> int:
    timestamp = int(time.time())
    if timestamp < 0:
        raise SystemClockError(f"系统时钟早于 Unix 纪元: {timestamp}")
    return timestamp


def serialize_payload(payload: dict[str, Any]) -> str:
    """Compact JSON; the exact string returned is both hashed and sent."""
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))


def _check_header_value(name: str, value: str) -> None:
    if not value.isascii() or not value.isprintable():
        raise TranslationProviderError(f"请求头 {name} 含有非法字符")


class TencentTranslateClient:
    """Tencent Cloud TMT client using the TC3 signature."""

    def __init__(
        self,
        secret_id: str,
        secret_key: str,
        region: str = DEFAULT_REGION,
        project_id: int = DEFAULT_PROJECT_ID,
        token: str = "",
    ) -> None:
        if not secret_id or not secret_key:
            raise TranslationProviderError("Tencent Translate SecretId/SecretKey 未配置")
        self._secret_id = secret_id
        self._region = region
        self._project_id = project_id
        self._token = token
        self._signer = TC3Signer(secret_id, secret_key, SERVICE, HOST)

    @classmethod
    def from_config(cls, config: Config) -> "TencentTranslateClient":
        return cls(
            secret_id=config.secret_id,
            secret_key=config.secret_key,
            region=config.region,
            project_id=config.project_id,
            token=config.token,
        )

    def build_payload(self, text: str, target: str, source: str = SOURCE_AUTO) -> dict[str, Any]:
        return {
            "SourceText": text,
            "Source": source,
            "Target": target,
            "ProjectId": self._project_id,
        }

    def build_headers(self, signed: SignedRequest) -> list[tuple[str, str]]:
        """Ordered header pairs for *signed*; rejects values HTTP cannot carry."""
        headers = [
            ("Authorization", signed.authorization),
            ("Content-Type", CONTENT_TYPE),
            ("Host", HOST),
            ("X-TC-Action", ACTION),
            ("X-TC-Timestamp", str(signed.timestamp)),
            ("X-TC-Version", VERSION),
        ]
        if self._region:
            headers.append(("X-TC-Region", self._region))
        if self._token:
            headers.append(("X-TC-Token", self._token))
        for header_name, value in headers:
            _check_header_value(header_name, value)
        return headers

    def translate(
        self,
        text: str,
        target: str,
        source: str = SOURCE_AUTO,
        timestamp: int | None = None,
    ) -> dict[str, Any]:
        """POST one ``TextTranslate`` request and return the decoded JSON body."""
        if timestamp is None:
            timestamp = current_timestamp()
        body = serialize_payload(self.build_payload(text, target, source))
        signed = self._signer.sign(ACTION, body, timestamp)
        headers = self.build_headers(signed)

        logger.debug(
            "发送腾讯翻译请求: secret_id=%s target=%s chars=%d timestamp=%d",
            mask_secret(self._secret_id),
            target,
            len(text),
            timestamp,
        )
        try:
            with httpx.Client() as client:
                response = client.post(ENDPOINT, headers=headers, content=body.encode("utf-8"))
        except httpx.HTTPError as exc:
            raise TranslationProviderError(f"Tencent Translate 请求失败: {exc}") from exc

        if response.status_code >= 400:
            logger.warning("Tencent Translate 返回 HTTP %d", response.status_code)
        try:
            data = response.json()
        except ValueError as exc:
            raise TranslationProviderError(
                f"Tencent Translate 响应无法解析: {response.status_code} {response.text[:200]}"
            ) from exc
        if not isinstance(data, dict):
            raise TranslationProviderError(f"Tencent Translate 响应格式异常: {data!r}")

        response_body = data.get("Response")
        request_id = response_body.get("RequestId") if isinstance(response_body, dict) else None
        logger.debug("腾讯翻译响应: status=%d request_id=%s", response.status_code, request_id)
        return data
