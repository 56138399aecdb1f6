"""Configuration loader for the Tencent translation CLI."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Mapping

from .exceptions import ConfigError
from .utils import mask_secret

logger = logging.getLogger(__name__)


SECRET_ID_ENV = "TENCENT_TRANSLATION_SECRET_ID"
SECRET_KEY_ENV = "TENCENT_TRANSLATION_SECRET_KEY"
REGION_ENV = "TENCENT_TRANSLATION_REGION"
PROJECT_ID_ENV = "TENCENT_TRANSLATION_PROJECT_ID"
TOKEN_ENV = "TENCENT_TRANSLATION_TOKEN"

DEFAULT_REGION = "ap-guangzhou"
DEFAULT_PROJECT_ID = 0


def _require(environ: Mapping[str, str], name: str) -> str:
    value = (environ.get(name) or "").strip()
    if not value:
        raise ConfigError(f"Missing {name}", variable=name)
    return value


def _parse_project_id(value: str) -> int:
    candidate = value.strip()
    if not candidate:
        return DEFAULT_PROJECT_ID
    try:
        return int(candidate)
    except ValueError as exc:
        raise ConfigError(f"{PROJECT_ID_ENV} must be an integer, got {value!r}", variable=PROJECT_ID_ENV) from exc


@dataclass(frozen=True, slots=True)
class Config:
    """Credentials and request options resolved once at start-up."""

    secret_id: str = field(repr=False)
    secret_key: str = field(repr=False)
    region: str = DEFAULT_REGION
    project_id: int = DEFAULT_PROJECT_ID
    token: str = field(default="", repr=False)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Config":
        """Build a config from *environ* (defaults to ``os.environ``).

        Raises ``ConfigError`` naming the first missing required variable.
        """
        env = os.environ if environ is None else environ
        secret_id = _require(env, SECRET_ID_ENV)
        secret_key = _require(env, SECRET_KEY_ENV)
        region = (env.get(REGION_ENV) or "").strip() or DEFAULT_REGION
        project_id = _parse_project_id(env.get(PROJECT_ID_ENV) or "")
        token = (env.get(TOKEN_ENV) or "").strip()

        config = cls(
            secret_id=secret_id,
            secret_key=secret_key,
            region=region,
            project_id=project_id,
            token=token,
        )
        logger.debug(
            "已加载腾讯翻译配置: secret_id=%s region=%s project_id=%d token=%s",
            mask_secret(secret_id),
            region,
            project_id,
            "yes" if token else "no",
        )
        return config
