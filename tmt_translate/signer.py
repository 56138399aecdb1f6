"""Tencent Cloud API v3 (TC3-HMAC-SHA256) request signing."""

from __future__ import annotations

import datetime as _dt
import hashlib
import hmac
from dataclasses import dataclass

ALGORITHM = "TC3-HMAC-SHA256"
CONTENT_TYPE = "application/json; charset=utf-8"
SIGNED_HEADERS = "content-type;host;x-tc-action"
SCOPE_SUFFIX = "tc3_request"


@dataclass(frozen=True, slots=True)
class SignedRequest:
    """Every intermediate value of one signing pass."""

    timestamp: int
    credential_scope: str
    canonical_request: str
    string_to_sign: str
    signature: str
    authorization: str


def _hmac_sha256(key: bytes, msg: str) -> bytes:
    return hmac.new(key, msg.encode("utf-8"), hashlib.sha256).digest()


def hash_payload(body: str) -> str:
    return hashlib.sha256(body.encode("utf-8")).hexdigest()


def utc_date(timestamp: int) -> str:
    return _dt.datetime.fromtimestamp(timestamp, tz=_dt.timezone.utc).strftime("%Y-%m-%d")


def build_canonical_request(
    host: str,
    action: str,
    body: str,
    *,
    method: str = "POST",
    uri: str = "/",
    query: str = "",
    content_type: str = CONTENT_TYPE,
) -> str:
    canonical_headers = (
        f"content-type:{content_type}\n"
        f"host:{host}\n"
        f"x-tc-action:{action.lower()}\n"
    )
    return "\n".join(
        [
            method,
            uri,
            query,
            canonical_headers,
            SIGNED_HEADERS,
            hash_payload(body),
        ]
    )


def build_credential_scope(timestamp: int, service: str) -> str:
    return f"{utc_date(timestamp)}/{service}/{SCOPE_SUFFIX}"


def build_string_to_sign(timestamp: int, credential_scope: str, canonical_request: str) -> str:
    hashed_request = hashlib.sha256(canonical_request.encode("utf-8")).hexdigest()
    return (
        f"{ALGORITHM}\n"
        f"{timestamp}\n"
        f"{credential_scope}\n"
        f"{hashed_request}"
    )


def derive_signing_key(secret_key: str, date: str, service: str) -> bytes:
    secret_date = _hmac_sha256(("TC3" + secret_key).encode("utf-8"), date)
    secret_service = _hmac_sha256(secret_date, service)
    return _hmac_sha256(secret_service, SCOPE_SUFFIX)


def compute_signature(secret_key: str, credential_scope: str, string_to_sign: str) -> str:
    date, service, _ = credential_scope.split("/")
    signing_key = derive_signing_key(secret_key, date, service)
    return hmac.new(signing_key, string_to_sign.encode("utf-8"), hashlib.sha256).hexdigest()


def build_authorization(secret_id: str, credential_scope: str, signature: str) -> str:
    return (
        f"{ALGORITHM} "
        f"Credential={secret_id}/{credential_scope}, "
        f"SignedHeaders={SIGNED_HEADERS}, "
        f"Signature={signature}"
    )


class TC3Signer:
    """Sign JSON POST requests for a single Tencent Cloud service."""

    def __init__(self, secret_id: str, secret_key: str, service: str, host: str) -> None:
        self._secret_id = secret_id
        self._secret_key = secret_key
        self.service = service
        self.host = host

    def __repr__(self) -> str:
        return f"TC3Signer(service={self.service!r}, host={self.host!r})"

    def sign(self, action: str, body: str, timestamp: int) -> SignedRequest:
        """Sign *body* for *action* at *timestamp*; identical inputs give identical output."""
        canonical_request = build_canonical_request(self.host, action, body)
        credential_scope = build_credential_scope(timestamp, self.service)
        string_to_sign = build_string_to_sign(timestamp, credential_scope, canonical_request)
        signature = compute_signature(self._secret_key, credential_scope, string_to_sign)
        return SignedRequest(
            timestamp=timestamp,
            credential_scope=credential_scope,
            canonical_request=canonical_request,
            string_to_sign=string_to_sign,
            signature=signature,
            authorization=build_authorization(self._secret_id, credential_scope, signature),
        )
