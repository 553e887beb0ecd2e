"""Shared-secret check for the admin config endpoint (Basic or Bearer)."""

import base64
import binascii
import hmac
from dataclasses import dataclass
from typing import Optional

from common.logger import log_error
from common.secrets import get_admin_credentials


@dataclass
class AuthResult:
    valid: bool
    username: Optional[str] = None
    error: Optional[str] = None


def _same(a: str, b: str) -> bool:
    return hmac.compare_digest(a.encode("utf-8"), b.encode("utf-8"))


def _decode_basic(token: str):
    try:
        decoded = base64.b64decode(token, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        return None, None
    username, sep, password = decoded.partition(":")
    if not sep:
        return None, None
    return username, password


def verify_auth(authorization: Optional[str]) -> AuthResult:
    try:
        admin_username, admin_password = get_admin_credentials()
    except Exception:
        log_error("admin_auth_failed", error_code="SECRETS_ERROR")
        return AuthResult(False, error="Server configuration error")

    if not admin_password:
        log_error("admin_auth_failed", error_code="ADMIN_PASSWORD_NOT_SET")
        return AuthResult(False, error="Server configuration error")

    if not authorization:
        return AuthResult(False, error="No authorization header")

    if authorization.startswith("Basic "):
        username, password = _decode_basic(authorization[6:])
        if (
            username is not None
            and _same(username, admin_username)
            and _same(password, admin_password)
        ):
            return AuthResult(True, username=username)

    if authorization.startswith("Bearer "):
        if _same(authorization[7:], admin_password):
            return AuthResult(True, username=admin_username)

    return AuthResult(False, error="Invalid credentials")
