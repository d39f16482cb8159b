"""
Bearer token and password primitives.

Tokens are compact JWTs signed with HMAC-SHA256 (``header.payload.signature``,
each part base64url encoded without padding). The payload carries the user id
in ``sub``, the role in ``role`` and an expiry timestamp in ``exp``.
Passwords are stored as ``<salt hex>$<pbkdf2-sha256 hex>``.
"""

import base64
import binascii
import hashlib
import hmac
import json
import os
import time
from collections.abc import Iterable
from uuid import UUID

from eventia.auth.dtos import Identity, Role
from eventia.config.settings import settings
from eventia.errors import ForbiddenError, InvalidCredentialError, UnauthenticatedError


def _b64_url_encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")


def _b64_url_decode(data: str) -> bytes:
    padding = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _sign(message: bytes, secret: str) -> bytes:
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).digest()


def create_access_token(
    user_id: UUID,
    role: Role,
    expires_in: int | None = None,
    secret: str | None = None,
) -> str:
    """Issue a signed token for ``user_id`` with ``role`` as a claim.

    ``expires_in`` is a lifetime in seconds and defaults to
    ``settings.access_token_expire_minutes``.
    """
    lifetime = expires_in if expires_in is not None else settings.access_token_expire_minutes * 60
    payload = {
        "sub": str(user_id),
        "role": Role(role).value,
        "exp": int(time.time()) + lifetime,
    }
    header = {"alg": settings.algorithm, "typ": "JWT"}
    header_b64 = _b64_url_encode(json.dumps(header, separators=(",", ":")).encode("utf-8"))
    payload_b64 = _b64_url_encode(json.dumps(payload, separators=(",", ":")).encode("utf-8"))
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    signature = _sign(signing_input, secret or settings.secret_key)
    return f"{header_b64}.{payload_b64}.{_b64_url_encode(signature)}"


def decode_access_token(token: str, secret: str | None = None) -> dict:
    """Verify signature and expiry and return the raw claims.

    Raises ``InvalidCredentialError`` on any defect.
    """
    parts = token.split(".")
    if len(parts) != 3:
        raise InvalidCredentialError("Malformed token")
    header_b64, payload_b64, signature_b64 = parts
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    expected = _sign(signing_input, secret or settings.secret_key)
    try:
        actual = _b64_url_decode(signature_b64)
        claims = json.loads(_b64_url_decode(payload_b64).decode("utf-8"))
    except (binascii.Error, UnicodeDecodeError, ValueError) as e:
        raise InvalidCredentialError("Malformed token") from e
    if not hmac.compare_digest(expected, actual):
        raise InvalidCredentialError("Invalid token signature")
    if not isinstance(claims, dict):
        raise InvalidCredentialError("Malformed token")
    exp = claims.get("exp")
    if not isinstance(exp, int) or exp < int(time.time()):
        raise InvalidCredentialError("Token expired")
    return claims


def authenticate(credential: str | None) -> Identity:
    """Turn a bearer credential into an ``Identity``."""
    if not credential:
        raise InvalidCredentialError("Access denied. No token provided")
    claims = decode_access_token(credential)
    try:
        return Identity(id=UUID(claims["sub"]), role=Role(claims["role"]))
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise InvalidCredentialError("Token is missing required claims") from e


def require_role(identity: Identity | None, allowed_roles: Iterable[Role]) -> Identity:
    allowed_roles = tuple(allowed_roles)
    if identity is None:
        raise UnauthenticatedError()
    if identity.role not in allowed_roles:
        raise ForbiddenError(f"{' or '.join(r.value for r in allowed_roles)} access required")
    return identity


def hash_password(password: str, iterations: int | None = None) -> str:
    salt = os.urandom(16)
    dk = hashlib.pbkdf2_hmac(
        "sha256",
        password.encode("utf-8"),
        salt,
        iterations or settings.password_hash_iterations,
    )
    return f"{salt.hex()}${dk.hex()}"


def verify_password(plain_password: str, hashed_password: str | None, iterations: int | None = None) -> bool:
    if not hashed_password or "$" not in hashed_password:
        return False
    salt_hex, hash_hex = hashed_password.split("$", 1)
    try:
        salt = bytes.fromhex(salt_hex)
        stored_hash = bytes.fromhex(hash_hex)
    except ValueError:
        return False
    dk = hashlib.pbkdf2_hmac(
        "sha256",
        plain_password.encode("utf-8"),
        salt,
        iterations or settings.password_hash_iterations,
    )
    return hmac.compare_digest(dk, stored_hash)
