"""Tests for bearer tokens, password hashing and the role gate."""

import base64
import json
from uuid import uuid4

import pytest

from eventia.auth.dtos import Identity, Role
from eventia.auth.security import (
    _b64_url_encode,
    _sign,
    authenticate,
    create_access_token,
    decode_access_token,
    hash_password,
    require_role,
    verify_password,
)
from eventia.config.settings import settings
from eventia.errors import ForbiddenError, InvalidCredentialError, UnauthenticatedError

# Token Tests


def test_token_round_trips_identity():
    user_id = uuid4()
    token = create_access_token(user_id, Role.VENDOR)

    identity = authenticate(token)

    assert identity == Identity(id=user_id, role=Role.VENDOR)


def test_token_claims_carry_subject_role_and_expiry():
    user_id = uuid4()
    claims = decode_access_token(create_access_token(user_id, Role.ADMIN, expires_in=60))

    assert claims["sub"] == str(user_id)
    assert claims["role"] == "Admin"
    assert isinstance(claims["exp"], int)


def test_expired_token_is_rejected():
    token = create_access_token(uuid4(), Role.USER, expires_in=-10)

    with pytest.raises(InvalidCredentialError, match="expired"):
        authenticate(token)


def test_token_signed_with_other_secret_is_rejected():
    token = create_access_token(uuid4(), Role.USER, secret="not-the-server-secret")

    with pytest.raises(InvalidCredentialError, match="signature"):
        authenticate(token)


def test_tampered_payload_is_rejected():
    header, _, signature = create_access_token(uuid4(), Role.USER).split(".")
    forged_payload = create_access_token(uuid4(), Role.ADMIN).split(".")[1]

    with pytest.raises(InvalidCredentialError):
        authenticate(f"{header}.{forged_payload}.{signature}")


@pytest.mark.parametrize("credential", ["", None, "abc", "a.b", "a.b.c.d", "!!.@@.##"])
def test_malformed_credentials_are_rejected(credential):
    with pytest.raises(InvalidCredentialError):
        authenticate(credential)


def test_unknown_role_claim_is_rejected():
    token = create_access_token(uuid4(), Role.USER)
    header, payload, _ = token.split(".")
    # re-signed, so only the role claim is wrong
    claims = json.loads(base64.urlsafe_b64decode(payload + "=" * (-len(payload) % 4)))
    claims["role"] = "Superuser"
    payload = _b64_url_encode(json.dumps(claims).encode("utf-8"))
    signature = _b64_url_encode(_sign(f"{header}.{payload}".encode("utf-8"), settings.secret_key))

    with pytest.raises(InvalidCredentialError, match="claims"):
        authenticate(f"{header}.{payload}.{signature}")


def test_invalid_credential_is_an_authentication_failure():
    assert issubclass(InvalidCredentialError, UnauthenticatedError)
    assert InvalidCredentialError.status_code == 401


# Role Gate Tests


def test_require_role_admits_listed_role():
    identity = Identity(id=uuid4(), role=Role.USER)

    assert require_role(identity, [Role.USER, Role.ADMIN]) is identity


def test_require_role_without_identity_is_unauthenticated():
    with pytest.raises(UnauthenticatedError) as exc_info:
        require_role(None, [Role.USER])

    assert exc_info.value.status_code == 401


def test_require_role_with_wrong_role_is_forbidden():
    identity = Identity(id=uuid4(), role=Role.VENDOR)

    with pytest.raises(ForbiddenError) as exc_info:
        require_role(identity, [Role.USER])

    assert exc_info.value.status_code == 403
    assert exc_info.value.message == "User access required"


# Password Tests


def test_password_hash_verifies():
    hashed = hash_password("secret123")

    assert verify_password("secret123", hashed)
    assert not verify_password("wrong", hashed)


def test_password_hashes_are_salted():
    assert hash_password("secret123") != hash_password("secret123")


@pytest.mark.parametrize("stored", [None, "", "nodollar", "zz$zz"])
def test_verify_password_against_garbage_is_false(stored):
    assert verify_password("secret123", stored) is False
