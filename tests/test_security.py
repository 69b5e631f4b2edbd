from datetime import timedelta

import pytest

from finance_tracker.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    password_meets_policy,
    verify_password,
)


@pytest.mark.parametrize("password", ["Abc123_&", "aB", "Secret_Pass1", "xY&&__9"])
def test_password_policy_accepts(password):
    assert password_meets_policy(password)


@pytest.mark.parametrize("password", [
    "abc123",       # no uppercase
    "ABC123",       # no lowercase
    "abc!123",      # disallowed symbol
    "Abc!123",      # disallowed symbol even with both cases
    "Abc 123",      # whitespace
    "Abc123\n",     # trailing newline
    "",
    None,
])
def test_password_policy_rejects(password):
    assert not password_meets_policy(password)


def test_hash_is_salted_and_verifies():
    first = hash_password("Abc123_&")
    second = hash_password("Abc123_&")
    assert first != second
    assert verify_password("Abc123_&", first)
    assert not verify_password("abc123_&", first)


def test_verify_password_with_garbage_hash():
    assert not verify_password("Abc123_&", "not-a-bcrypt-hash")


def test_token_roundtrip_carries_user_id():
    token = create_access_token(42)
    assert decode_access_token(token) == 42


def test_expired_token_is_rejected():
    token = create_access_token(42, expires_delta=timedelta(seconds=-5))
    assert decode_access_token(token) is None


def test_tampered_token_is_rejected():
    token = create_access_token(42)
    assert decode_access_token(token[:-2] + "xx") is None
