from datetime import datetime, timedelta, timezone

import pytest

from oauth2_core.auth.exceptions import InvalidArgumentError
from oauth2_core.auth.token import AccessToken, RefreshToken, TokenType, normalize_scopes

ISSUED_AT = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "value, target",
    (
        ("Bearer", TokenType.BEARER),
        ("bearer", TokenType.BEARER),
        ("BEARER", TokenType.BEARER),
        (" bearer ", TokenType.BEARER),
        ("dpop", TokenType.DPOP),
        ("DPoP", TokenType.DPOP),
    ),
)
def test_token_type_from_value_known(value, target):
    assert TokenType.from_value(value) is target


def test_token_type_from_value_unknown_is_kept():
    token_type = TokenType.from_value("MAC")
    assert token_type.value == "MAC"
    assert token_type == TokenType("mac")
    assert token_type != TokenType.BEARER
    assert hash(token_type) == hash(TokenType("mac"))


@pytest.mark.parametrize("value", ("", "   ", None))
def test_token_type_empty_value_raises(value):
    with pytest.raises(InvalidArgumentError):
        TokenType.from_value(value)


def test_access_token_rejects_expires_at_before_issued_at():
    with pytest.raises(InvalidArgumentError):
        AccessToken(
            "token",
            TokenType.BEARER,
            issued_at=ISSUED_AT,
            expires_at=ISSUED_AT - timedelta(seconds=1),
        )


def test_access_token_rejects_naive_timestamps():
    with pytest.raises(InvalidArgumentError):
        AccessToken("token", TokenType.BEARER, issued_at=datetime(2025, 1, 1))


@pytest.mark.parametrize("token_type", (None, "Bearer"))
def test_access_token_rejects_invalid_token_type(token_type):
    with pytest.raises(InvalidArgumentError):
        AccessToken("token", token_type, issued_at=ISSUED_AT)


def test_access_token_rejects_missing_issued_at():
    with pytest.raises(InvalidArgumentError):
        AccessToken("token", TokenType.BEARER, issued_at=None)


@pytest.mark.parametrize(
    "scopes, target",
    (
        (None, ()),
        ([], ()),
        (["a", "b"], ("a", "b")),
        (["b", "a", "b"], ("b", "a")),
        (("read", "write", "read", "admin"), ("read", "write", "admin")),
    ),
)
def test_normalize_scopes(scopes, target):
    assert normalize_scopes(scopes) == target


@pytest.mark.parametrize("scopes", ("read write", ["read", ""], ["read", 1]))
def test_normalize_scopes_invalid(scopes):
    with pytest.raises(InvalidArgumentError):
        normalize_scopes(scopes)


@pytest.mark.parametrize(
    "now_offset, buffer, target",
    (
        (0, 0, False),
        (3599, 0, False),
        (3600, 0, True),
        (3479, 120, False),
        (3480, 120, True),
        (7200, 0, True),
    ),
)
def test_access_token_is_expired(now_offset, buffer, target):
    token = AccessToken(
        "token",
        TokenType.BEARER,
        issued_at=ISSUED_AT,
        expires_at=ISSUED_AT + timedelta(seconds=3600),
    )
    now = ISSUED_AT + timedelta(seconds=now_offset)
    assert token.is_expired(now=now, buffer=buffer) is target


def test_access_token_without_expiry_never_expires():
    token = AccessToken("token", TokenType.BEARER, issued_at=ISSUED_AT)
    assert token.is_expired(now=ISSUED_AT + timedelta(days=365)) is False
    assert token.expires_in() is None


def test_access_token_expires_in():
    token = AccessToken(
        "token",
        TokenType.BEARER,
        issued_at=ISSUED_AT,
        expires_at=ISSUED_AT + timedelta(seconds=3600),
    )
    assert token.expires_in(now=ISSUED_AT) == 3600
    assert token.expires_in(now=ISSUED_AT + timedelta(seconds=600)) == 3000
    assert token.expires_in(now=ISSUED_AT + timedelta(hours=2)) == 0


def test_tokens_compare_by_value():
    first = AccessToken("token", TokenType.BEARER, issued_at=ISSUED_AT, scopes=["a"])
    second = AccessToken("token", TokenType("bearer"), issued_at=ISSUED_AT, scopes=["a"])
    third = AccessToken("token", TokenType.BEARER, issued_at=ISSUED_AT, scopes=["b"])

    assert first == second
    assert hash(first) == hash(second)
    assert first != third
    assert first != RefreshToken("token", issued_at=ISSUED_AT)


def test_refresh_token_requires_value():
    with pytest.raises(InvalidArgumentError):
        RefreshToken("")
    assert RefreshToken("refresh").issued_at is None
