import typing as t
from datetime import datetime, timedelta

from oauth2_core.auth.exceptions import InvalidArgumentError
from oauth2_core.config.auth import TOKEN_EXPIRATION_BUFFER
from oauth2_core.utils import get_ts_utcnow, secret_2_safe_str


class TokenType:
    """
    Scheme under which an access token must be presented to a resource server.

    The set of schemes is open: servers may issue types this module does not know about.
    Values are compared case-insensitively.
    """

    BEARER: t.ClassVar["TokenType"]
    DPOP: t.ClassVar["TokenType"]

    __slots__ = ("_value",)

    def __init__(self, value: str):
        if not isinstance(value, str) or not value.strip():
            raise InvalidArgumentError("token type value cannot be empty")
        self._value = value.strip()

    @property
    def value(self) -> str:
        return self._value

    @classmethod
    def known_types(cls) -> tuple["TokenType", ...]:
        return cls.BEARER, cls.DPOP

    @classmethod
    def from_value(cls, value: str) -> "TokenType":
        token_type = cls(value)
        for known in cls.known_types():
            if known == token_type:
                return known
        return token_type

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TokenType):
            return NotImplemented
        return self._value.lower() == other._value.lower()

    def __hash__(self) -> int:
        return hash(self._value.lower())

    def __repr__(self) -> str:
        return f"TokenType({self._value!r})"

    def __str__(self) -> str:
        return self._value


TokenType.BEARER = TokenType("Bearer")
TokenType.DPOP = TokenType("DPoP")


def _check_timestamp(name: str, value: datetime | None) -> None:
    if value is None:
        return
    if not isinstance(value, datetime):
        raise InvalidArgumentError(f"{name} must be a datetime, got {type(value).__name__}")
    if value.tzinfo is None:
        raise InvalidArgumentError(f"{name} must be timezone-aware")


class AbstractToken:
    """Token value plus its lifetime window"""

    def __init__(
        self,
        token_value: str,
        issued_at: datetime | None = None,
        expires_at: datetime | None = None,
    ):
        if not isinstance(token_value, str) or not token_value:
            raise InvalidArgumentError("token value cannot be empty")
        _check_timestamp("issued_at", issued_at)
        _check_timestamp("expires_at", expires_at)
        if issued_at is not None and expires_at is not None and expires_at < issued_at:
            raise InvalidArgumentError("expires_at must be at or after issued_at")

        self._token_value = token_value
        self._issued_at = issued_at
        self._expires_at = expires_at

    @property
    def token_value(self) -> str:
        return self._token_value

    @property
    def issued_at(self) -> datetime | None:
        return self._issued_at

    @property
    def expires_at(self) -> datetime | None:
        return self._expires_at

    def expires_in(self, now: datetime | None = None) -> int | None:
        """Whole seconds left before expiration, or None if the token has no expiry"""
        if self._expires_at is None:
            return None
        now = now or get_ts_utcnow()
        return max(0, int((self._expires_at - now).total_seconds()))

    def is_expired(self, now: datetime | None = None, buffer: int | None = None) -> bool:
        """
        A token is treated as expired `buffer` seconds before its actual expiration,
        so that it is not handed out right before the resource server starts rejecting it.
        Tokens without an expiry never expire.
        """
        if self._expires_at is None:
            return False
        now = now or get_ts_utcnow()
        buffer = TOKEN_EXPIRATION_BUFFER if buffer is None else buffer
        return now >= self._expires_at - timedelta(seconds=buffer)

    def _key(self) -> tuple:
        return self._token_value, self._issued_at, self._expires_at

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._key() == other._key()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(token_value={secret_2_safe_str(self._token_value)!r}, "
            f"issued_at={self._issued_at!r}, expires_at={self._expires_at!r})"
        )


class AccessToken(AbstractToken):
    def __init__(
        self,
        token_value: str,
        token_type: TokenType,
        issued_at: datetime,
        expires_at: datetime | None = None,
        scopes: t.Iterable[str] | None = None,
    ):
        if token_type is None:
            raise InvalidArgumentError("token type cannot be None")
        if not isinstance(token_type, TokenType):
            raise InvalidArgumentError(
                f"token type must be a TokenType, got {type(token_type).__name__}"
            )
        if issued_at is None:
            raise InvalidArgumentError("issued_at cannot be None")
        super().__init__(token_value, issued_at, expires_at)
        self._token_type = token_type
        self._scopes = normalize_scopes(scopes)

    @property
    def token_type(self) -> TokenType:
        return self._token_type

    @property
    def issued_at(self) -> datetime:
        return self._issued_at  # type: ignore[return-value]

    @property
    def scopes(self) -> tuple[str, ...]:
        return self._scopes

    def _key(self) -> tuple:
        return super()._key() + (self._token_type, self._scopes)

    def __repr__(self) -> str:
        return (
            f"AccessToken(token_value={secret_2_safe_str(self._token_value)!r}, "
            f"token_type={self._token_type!r}, issued_at={self._issued_at!r}, "
            f"expires_at={self._expires_at!r}, scopes={self._scopes!r})"
        )


class RefreshToken(AbstractToken):
    pass


def normalize_scopes(scopes: t.Iterable[str] | None) -> tuple[str, ...]:
    """Copy scopes into a tuple, dropping duplicates and keeping first-seen order"""
    if scopes is None:
        return ()
    if isinstance(scopes, str):
        raise InvalidArgumentError("scopes must be a collection of strings, not a string")
    res = tuple(dict.fromkeys(scopes))
    for scope in res:
        if not isinstance(scope, str) or not scope:
            raise InvalidArgumentError(f"invalid scope: {scope!r}")
    return res
