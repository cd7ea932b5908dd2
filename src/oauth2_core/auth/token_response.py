import typing as t
from datetime import datetime, timedelta
from types import MappingProxyType

from oauth2_core.auth.exceptions import InvalidArgumentError
from oauth2_core.auth.token import AccessToken, RefreshToken, TokenType
from oauth2_core.config import logger
from oauth2_core.utils import get_ts_utcnow, secret_2_safe_str


class AccessTokenResponse:
    """
    What a token endpoint returns after a successful grant: the access token,
    an optional refresh token and any vendor-specific parameters.

    Instances are built with `AccessTokenResponse.with_token(...)...build()`.
    """

    def __init__(
        self,
        access_token: AccessToken,
        refresh_token: RefreshToken | None = None,
        additional_parameters: t.Mapping[str, t.Any] | None = None,
    ):
        self._access_token = access_token
        self._refresh_token = refresh_token
        self._additional_parameters = MappingProxyType(dict(additional_parameters or {}))

    @classmethod
    def with_token(cls, token_value: str | None) -> "AccessTokenResponseBuilder":
        return AccessTokenResponseBuilder(token_value)

    @classmethod
    def with_response(cls, response: "AccessTokenResponse") -> "AccessTokenResponseBuilder":
        access_token = response.access_token
        builder = (
            AccessTokenResponseBuilder(access_token.token_value)
            .token_type(access_token.token_type)
            .scopes(access_token.scopes)
            .additional_parameters(response.additional_parameters)
        )
        # keeps the exact deadline, expires_in() would round it down to whole seconds
        builder._expires_at = access_token.expires_at
        if response.refresh_token is not None:
            builder.refresh_token(response.refresh_token.token_value)
        return builder

    @property
    def access_token(self) -> AccessToken:
        return self._access_token

    @property
    def refresh_token(self) -> RefreshToken | None:
        return self._refresh_token

    @property
    def additional_parameters(self) -> t.Mapping[str, t.Any]:
        return self._additional_parameters

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AccessTokenResponse):
            return NotImplemented
        return (
            self._access_token == other._access_token
            and self._refresh_token == other._refresh_token
            and self._additional_parameters == other._additional_parameters
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"AccessTokenResponse(access_token={self._access_token!r}, "
            f"refresh_token={self._refresh_token!r}, "
            f"additional_parameters={dict(self._additional_parameters)!r})"
        )


class AccessTokenResponseBuilder:
    """
    Collects token endpoint fields and validates them all at once in `build()`.

    Setters return the builder itself, and calling a setter again replaces the previous value.
    `expires_in` is a lifetime in seconds counted from the moment `build()` is called,
    the same unit as the `expires_in` parameter of a token response.
    """

    def __init__(self, token_value: str | None):
        self._token_value = token_value
        self._token_type: TokenType | str | None = None
        self._expires_in: int | None = None
        self._expires_at: datetime | None = None
        self._scopes: t.Iterable[str] | None = None
        self._refresh_token: str | None = None
        self._additional_parameters: t.Mapping[str, t.Any] | None = None

    def token_type(self, token_type: TokenType | str | None) -> "AccessTokenResponseBuilder":
        self._token_type = token_type
        return self

    def expires_in(self, expires_in: int | None) -> "AccessTokenResponseBuilder":
        self._expires_in = expires_in
        self._expires_at = None
        return self

    def scopes(self, scopes: t.Iterable[str] | None) -> "AccessTokenResponseBuilder":
        # materialized here so that one-shot iterables survive repeated build() calls
        if scopes is not None and not isinstance(scopes, str):
            scopes = tuple(scopes)
        self._scopes = scopes
        return self

    def refresh_token(self, refresh_token: str | None) -> "AccessTokenResponseBuilder":
        self._refresh_token = refresh_token
        return self

    def additional_parameters(
        self, additional_parameters: t.Mapping[str, t.Any] | None
    ) -> "AccessTokenResponseBuilder":
        self._additional_parameters = additional_parameters
        return self

    def build(self) -> AccessTokenResponse:
        if not self._token_value:
            self._fail("access token value cannot be empty")
        if self._token_type is None:
            self._fail("token type cannot be None")
        token_type = self._token_type
        if isinstance(token_type, str):
            token_type = TokenType.from_value(token_type)

        expires_in = self._expires_in
        if expires_in is not None:
            if isinstance(expires_in, bool) or not isinstance(expires_in, int):
                self._fail(f"expires_in must be an integer number of seconds, got {expires_in!r}")
            if expires_in < 0:
                self._fail(f"expires_in cannot be negative, got {expires_in}")

        issued_at = get_ts_utcnow()
        if self._expires_at is not None:
            expires_at = max(self._expires_at, issued_at)
        elif expires_in is not None:
            expires_at = issued_at + timedelta(seconds=expires_in)
        else:
            expires_at = None

        access_token = AccessToken(
            token_value=self._token_value,  # type: ignore[arg-type]
            token_type=token_type,  # type: ignore[arg-type]
            issued_at=issued_at,
            expires_at=expires_at,
            scopes=self._scopes,
        )
        refresh_token = None
        if self._refresh_token:
            refresh_token = RefreshToken(self._refresh_token, issued_at=issued_at)

        response = AccessTokenResponse(
            access_token=access_token,
            refresh_token=refresh_token,
            additional_parameters=self._additional_parameters,
        )
        logger.debug(
            f"Built {access_token.token_type} access token {secret_2_safe_str(access_token.token_value)}"
            f" expiring at {expires_at}, scopes: {access_token.scopes}"
        )
        return response

    @staticmethod
    def _fail(message: str) -> t.NoReturn:
        logger.warning(f"Rejected access token response: {message}")
        raise InvalidArgumentError(message)
