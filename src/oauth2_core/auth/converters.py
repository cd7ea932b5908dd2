import typing as t
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from oauth2_core.auth.exceptions import AuthorizationError, InvalidArgumentError
from oauth2_core.auth.parameter_names import OAuth2ParameterNames
from oauth2_core.auth.token_response import AccessTokenResponse
from oauth2_core.config import logger


class TokenData(BaseModel):
    model_config = ConfigDict(extra='ignore')

    access_token: str
    token_type: str
    expires_in: int | None = Field(default=None)
    refresh_token: str | None = Field(default=None)
    scope: list[str] = Field(default_factory=list)

    @field_validator("scope", mode="before")
    @classmethod
    def split_scope(cls, value: t.Any) -> t.Any:
        # scope is space-delimited on the wire, some servers send a JSON array instead
        if value is None:
            return []
        if isinstance(value, str):
            return value.split()
        return value

    @field_validator("expires_in", mode="before")
    @classmethod
    def reject_bool_expires_in(cls, value: t.Any) -> t.Any:
        # lax int coercion would turn true/false into 1/0
        if isinstance(value, bool):
            raise ValueError("expires_in must be a number of seconds, not a boolean")
        return value


def token_response_from_parameters(parameters: t.Mapping[str, t.Any]) -> AccessTokenResponse:
    """
    Create a token response from the parameters returned by a token endpoint.

    Raises `AuthorizationError` for an error response and `InvalidArgumentError`
    if the standard fields are missing or malformed.
    """
    AuthorizationError.check(dict(parameters))
    try:
        token_data = TokenData(**parameters)
    except ValidationError as e:
        logger.warning(f"Malformed token response: {e.error_count()} validation error(s)")
        raise InvalidArgumentError(f"malformed token response: {e}") from e

    additional_parameters = {
        key: value
        for key, value in parameters.items()
        if key not in OAuth2ParameterNames.TOKEN_RESPONSE
    }
    return (
        AccessTokenResponse.with_token(token_data.access_token)
        .token_type(token_data.token_type)
        .expires_in(token_data.expires_in)
        .scopes(token_data.scope)
        .refresh_token(token_data.refresh_token)
        .additional_parameters(additional_parameters)
        .build()
    )


def token_response_to_parameters(
    response: AccessTokenResponse, now: datetime | None = None
) -> dict[str, t.Any]:
    access_token = response.access_token
    parameters: dict[str, t.Any] = {
        OAuth2ParameterNames.ACCESS_TOKEN: access_token.token_value,
        OAuth2ParameterNames.TOKEN_TYPE: access_token.token_type.value,
    }
    expires_in = access_token.expires_in(now)
    if expires_in is not None:
        parameters[OAuth2ParameterNames.EXPIRES_IN] = expires_in
    if access_token.scopes:
        parameters[OAuth2ParameterNames.SCOPE] = " ".join(access_token.scopes)
    if response.refresh_token is not None:
        parameters[OAuth2ParameterNames.REFRESH_TOKEN] = response.refresh_token.token_value
    parameters.update(response.additional_parameters)
    return parameters
