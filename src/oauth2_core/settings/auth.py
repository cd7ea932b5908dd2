from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AuthSettings(BaseSettings):
    """
    General token settings
    """

    model_config = SettingsConfigDict(env_prefix="")

    token_expiration_buffer: int = Field(
        default=120,
        alias="TOKEN_EXPIRATION_BUFFER",
        description="Buffer time in seconds before token expiration",
    )


auth_settings = AuthSettings()
