from oauth2_core.auth.parameter_names import OAuth2ParameterNames


class InvalidArgumentError(ValueError):
    """Raised when a token or token response would violate its invariants"""


class AuthorizationError(Exception):
    def __init__(self, error: str, error_description: str = "", error_uri: str | None = None):
        super().__init__(error, error_description, error_uri)
        self.error = error
        self.error_description = error_description
        self.error_uri = error_uri

    def __str__(self):
        return f'{self.error}: {self.error_description}'

    @classmethod
    def check(cls, data: dict):
        if data.get(OAuth2ParameterNames.ERROR, ""):
            raise cls(
                data.get(OAuth2ParameterNames.ERROR, ""),
                data.get(OAuth2ParameterNames.ERROR_DESCRIPTION, "") or "",
                data.get(OAuth2ParameterNames.ERROR_URI),
            )
