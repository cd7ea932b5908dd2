class OAuth2ParameterNames:
    """
    Standard parameter names of a token endpoint response.

    https://datatracker.ietf.org/doc/html/rfc6749#section-5.1
    https://datatracker.ietf.org/doc/html/rfc6749#section-5.2
    """

    ACCESS_TOKEN = "access_token"
    TOKEN_TYPE = "token_type"
    EXPIRES_IN = "expires_in"
    REFRESH_TOKEN = "refresh_token"
    SCOPE = "scope"
    ERROR = "error"
    ERROR_DESCRIPTION = "error_description"
    ERROR_URI = "error_uri"

    TOKEN_RESPONSE = frozenset(
        {ACCESS_TOKEN, TOKEN_TYPE, EXPIRES_IN, REFRESH_TOKEN, SCOPE}
    )
