from oauth2_core.settings.auth import auth_settings

TOKEN_EXPIRATION_BUFFER = auth_settings.token_expiration_buffer
