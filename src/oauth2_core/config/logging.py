import logging
import sys

import uvicorn.logging

from oauth2_core.settings.logging import LoggingSettings


class LoggingConfig:

    LOGGING_SETTINGS = LoggingSettings()

    @classmethod
    def configure_logging(cls):
        # Setting up log levels
        for name in ["oauth2_core", "__main__"]:
            logging.getLogger(name).setLevel(cls.LOGGING_SETTINGS.level)

        # Configuring the root logger
        root = logging.getLogger()

        root_has_stderr_handler = any(
            isinstance(handler, logging.StreamHandler) and handler.stream == sys.stderr
            for handler in root.handlers
        )

        if not root_has_stderr_handler:
            formatter = uvicorn.logging.DefaultFormatter(
                fmt=cls.LOGGING_SETTINGS.format,
                datefmt=cls.LOGGING_SETTINGS.date_format,
                use_colors=True,
            )

            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(formatter)
            root.addHandler(handler)


LoggingConfig.configure_logging()
logger = logging.getLogger("oauth2_core")
