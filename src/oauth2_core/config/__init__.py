from .logging import LoggingConfig, logger
