import logging
import sys

from pbxedit.config import Config

LOGGER_NAME = "pbxedit"
LOG_FORMAT = "[pbxedit.%(levelname)s] [%(filename)s:%(lineno)d] %(funcName)s: %(message)s"

# Level above CRITICAL, nothing gets through
SILENT = logging.CRITICAL + 1


# Install a single stream handler on the package logger, replacing any handler
# a previous call installed...
def configure_logging(config: Config, stream=None) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, "_pbxedit", False):
            logger.removeHandler(handler)
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    setattr(handler, "_pbxedit", True)
    logger.addHandler(handler)
    # module loggers have no level of their own and inherit this one
    logger.setLevel(config.log_level.upper() if config.print_log else SILENT)
    return logger
