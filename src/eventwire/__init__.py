"""eventwire: convention-based handler binding for a publish/subscribe bus."""

from loguru import logger

__version__ = "0.1.0"

# Library default: silent until the application calls eventwire.log.setup_logging.
logger.disable("eventwire")
