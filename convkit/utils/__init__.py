"""Utils module -- config and logging."""

from convkit.utils.config import settings
from convkit.utils.logger import get_logger, log_conversion

__all__ = ["settings", "get_logger", "log_conversion"]
