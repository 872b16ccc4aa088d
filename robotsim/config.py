"""
Central configuration for robotsim tunables and shared constants.
"""

import logging
import os

TRACE: int = 5
logging.addLevelName(TRACE, "TRACE")
# Add Logger.trace if missing
if not hasattr(logging.Logger, "trace"):

    def _trace(self, msg, *args, **kwargs):
        if self.isEnabledFor(TRACE):
            self._log(TRACE, msg, args, **kwargs)

    logging.Logger.trace = _trace  # type: ignore[attr-defined]
    logging.TRACE = TRACE  # type: ignore[attr-defined]

TRACE_ENABLED = str(os.getenv("ROBOTSIM_TRACE", "0")).lower() in ("1", "true", "yes", "on")

logger = logging.getLogger(__name__)

DEFAULT_GRID_SIZE: int = 6
LOG_LEVEL_DEFAULT: str = "INFO"


# Table side length; can be overridden via env "ROBOTSIM_GRID_SIZE"
def _parse_grid_size() -> int:
    raw = os.getenv("ROBOTSIM_GRID_SIZE")
    if not raw:
        return DEFAULT_GRID_SIZE
    try:
        size = int(raw.strip())
    except ValueError:
        logger.warning("Ignoring non-integer ROBOTSIM_GRID_SIZE=%r", raw)
        return DEFAULT_GRID_SIZE
    if size < 1:
        logger.warning("Ignoring ROBOTSIM_GRID_SIZE=%d (must be >= 1)", size)
        return DEFAULT_GRID_SIZE
    return size


GRID_SIZE: int = _parse_grid_size()
