"""Runtime invariant violations.

Expected failures (network errors, stale selections) never raise; they are
State. Only programming errors surface here.
"""

import logging


class RuntimeInvariantError(RuntimeError):
    """The runtime was driven in a way its contract forbids."""


def violation(message: str, *, debug: bool, logger: logging.Logger) -> None:
    """Raise in debug mode; log and carry on otherwise."""
    if debug:
        raise RuntimeInvariantError(message)
    logger.warning("runtime invariant violated (ignored): %s", message)
