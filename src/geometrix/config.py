"""
Global numeric constants and environment-driven settings.

Exports:
    EPS (float): Tolerance for floating point comparisons.
    DIRECTION_TOLERANCE (float): Allowed deviation of a decoded direction's
        magnitude from 1.
    DEFAULT_LOG_LEVEL (str): Log level used by the command line when
        ``--log-level`` is not given.
"""
import os


# Numerical tolerance for floating point comparisons
EPS = 1e-10

# Decoded directions must have unit magnitude within this tolerance
DIRECTION_TOLERANCE = 1e-6

# Indentation used when writing JSON files
JSON_INDENT = 2


def get_log_level(default: str = "WARNING") -> str:
    """
    Read the log level name from the ``GEOMETRIX_LOG_LEVEL`` variable.

    Unknown names fall back to ``default``.
    """
    value = os.environ.get("GEOMETRIX_LOG_LEVEL", default).strip().upper()
    if value not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        return default
    return value


DEFAULT_LOG_LEVEL: str = get_log_level()
