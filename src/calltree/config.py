"""
Configuration for trace construction.
"""

from dataclasses import dataclass
import logging
import os

logger = logging.getLogger(__name__)

NANOS_PER_MILLI = 1_000_000

ENTRY_TIME_UNIT_ENV = "CALLTREE_ENTRY_TIME_UNIT_NANOS"
DURATION_UNIT_ENV = "CALLTREE_DURATION_UNIT_NANOS"


def _read_unit(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer number of nanoseconds, got {raw!r}")
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


@dataclass(frozen=True)
class TraceConfig:
    """
    Time units used by the producer of a trace.

    Both units are given as the number of nanoseconds in one unit. The default
    matches the common producer setup: entry timestamps in milliseconds and
    durations (response, execution and CPU time) in nanoseconds.
    """
    entry_time_unit_nanos: int = NANOS_PER_MILLI
    duration_unit_nanos: int = 1

    def __post_init__(self):
        if self.entry_time_unit_nanos <= 0:
            raise ValueError(f"entry_time_unit_nanos must be positive, got {self.entry_time_unit_nanos}")
        if self.duration_unit_nanos <= 0:
            raise ValueError(f"duration_unit_nanos must be positive, got {self.duration_unit_nanos}")

    @classmethod
    def from_env(cls) -> "TraceConfig":
        """
        Build a configuration from environment variables.

        Reads CALLTREE_ENTRY_TIME_UNIT_NANOS and CALLTREE_DURATION_UNIT_NANOS,
        falling back to the defaults for unset variables.
        """
        config = cls(
            entry_time_unit_nanos=_read_unit(ENTRY_TIME_UNIT_ENV, NANOS_PER_MILLI),
            duration_unit_nanos=_read_unit(DURATION_UNIT_ENV, 1),
        )
        logger.debug(f"Loaded trace config from environment: {config}")
        return config
