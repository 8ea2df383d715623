"""Version codes, levelled logging and small validated computations."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import IntEnum


class LogLevel(IntEnum):
    """Logging levels; higher values are more verbose."""

    OFF = 0
    ERROR = 1
    WARNING = 2
    INFO = 3
    VERBOSE = 4


DEFAULT_LEVEL = LogLevel.WARNING


def make_version(major: int, minor: int, patch: int) -> int:
    """Combine version parts into a single comparable integer."""
    return major * 10000 + minor * 100 + patch


@dataclass(frozen=True, order=True)
class Version:
    """A three-part version number."""

    major: int
    minor: int
    patch: int

    def code(self) -> int:
        """Return the version as one integer, see :func:`make_version`."""
        return make_version(self.major, self.minor, self.patch)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


VERSION = Version(1, 2, 3)

COMPUTE_MIN = 1
COMPUTE_MAX = 1000


def compute(n: int) -> int:
    """Return ``1 + 2 + ... + n`` for ``n`` in 1..1000."""
    if not COMPUTE_MIN <= n <= COMPUTE_MAX:
        raise ValueError(
            f"value not in range [{COMPUTE_MIN}, {COMPUTE_MAX}]: {n}"
        )
    total = 0
    for i in range(1, n + 1):
        total += i
    return total


def fast_multiply(a: int, b: int) -> int:
    """Return ``a * b``, short-cutting when either factor is zero."""
    if a == 0 or b == 0:
        return 0
    return a * b


def log_message(
    level: LogLevel, message: str, threshold: LogLevel = DEFAULT_LEVEL
) -> str | None:
    """Emit ``message`` if ``level`` is enabled at ``threshold``.

    Errors and warnings go to standard error, the rest to standard
    output. Returns the line written, or None when it was suppressed.
    """
    level = LogLevel(level)
    if level is LogLevel.OFF or level > threshold:
        return None
    line = f"[{level.name}] {message}"
    stream = sys.stderr if level <= LogLevel.WARNING else sys.stdout
    stream.write(line + "\n")
    return line