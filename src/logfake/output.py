"""
OutputManager: THAC0 verbosity-gated diagnostics for the fake itself.

The fake reports what it does internally (channel resolution, context
changes, dumps, container binding) through named diagnostic channels.
These messages are about the fake, not the records it captures, and go
to stderr.

The emit rule is: message shows when message.level <= threshold.
The threshold is either a per-channel override or the global verbosity.

THAC0 axis:
    ←── quieter ────────── default ────────── louder ──→
    -4    -3     -2     -1     0     1      2      3
    wall  errors warnings minimal default timing config debug

Diagnostic channels:
    registry    channel and stack resolution, forgetting
    context     context store changes
    dump        dump handler invocations
    container   binding the fake into a container
"""

import os
import sys
from typing import Any, Dict, Iterable, Optional, TextIO

# Level constants (the system itself works with raw integers)
DEBUG = 3
CONFIG = 2
TIMING = 1
DEFAULT = 0
MINIMAL = -1
WARNING = -2
ERROR = -3
NOTHING = -4

VERBOSITY_ENV = 'LOGFAKE_VERBOSITY'


class OutputManager:
    """Verbosity-gated writer for the fake's own diagnostics.

    Usage::

        out = OutputManager(verbosity=3)
        out.emit(3, "Resolved channel [{name}]", channel='registry', name='x')
    """

    def __init__(
        self,
        verbosity: int = 0,
        channel_overrides: Dict[str, int] = None,
        file: TextIO = None,
    ):
        self.verbosity = verbosity
        self.channel_overrides: Dict[str, int] = dict(channel_overrides or {})
        self.file = file if file is not None else sys.stderr

    def threshold(self, channel: str) -> int:
        """Return the effective threshold for a channel."""
        return self.channel_overrides.get(channel, self.verbosity)

    def emit(self, level: int, message: str, *,
             channel: str = 'registry', **kwargs: Any) -> None:
        """Write a message if level <= threshold for that channel.

        Args:
            level: Message level (higher = more verbose)
            message: Format string (uses str.format with kwargs)
            channel: Diagnostic channel name
            **kwargs: Values for template placeholders
        """
        threshold = self.threshold(channel)
        if threshold <= NOTHING or level > threshold:
            return
        text = message.format(**kwargs) if kwargs else message
        print(f"[logfake:{channel}] {text}", file=self.file)

    def debug(self, message: str, *, channel: str, **kwargs: Any) -> None:
        """Emit at DEBUG level (3)."""
        self.emit(DEBUG, message, channel=channel, **kwargs)

    def channel_active(self, channel: str, level: int = DEBUG) -> bool:
        """True if a message at `level` on `channel` would be written."""
        threshold = self.threshold(channel)
        return threshold > NOTHING and level <= threshold


def parse_channel_spec(spec: str):
    """Parse ``NAME[:LEVEL]`` into ``(name, level)``.

    A bare name (or empty level slot) enables the channel at DEBUG so
    every diagnostic on it shows.
    """
    name, _, level = spec.partition(':')
    return name, int(level) if level else DEBUG


# =============================================================================
# Module-level singleton
# =============================================================================

_manager: Optional[OutputManager] = None


def init_output(verbosity: int = 0,
                channels: Iterable[str] = None,
                file: TextIO = None) -> OutputManager:
    """Initialize the module-level OutputManager singleton.

    Args:
        verbosity: THAC0 verbosity level
        channels: Channel spec strings (e.g., ['registry', 'dump:1'])
        file: Destination stream (default: stderr)

    Returns:
        The initialized OutputManager instance
    """
    global _manager

    channel_overrides = {}
    for spec in channels or ():
        name, level = parse_channel_spec(spec)
        channel_overrides[name] = level

    _manager = OutputManager(
        verbosity=verbosity,
        channel_overrides=channel_overrides,
        file=file,
    )
    return _manager


def get_output() -> OutputManager:
    """Get the module-level OutputManager, creating a default if needed.

    The default manager takes its verbosity from LOGFAKE_VERBOSITY.
    """
    global _manager
    if _manager is None:
        try:
            verbosity = int(os.environ.get(VERBOSITY_ENV, '0'))
        except ValueError:
            verbosity = DEFAULT
        _manager = OutputManager(verbosity=verbosity)
    return _manager
