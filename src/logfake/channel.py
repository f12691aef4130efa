"""
Channel logs and the handles used to write to and assert on them.

A ChannelLog is the registry-owned storage for one channel: its records,
forget counter and context store. ChannelFake and StackFake are thin
handles holding a key into the registry; every handle for the same key
shares the same ChannelLog, so writes through one handle are visible to
assertions through any other.
"""

import sys
from typing import Any, Dict, List, Mapping, Optional

from . import dumper
from . import levels
from .assertions import AssertsLogs
from .exceptions import ExpectationFailed, UsageError
from .output import get_output
from .records import LogRecord


class ChannelLog:
    """Append-only record store for one channel.

    Forgetting a channel bumps `forgotten_count` but keeps the records;
    each record carries the counter value it was written under.
    """

    def __init__(self, name: str):
        self.name = name
        self.records: List[LogRecord] = []
        self.forgotten_count = 0
        self.context: Dict[str, Any] = {}

    def append(self, level: str, message: Any,
               context: Optional[Mapping[str, Any]] = None) -> LogRecord:
        merged = dict(self.context)
        merged.update(context or {})
        record = LogRecord(
            level=level,
            message=str(message),
            context=merged,
            forgotten_count=self.forgotten_count,
            channel=self.name,
        )
        self.records.append(record)
        return record

    def forget(self) -> None:
        self.forgotten_count += 1

    def __repr__(self):
        return (f"ChannelLog(name={self.name!r}, records={len(self.records)}, "
                f"forgotten_count={self.forgotten_count})")


class ChannelFake(AssertsLogs):
    """Handle for a plain channel (also used for on-demand channels)."""

    def __init__(self, registry, key):
        self._registry = registry
        self._key = key

    @property
    def name(self) -> str:
        """Canonical channel name."""
        return self._key.name

    def _log(self) -> ChannelLog:
        return self._registry.log_for(self._key)

    def _records(self) -> List[LogRecord]:
        return list(self._log().records)

    def _forgotten_count(self) -> int:
        return self._log().forgotten_count

    # -------------------------------------------------------------------------
    # Writing
    # -------------------------------------------------------------------------

    def log(self, level: str, message: Any,
            context: Optional[Mapping[str, Any]] = None) -> None:
        """Record a message at an arbitrary level."""
        self._log().append(level, message, context)

    def write(self, level: str, message: Any,
              context: Optional[Mapping[str, Any]] = None) -> None:
        """Alias of log()."""
        self.log(level, message, context)

    def emergency(self, message: Any, context: Optional[Mapping[str, Any]] = None) -> None:
        self.log(levels.EMERGENCY, message, context)

    def alert(self, message: Any, context: Optional[Mapping[str, Any]] = None) -> None:
        self.log(levels.ALERT, message, context)

    def critical(self, message: Any, context: Optional[Mapping[str, Any]] = None) -> None:
        self.log(levels.CRITICAL, message, context)

    def error(self, message: Any, context: Optional[Mapping[str, Any]] = None) -> None:
        self.log(levels.ERROR, message, context)

    def warning(self, message: Any, context: Optional[Mapping[str, Any]] = None) -> None:
        self.log(levels.WARNING, message, context)

    def notice(self, message: Any, context: Optional[Mapping[str, Any]] = None) -> None:
        self.log(levels.NOTICE, message, context)

    def info(self, message: Any, context: Optional[Mapping[str, Any]] = None) -> None:
        self.log(levels.INFO, message, context)

    def debug(self, message: Any, context: Optional[Mapping[str, Any]] = None) -> None:
        self.log(levels.DEBUG, message, context)

    # -------------------------------------------------------------------------
    # Context
    # -------------------------------------------------------------------------

    def with_context(self, context: Mapping[str, Any]) -> "ChannelFake":
        """Merge `context` into every subsequent record of this channel."""
        self._log().context.update(context)
        get_output().debug("Added context keys {keys} to [{name}]",
                           channel='context', keys=sorted(context), name=self.name)
        return self

    def without_context(self) -> "ChannelFake":
        """Drop all shared context for this channel."""
        self._log().context.clear()
        get_output().debug("Cleared context of [{name}]",
                           channel='context', name=self.name)
        return self

    def assert_current_context(self, expected) -> "ChannelFake":
        """Assert on the context that will be merged into the next record.

        Args:
            expected: A mapping compared for equality, or a callable given
                a copy of the current context whose truthy result passes.
        """
        current = dict(self._log().context)
        if callable(expected):
            if not expected(dict(current)):
                raise ExpectationFailed(
                    f"Unexpected context found in the [{self.name}] channel. "
                    f"Found [{current!r}]."
                )
            return self
        if dict(expected) != current:
            raise ExpectationFailed(
                f"Expected to find the context [{dict(expected)!r}] in the "
                f"[{self.name}] channel. Found [{current!r}] instead."
            )
        return self

    # -------------------------------------------------------------------------
    # Dumping
    # -------------------------------------------------------------------------

    def dump(self, level: Optional[str] = None) -> "ChannelFake":
        """Send this channel's records (optionally one level) to the dump handler."""
        records = self._records()
        if level is not None:
            records = [r for r in records if r.level == level]
        dumper.dump([r.to_dict() for r in records])
        return self

    def dd(self, level: Optional[str] = None) -> None:
        """Dump, then stop the process."""
        self.dump(level)
        sys.exit(1)

    def dump_all(self, level: Optional[str] = None):
        raise UsageError("LogFake.dump_all() should not be called from a channel.")

    def dd_all(self, level: Optional[str] = None):
        raise UsageError("`dd_all()` should not be called from a channel.")

    def __repr__(self):
        return f"{type(self).__name__}({self.name!r})"


class StackFake(ChannelFake):
    """Handle for a stack of channels.

    A stack's context is rebuilt each time the stack is resolved, so it
    cannot accumulate context across resolutions.
    """

    def assert_current_context(self, expected):
        raise UsageError(
            "Cannot call [LogFake.stack(...).assert_current_context(...)] as "
            "stack contexts are reset each time they are resolved."
        )


__all__ = ["ChannelLog", "ChannelFake", "StackFake"]
