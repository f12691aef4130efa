"""
Assertion engine: read-only queries over a channel's records.

A record matches a (level, callback) query when its level equals
`level` and either no callback was given or the callback returns a
truthy value. Callbacks are called as

    callback(message, context, forgotten_count)

but may declare fewer parameters: only as many leading arguments as
the callable accepts are passed. The result is converted with bool(),
so any truthy value (1, a non-empty list, ...) counts as a match.
"""

import inspect
from typing import Any, Callable, List, Optional

from .exceptions import ExpectationFailed
from .records import LogRecord

Callback = Callable[..., Any]


def _positional_arity(callback: Callback) -> Optional[int]:
    """Number of positional args `callback` accepts (None = unlimited)."""
    try:
        signature = inspect.signature(callback)
    except (TypeError, ValueError):
        return None
    count = 0
    for param in signature.parameters.values():
        if param.kind == param.VAR_POSITIONAL:
            return None
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            count += 1
    return count


def adapt_callback(callback: Optional[Callback]) -> Callable[[LogRecord], bool]:
    """Wrap a user callback into a strict ``record -> bool`` predicate."""
    if callback is None:
        return lambda record: True

    arity = _positional_arity(callback)

    def predicate(record: LogRecord) -> bool:
        args = (record.message, dict(record.context), record.forgotten_count)
        if arity is not None:
            args = args[:arity]
        return bool(callback(*args))

    return predicate


def matching(records: List[LogRecord], level: str,
             callback: Optional[Callback] = None) -> List[LogRecord]:
    """Return the records with `level` accepted by `callback`, in order."""
    predicate = adapt_callback(callback)
    return [r for r in records if r.level == level and predicate(r)]


class AssertsLogs:
    """Assertion methods shared by channel and stack handles.

    Subclasses provide ``name`` (canonical channel name) and
    ``_records()`` / ``_forgotten_count()`` reading the backing log.
    """

    def logged(self, level: str, callback: Optional[Callback] = None) -> List[LogRecord]:
        """Return the matching records in the order they were written."""
        return matching(self._records(), level, callback)

    def assert_logged(self, level: str, callback: Optional[Callback] = None):
        """Fail unless at least one record matches."""
        if not self.logged(level, callback):
            raise ExpectationFailed(
                f"An expected log with level [{level}] was not logged "
                f"in the [{self.name}] channel."
            )
        return self

    def assert_logged_times(self, level: str, times: int,
                            callback: Optional[Callback] = None):
        """Fail unless exactly `times` records match."""
        count = len(self.logged(level, callback))
        if count != times:
            raise ExpectationFailed(
                f"A log with level [{level}] was logged [{count}] times "
                f"instead of an expected [{times}] times "
                f"in the [{self.name}] channel."
            )
        return self

    def assert_not_logged(self, level: str, callback: Optional[Callback] = None):
        """Fail if any record matches."""
        count = len(self.logged(level, callback))
        if count:
            raise ExpectationFailed(
                f"An unexpected log with level [{level}] was logged "
                f"[{count}] times in the [{self.name}] channel."
            )
        return self

    def assert_nothing_logged(self):
        """Fail if the channel holds any record, whatever its level."""
        count = len(self._records())
        if count:
            raise ExpectationFailed(
                f"Found [{count}] logs in the [{self.name}] channel. "
                f"Expected to find [0]."
            )
        return self

    def assert_logged_message(self, level: str, message: str):
        """Fail unless a record with exactly `message` was logged at `level`."""
        return self.assert_logged(level, lambda logged: logged == message)

    def assert_forgotten(self, times: int = 1):
        """Fail unless the channel was forgotten exactly `times` times."""
        count = self._forgotten_count()
        if count != times:
            raise ExpectationFailed(
                f"Expected the [{self.name}] channel to be forgotten "
                f"[{times}] times. It was forgotten [{count}] times."
            )
        return self

    def assert_not_forgotten(self):
        """Fail if the channel was forgotten at all."""
        return self.assert_forgotten(0)

    def _records(self) -> List[LogRecord]:
        raise NotImplementedError

    def _forgotten_count(self) -> int:
        raise NotImplementedError
