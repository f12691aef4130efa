"""Immutable record of a single captured log call."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping

# Key used in dumps for LogRecord.forgotten_count
FORGOTTEN_KEY = 'times_channel_has_been_forgotten_at_time_of_writing_log'


@dataclass(frozen=True)
class LogRecord:
    """One logged event.

    Attributes:
        level: Severity string (any string for log()/write())
        message: Message, already coerced to str
        context: Read-only view of the merged context at write time
        forgotten_count: How many times the channel had been forgotten
            before this record was appended
        channel: Canonical name of the channel the record belongs to
    """
    level: str
    message: str
    context: Mapping[str, Any] = field(default_factory=dict)
    forgotten_count: int = 0
    channel: str = ''

    def __post_init__(self):
        object.__setattr__(self, 'context',
                           MappingProxyType(dict(self.context)))

    def to_dict(self) -> Dict[str, Any]:
        """Plain-dict shape used by the dump handler."""
        return {
            'level': self.level,
            'message': self.message,
            'context': dict(self.context),
            FORGOTTEN_KEY: self.forgotten_count,
            'channel': self.channel,
        }
