"""
Channel registry: canonical identity to ChannelLog and handle.

Identities live in two disjoint namespaces:

    ('channel', 'a.b')    plain channel named "a.b"
    ('stack',   'a.b')    stack of channels a and b

so a plain channel never collides with a stack whose canonical name
happens to be the same string. Resolution order is kept: it is the
order used by all_records() and the snapshots.
"""

from typing import Dict, Iterable, List, NamedTuple, Optional

from .channel import ChannelFake, ChannelLog, StackFake
from .output import get_output
from .records import LogRecord

CHANNEL = 'channel'
STACK = 'stack'

STACK_PREFIX = 'Stack:'


class ChannelKey(NamedTuple):
    kind: str
    name: str


def stack_name(members: Iterable[str], label: Optional[str] = None) -> str:
    """Canonical name of a stack: sorted, deduplicated, dot-joined members.

    >>> stack_name(['c', 'b', 'a'], 'name')
    'Stack:name.a.b.c'
    """
    joined = '.'.join(sorted(set(members)))
    if label is None:
        return joined
    return f"{STACK_PREFIX}{label}.{joined}"


class ChannelRegistry:
    """Lazily creates and caches one ChannelLog and handle per identity."""

    def __init__(self):
        self._logs: Dict[ChannelKey, ChannelLog] = {}
        self._handles: Dict[ChannelKey, ChannelFake] = {}

    def channel(self, name: str) -> ChannelFake:
        """Resolve the plain channel `name`, creating it on first use."""
        return self._resolve(ChannelKey(CHANNEL, name), ChannelFake)

    def stack(self, members: Iterable[str], label: Optional[str] = None) -> StackFake:
        """Resolve a stack; its context is reset on every resolution."""
        handle = self._resolve(ChannelKey(STACK, stack_name(members, label)), StackFake)
        handle.without_context()
        return handle

    def forget(self, name: str) -> None:
        """Bump the forget counter of `name`, creating the channel if needed.

        Names carrying the ``Stack:`` prefix address labeled stacks; every
        other name addresses a plain channel.
        """
        kind = STACK if name.startswith(STACK_PREFIX) else CHANNEL
        key = ChannelKey(kind, name)
        self._resolve(key, StackFake if kind == STACK else ChannelFake)
        self._logs[key].forget()
        get_output().debug("Forgot [{name}] ({count} times)", channel='registry',
                           name=name, count=self._logs[key].forgotten_count)

    def log_for(self, key: ChannelKey) -> ChannelLog:
        return self._logs[key]

    def channels(self) -> Dict[str, ChannelFake]:
        """Plain channels by name, in first-resolution order."""
        return {k.name: h for k, h in self._handles.items() if k.kind == CHANNEL}

    def stacks(self) -> Dict[str, StackFake]:
        """Stacks by canonical name, in first-resolution order."""
        return {k.name: h for k, h in self._handles.items() if k.kind == STACK}

    def all_records(self) -> List[LogRecord]:
        """Every record, by channel resolution order then append order."""
        return [record for log in self._logs.values() for record in log.records]

    def _resolve(self, key: ChannelKey, handle_type) -> ChannelFake:
        handle = self._handles.get(key)
        if handle is None:
            self._logs[key] = ChannelLog(key.name)
            handle = self._handles[key] = handle_type(self, key)
            get_output().debug("Resolved new {kind} [{name}]", channel='registry',
                               kind=key.kind, name=key.name)
        return handle
