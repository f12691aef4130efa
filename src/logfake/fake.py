"""
LogFake: the root of the fake logging facade.

LogFake stands in for a log manager. It resolves channels and stacks
through its registry and proxies every channel operation (writing,
context, assertions, dumping) to the default channel, so code that logs
straight to "the logger" can be asserted on just like a named channel.

Usage::

    log = LogFake()
    log.channel('payments').info('Charged', {'amount': 10})
    log.channel('payments').assert_logged('info', lambda msg, ctx: ctx['amount'] == 10)
    log.info('default channel')
    log.assert_logged_message('info', 'default channel')
"""

import sys
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from . import dumper
from .channel import ChannelFake, StackFake
from .config import DEFAULT_CHANNEL_KEY, Repository
from .container import Container, get_container
from .records import LogRecord
from .registry import ChannelRegistry

# Channel used when the configured default is None
NULL_CHANNEL = 'null'
# Every on-demand channel built from ad hoc config shares this name
ON_DEMAND_CHANNEL = 'ondemand'


class LogFake:
    """In-memory replacement for a log manager.

    Args:
        config: Configuration repository (or plain nested dict) holding
            ``logging.default``. Defaults to a repository whose default
            channel is ``stack``.
    """

    def __init__(self, config=None):
        if config is None:
            config = Repository()
        elif not isinstance(config, Repository):
            config = Repository(config)
        self.config = config
        self._registry = ChannelRegistry()
        self._dispatcher = None

    @classmethod
    def bind(cls, container: Optional[Container] = None):
        """Bind a new fake as ``log`` in a container.

        Uses the container's ``config`` binding when there is one.

        Returns:
            (fake, teardown) where teardown() restores the previous binding
        """
        container = container if container is not None else get_container()
        config = container.make('config') if container.bound('config') else None
        fake = cls(config)
        return fake, container.swap('log', fake)

    # -------------------------------------------------------------------------
    # Resolution
    # -------------------------------------------------------------------------

    def channel(self, name: Optional[str] = None) -> ChannelFake:
        """Resolve a channel by name (default channel when omitted)."""
        return self._registry.channel(name if name is not None else self.get_default_driver())

    def driver(self, name: Optional[str] = None) -> ChannelFake:
        """Alias of channel()."""
        return self.channel(name)

    def stack(self, channels: Iterable[str], label: Optional[str] = None) -> StackFake:
        """Resolve the stack of `channels`, optionally labeled."""
        return self._registry.stack(channels, label)

    def build(self, config: Any) -> ChannelFake:
        """Resolve the on-demand channel; `config` is not interpreted."""
        return self._registry.channel(ON_DEMAND_CHANNEL)

    def forget_channel(self, name: Optional[str] = None) -> None:
        """Mark a channel as forgotten. Its records are kept."""
        self._registry.forget(name if name is not None else self.get_default_driver())

    def get_channels(self) -> Dict[str, ChannelFake]:
        return self._registry.channels()

    def get_stacks(self) -> Dict[str, StackFake]:
        return self._registry.stacks()

    def all_logs(self) -> List[LogRecord]:
        """Every record from every channel and stack, in resolution order."""
        return self._registry.all_records()

    def get_logger(self) -> ChannelFake:
        return self.channel()

    def get_default_driver(self) -> str:
        name = self.config.get(DEFAULT_CHANNEL_KEY)
        return NULL_CHANNEL if name is None else name

    def set_default_driver(self, name: Optional[str]) -> None:
        self.config.set(DEFAULT_CHANNEL_KEY, name)

    # -------------------------------------------------------------------------
    # Collaborator stubs: accepted, never acted on
    # -------------------------------------------------------------------------

    def listen(self, listener: Callable) -> None:
        pass

    def extend(self, driver: str, factory: Callable) -> "LogFake":
        return self

    def set_event_dispatcher(self, dispatcher: Any) -> None:
        self._dispatcher = dispatcher

    def get_event_dispatcher(self) -> Any:
        return self._dispatcher

    # -------------------------------------------------------------------------
    # Default channel proxies
    # -------------------------------------------------------------------------

    def log(self, level: str, message: Any, context: Optional[Mapping[str, Any]] = None) -> None:
        self.channel().log(level, message, context)

    def write(self, level: str, message: Any, context: Optional[Mapping[str, Any]] = None) -> None:
        self.channel().write(level, message, context)

    def emergency(self, message: Any, context: Optional[Mapping[str, Any]] = None) -> None:
        self.channel().emergency(message, context)

    def alert(self, message: Any, context: Optional[Mapping[str, Any]] = None) -> None:
        self.channel().alert(message, context)

    def critical(self, message: Any, context: Optional[Mapping[str, Any]] = None) -> None:
        self.channel().critical(message, context)

    def error(self, message: Any, context: Optional[Mapping[str, Any]] = None) -> None:
        self.channel().error(message, context)

    def warning(self, message: Any, context: Optional[Mapping[str, Any]] = None) -> None:
        self.channel().warning(message, context)

    def notice(self, message: Any, context: Optional[Mapping[str, Any]] = None) -> None:
        self.channel().notice(message, context)

    def info(self, message: Any, context: Optional[Mapping[str, Any]] = None) -> None:
        self.channel().info(message, context)

    def debug(self, message: Any, context: Optional[Mapping[str, Any]] = None) -> None:
        self.channel().debug(message, context)

    def with_context(self, context: Mapping[str, Any]) -> ChannelFake:
        return self.channel().with_context(context)

    def without_context(self) -> ChannelFake:
        return self.channel().without_context()

    def logged(self, level: str, callback: Optional[Callable] = None) -> List[LogRecord]:
        return self.channel().logged(level, callback)

    def assert_logged(self, level: str, callback: Optional[Callable] = None) -> ChannelFake:
        return self.channel().assert_logged(level, callback)

    def assert_logged_times(self, level: str, times: int,
                            callback: Optional[Callable] = None) -> ChannelFake:
        return self.channel().assert_logged_times(level, times, callback)

    def assert_not_logged(self, level: str, callback: Optional[Callable] = None) -> ChannelFake:
        return self.channel().assert_not_logged(level, callback)

    def assert_nothing_logged(self) -> ChannelFake:
        return self.channel().assert_nothing_logged()

    def assert_logged_message(self, level: str, message: str) -> ChannelFake:
        return self.channel().assert_logged_message(level, message)

    def assert_forgotten(self, times: int = 1) -> ChannelFake:
        return self.channel().assert_forgotten(times)

    def assert_not_forgotten(self) -> ChannelFake:
        return self.channel().assert_not_forgotten()

    def assert_current_context(self, expected) -> ChannelFake:
        return self.channel().assert_current_context(expected)

    # -------------------------------------------------------------------------
    # Dumping
    # -------------------------------------------------------------------------

    def dump(self, level: Optional[str] = None) -> ChannelFake:
        """Dump the default channel; returns its handle."""
        return self.channel().dump(level)

    def dd(self, level: Optional[str] = None) -> None:
        self.channel().dd(level)

    def dump_all(self, level: Optional[str] = None) -> "LogFake":
        """Dump the records of every channel and stack."""
        records = self.all_logs()
        if level is not None:
            records = [r for r in records if r.level == level]
        dumper.dump([r.to_dict() for r in records])
        return self

    def dd_all(self, level: Optional[str] = None) -> None:
        self.dump_all(level)
        sys.exit(1)
