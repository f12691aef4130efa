"""logfake: in-memory log capture and assertions for tests.

Public API:
    LogFake            root fake: channels, stacks, default channel proxies
    ChannelFake        handle for a plain channel
    StackFake          handle for a stack of channels
    LogRecord          one captured log call
    ExpectationFailed  raised by failing log assertions
    UsageError         raised when the fake is used in an unsupported way
    Repository         configuration holding ``logging.default``
    Container          minimal service container for LogFake.bind()
"""

from logfake._version import __version__, __app_name__
from logfake.channel import ChannelFake, StackFake
from logfake.config import Repository, load_config
from logfake.container import Container, get_container, set_container
from logfake.exceptions import ExpectationFailed, LogFakeError, UsageError
from logfake.fake import LogFake
from logfake.records import LogRecord

__all__ = [
    "__version__", "__app_name__",
    "LogFake", "ChannelFake", "StackFake", "LogRecord",
    "ExpectationFailed", "LogFakeError", "UsageError",
    "Repository", "load_config",
    "Container", "get_container", "set_container",
]
