"""
Dump handler: the single injection point for dump()/dump_all().

Dumps never format anything themselves: they build a list of plain
record dicts and pass it to the installed handler. The default handler
pretty-prints to stderr. Tests install their own handler with
set_handler() or capture_dumps().
"""

import pprint
import sys
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, List, Optional

from .output import get_output

DumpHandler = Callable[[List[Dict[str, Any]]], None]


def default_handler(records: List[Dict[str, Any]]) -> None:
    """Pretty-print dumped records to stderr."""
    print(pprint.pformat(records, sort_dicts=False), file=sys.stderr)


_handler: DumpHandler = default_handler


def set_handler(handler: Optional[DumpHandler]) -> DumpHandler:
    """Install a dump handler and return the previous one.

    Passing None restores the default handler.
    """
    global _handler
    previous = _handler
    _handler = handler if handler is not None else default_handler
    return previous


def get_handler() -> DumpHandler:
    """Return the currently installed dump handler."""
    return _handler


def dump(records: List[Dict[str, Any]]) -> None:
    """Send exported records to the installed handler."""
    get_output().debug("Dumping {count} record(s)",
                       channel='dump', count=len(records))
    _handler(records)


@contextmanager
def capture_dumps() -> Iterator[List[List[Dict[str, Any]]]]:
    """Collect every dump made inside the block.

    Yields a list that receives one entry (the list of record dicts)
    per dump call. The previous handler is restored on exit.
    """
    dumps: List[List[Dict[str, Any]]] = []
    previous = set_handler(dumps.append)
    try:
        yield dumps
    finally:
        set_handler(previous)
