"""pytest plugin providing the ``log_fake`` fixture.

Registered through the ``pytest11`` entry point, so installing logfake
makes the fixture available to every test suite.
"""

import pytest

from . import dumper
from .fake import LogFake


@pytest.fixture
def log_fake():
    """A fresh LogFake bound as ``log`` in the global container.

    The previous ``log`` binding and dump handler are restored afterwards.
    """
    handler = dumper.get_handler()
    fake, teardown = LogFake.bind()
    yield fake
    teardown()
    dumper.set_handler(handler)
