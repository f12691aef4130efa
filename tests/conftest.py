"""Shared test fixtures for the logfake test suite."""

import io

import pytest

from logfake import LogFake, dumper
from logfake import container as _container_mod
from logfake import output as _output_mod


# ---------------------------------------------------------------------------
# Fake fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def log():
    """A fresh LogFake with the default config (default channel 'stack')."""
    return LogFake()


@pytest.fixture
def dumps():
    """Capture every dump made during the test."""
    with dumper.capture_dumps() as captured:
        yield captured


# ---------------------------------------------------------------------------
# Singleton isolation
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def _reset_singletons():
    """Restore the OutputManager and Container singletons after each test."""
    old_manager = _output_mod._manager
    old_container = _container_mod._container
    yield
    _output_mod._manager = old_manager
    _container_mod._container = old_container


@pytest.fixture
def diagnostics():
    """Route the fake's diagnostics at full verbosity into a buffer."""
    buf = io.StringIO()
    _output_mod.init_output(verbosity=3, file=buf)
    return buf
