"""Tests for logfake._version: PEP 440 compliance and version parsing."""

import re

import logfake
from logfake._version import (
    BASE_VERSION,
    MAJOR, MINOR, PATCH, PHASE,
    PIP_VERSION,
    get_base_version,
    get_pip_version,
)


def test_base_version_format():
    """Base version should be MAJOR.MINOR.PATCH[-PHASE]."""
    base = get_base_version()
    assert re.match(r"^\d+\.\d+\.\d+(-\w+)?$", base), \
        f"Unexpected base version format: {base}"


def test_base_version_matches_components():
    """Base version should match the MAJOR.MINOR.PATCH constants."""
    assert get_base_version().startswith(f"{MAJOR}.{MINOR}.{PATCH}")


def test_pip_version_pep440():
    """PIP version must be PEP 440 compliant (no hyphens)."""
    pip_ver = get_pip_version()
    assert "-" not in pip_ver, \
        f"PEP 440 forbids hyphens in version: {pip_ver}"
    assert re.match(r"^\d+\.\d+\.\d+", pip_ver)


def test_pip_version_beta_mapping():
    """Beta phase should map to 'b0' in PEP 440."""
    if PHASE == "beta":
        assert get_pip_version().endswith("b0")


def test_package_exports_version():
    """The package re-exports __version__."""
    assert logfake.__version__ == BASE_VERSION
    assert PIP_VERSION
