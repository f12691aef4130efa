"""Exception taxonomy for logfake.

Two kinds of failure exist:

- ExpectationFailed: an assertion did not hold. Subclasses AssertionError
  so pytest reports it as an ordinary failed assertion.
- UsageError: the fake was used in a way that can never be meaningful
  (dumping every channel from a single channel, asserting the context of
  a stack). Subclasses RuntimeError and is never an assertion failure.
"""


class LogFakeError(Exception):
    """Base class for every error raised by logfake."""


class ExpectationFailed(LogFakeError, AssertionError):
    """A log assertion did not hold."""


class UsageError(LogFakeError, RuntimeError):
    """The fake was called in an unsupported way."""


__all__ = ["LogFakeError", "ExpectationFailed", "UsageError"]
