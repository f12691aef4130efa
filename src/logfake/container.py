"""
Minimal service container.

Application code asks the container for "log"; tests swap the real
logger for a LogFake with LogFake.bind(), which returns a teardown
callable restoring the previous binding.
"""

from typing import Any, Dict, Optional

from .output import get_output

_MISSING = object()


class Container:
    """Named instance bindings."""

    def __init__(self):
        self._instances: Dict[str, Any] = {}

    def instance(self, name: str, obj: Any) -> Any:
        """Bind `obj` under `name`, replacing any previous binding."""
        self._instances[name] = obj
        get_output().debug("Bound [{name}] to {obj!r}", channel='container',
                           name=name, obj=obj)
        return obj

    def make(self, name: str) -> Any:
        """Return the instance bound to `name`.

        Raises:
            KeyError: When nothing is bound under `name`
        """
        try:
            return self._instances[name]
        except KeyError:
            raise KeyError(f"Nothing is bound to [{name}] in the container.") from None

    def bound(self, name: str) -> bool:
        return name in self._instances

    def forget_instance(self, name: str) -> None:
        self._instances.pop(name, None)

    def swap(self, name: str, obj: Any):
        """Bind `obj` under `name` and return a callable undoing it."""
        previous = self._instances.get(name, _MISSING)
        self.instance(name, obj)

        def restore() -> None:
            if previous is _MISSING:
                self.forget_instance(name)
            else:
                self.instance(name, previous)

        return restore


# =============================================================================
# Module-level singleton
# =============================================================================

_container: Optional[Container] = None


def get_container() -> Container:
    """Get the module-level Container, creating an empty one if needed."""
    global _container
    if _container is None:
        _container = Container()
    return _container


def set_container(container: Optional[Container]) -> Optional[Container]:
    """Replace the module-level Container and return the previous one."""
    global _container
    previous, _container = _container, container
    return previous
