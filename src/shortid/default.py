"""Process-wide default generator.

Applications should prefer constructing their own ``Shortid`` and passing it
where it is needed. For callers that just want an id, the registry below
holds one shared generator, built from settings on first use and replaceable
at any time with ``set_default``.
"""

import threading
from collections.abc import Callable
from functools import lru_cache

from loguru import logger

from shortid.generator import Shortid
from shortid.settings import get_settings

GeneratorFactory = Callable[[], Shortid]


def _from_settings() -> Shortid:
    return Shortid.from_settings(get_settings())


class GeneratorRegistry:
    """Holds the default generator behind a lock so it can be swapped atomically."""

    def __init__(self, factory: GeneratorFactory = _from_settings):
        """Initialize an empty registry.

        Args:
            factory: Builds the default generator on first access
        """
        self._factory = factory
        self._generator: Shortid | None = None
        self._lock = threading.Lock()

    def get(self) -> Shortid:
        """Return the default generator, building it if none is set."""
        with self._lock:
            if self._generator is None:
                self._generator = self._factory()
                logger.debug(f"Default generator created: {self._generator}")
            return self._generator

    def set(self, generator: Shortid) -> Shortid | None:
        """Replace the default generator.

        Args:
            generator: Generator every subsequent caller will use

        Returns:
            The previous default, or None if none was built yet
        """
        with self._lock:
            previous, self._generator = self._generator, generator
        logger.debug(f"Default generator replaced: {generator}")
        return previous

    def clear(self) -> None:
        """Drop the default generator so the next access rebuilds it."""
        with self._lock:
            self._generator = None


@lru_cache
def get_generator_registry() -> GeneratorRegistry:
    """Get the singleton generator registry instance."""
    return GeneratorRegistry()


def get_default() -> Shortid:
    """Return the default generator (worker 0, seed 1 unless configured otherwise)."""
    return get_generator_registry().get()


def set_default(generator: Shortid) -> Shortid | None:
    """Replace the default generator, returning the previous one."""
    return get_generator_registry().set(generator)


def reset_default() -> None:
    """Forget the default generator; the next call rebuilds it from settings."""
    get_generator_registry().clear()


def generate() -> str:
    """Generate an id with the default generator."""
    return get_default().generate()
