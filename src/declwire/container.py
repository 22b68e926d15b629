from __future__ import annotations

from typing import Any, TypeVar, overload

from typing_extensions import Self

from declwire.constructables import Constructable

T = TypeVar("T")
D = TypeVar("D")


class Container:
    """Cache resolved values and hold overrides, keyed by declaration identity.

    ``resolve`` reads from and writes to a container. Seeding one with ``set``
    before resolving replaces the matching declaration anywhere in the graph,
    which is how tests substitute fakes without touching the declarations.

    Entries are never evicted: a value stays for the lifetime of the
    container. Containers do not lock; use one container per thread when
    resolving concurrently.
    """

    def __init__(self) -> None:
        self._values: dict[Constructable[Any], Any] = {}

    @overload
    def get(self, constructable: Constructable[T]) -> T | None: ...

    @overload
    def get(self, constructable: Constructable[T], default: D) -> T | D: ...

    def get(self, constructable: Constructable[Any], default: Any = None) -> Any:
        """Return the value stored for ``constructable``, or ``default`` when absent."""
        return self._values.get(constructable, default)

    def set(self, constructable: Constructable[T], value: T) -> Self:
        """Store ``value`` for ``constructable``, replacing any previous value.

        Args:
            constructable: Declaration whose value is cached or overridden.
            value: Value ``resolve`` returns for the declaration from now on.

        Returns:
            This container, so several overrides can be chained.

        """
        self._values[constructable] = value
        return self

    def __contains__(self, constructable: object) -> bool:
        return constructable in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(entries={len(self._values)})"


def create_container() -> Container:
    """Create an empty container independent of every other container.

    Typical use is a per-test container seeded with overrides:

    .. code-block:: python

        container = create_container().set(add, lambda a, b: 10).set(logger, fake_logger)
        resolve(app, container)

    """
    return Container()


_DEFAULT_CONTAINER = create_container()


def default_container() -> Container:
    """Return the process-wide container used when ``resolve`` gets no container.

    It is created when ``declwire`` is imported and never reset, so every value
    resolved through it lives for the rest of the process.
    """
    return _DEFAULT_CONTAINER
