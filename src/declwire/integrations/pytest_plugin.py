"""Pytest fixtures for resolving declarations in isolated containers.

Enable the plugin in a test module or the top-level ``conftest.py``:

.. code-block:: python

    pytest_plugins = ["declwire.integrations.pytest_plugin"]

"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

import pytest

from declwire.constructables import Constructable
from declwire.container import Container, create_container
from declwire.resolution import resolve

T = TypeVar("T")


@pytest.fixture()
def declwire_container() -> Container:
    """Create a per-test container used for overrides.

    The fixture is function-scoped, so overrides and cached values are
    isolated between tests and never reach the process-wide default
    container. Override the fixture to pre-seed values for a module.

    Returns:
        A new empty ``Container``.

    """
    return create_container()


@pytest.fixture()
def declwire_resolve(declwire_container: Container) -> Callable[[Constructable[Any]], Any]:
    """Return a ``resolve`` bound to the per-test container.

    Returns:
        A callable resolving a declaration through ``declwire_container``.

    """

    def _resolve(constructable: Constructable[T]) -> T:
        return resolve(constructable, declwire_container)

    return _resolve
