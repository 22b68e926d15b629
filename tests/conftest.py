"""Shared pytest fixtures for declwire tests."""

import pytest

from declwire import Container, create_container


@pytest.fixture()
def container() -> Container:
    """Fresh container, independent of the default one."""
    return create_container()
