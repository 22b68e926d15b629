from declwire.constructables import Constructable, constructable
from declwire.container import Container, create_container, default_container
from declwire.exceptions import DeclwireError, DeclwireInvalidConstructableError
from declwire.resolution import resolve

__all__ = [
    "Constructable",
    "Container",
    "DeclwireError",
    "DeclwireInvalidConstructableError",
    "constructable",
    "create_container",
    "default_container",
    "resolve",
]
