class DeclwireError(Exception):
    """Represent a base class for all declwire-specific failures.

    Catch this type when you want to handle any declwire error path without
    matching each concrete exception class individually. Exceptions raised by
    user ``construct`` callables are never wrapped in it.
    """


class DeclwireInvalidConstructableError(DeclwireError):
    """Signal an invalid constructable declaration.

    Raised by ``constructable`` when ``dependencies`` is not a mapping or
    ``construct`` is not callable, and by ``resolve`` when it receives
    something that is not a ``Constructable``.

    Typical fix is building the declaration with
    ``constructable({"name": dependency, ...}, construct)``.
    """
