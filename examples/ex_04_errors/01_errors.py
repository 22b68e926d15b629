"""Errors: failures in ``construct`` reach the caller unchanged.

Nothing is cached for a declaration whose ``construct`` raised, so resolving it
again retries from scratch. Invalid declarations are rejected with
``DeclwireInvalidConstructableError``.
"""

from __future__ import annotations

from declwire import DeclwireInvalidConstructableError, constructable, create_container, resolve

attempts: list[int] = []


def connect(_: dict) -> str:
    attempts.append(1)
    if len(attempts) == 1:
        msg = "database is starting"
        raise ConnectionError(msg)
    return "connection"


connection = constructable({}, connect)


def main() -> None:
    container = create_container()

    try:
        resolve(connection, container)
    except ConnectionError as error:
        print(f"first_attempt={error}")  # => first_attempt=database is starting

    print(f"cached_after_failure={connection in container}")  # => cached_after_failure=False
    print(f"second_attempt={resolve(connection, container)}")  # => second_attempt=connection
    print(f"attempts={len(attempts)}")  # => attempts=2

    try:
        constructable({}, "not callable")
    except DeclwireInvalidConstructableError as error:
        print(f"error={type(error).__name__}")  # => error=DeclwireInvalidConstructableError


if __name__ == "__main__":
    main()
