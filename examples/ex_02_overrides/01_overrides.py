"""Overrides: substitute any node of the graph in a separate container.

Values set on a container before resolving are used instead of constructing
the matching declaration, however deep it sits in the graph. The declarations
and the default container stay untouched.
"""

from __future__ import annotations

from declwire import constructable, create_container, resolve

add = constructable({}, lambda _: lambda a, b: a + b)
sub = constructable({}, lambda _: lambda a, b: a - b)
calculator = constructable({"add": add, "sub": sub}, dict)


class RecordingLogger:
    def __init__(self) -> None:
        self.logged: list[object] = []

    def log(self, value: object) -> None:
        self.logged.append(value)


logger = constructable({}, lambda _: RecordingLogger())


def run(deps: dict) -> int:
    calc = deps["calculator"]
    result = calc["sub"](calc["add"](1, 2), 7)
    deps["logger"].log(result)
    return result


app = constructable({"calculator": calculator, "logger": logger}, run)


def main() -> None:
    fake_logger = RecordingLogger()
    container = create_container().set(add, lambda a, b: 10).set(logger, fake_logger)

    print(f"overridden={resolve(app, container)}")  # => overridden=3
    print(f"fake_logged={fake_logger.logged}")  # => fake_logged=[3]

    print(f"default={resolve(app)}")  # => default=-4
    print(f"default_logged={resolve(logger).logged}")  # => default_logged=[-4]


if __name__ == "__main__":
    main()
