"""Quickstart: declare a graph, resolve the top-level value.

Leaves are declared first, parents list them as dependencies, and ``resolve``
builds the whole chain on first use and caches it in the default container.
"""

from __future__ import annotations

from declwire import constructable, resolve

add = constructable({}, lambda _: lambda a, b: a + b)
sub = constructable({}, lambda _: lambda a, b: a - b)


class Calculator:
    def __init__(self, add, sub) -> None:
        self.add = add
        self.sub = sub


class Logger:
    def __init__(self, prefix: str) -> None:
        self.prefix = prefix

    def log(self, value: object) -> str:
        return f"{self.prefix}{value}"


class App:
    def __init__(self, calculator: Calculator, logger: Logger) -> None:
        self.calculator = calculator
        self.logger = logger

    def run(self) -> str:
        return self.logger.log(self.calculator.sub(self.calculator.add(1, 2), 7))


calculator = constructable({"add": add, "sub": sub}, lambda deps: Calculator(**deps))
logger = constructable({"prefix": "log: "}, lambda deps: Logger(**deps))
app = constructable({"calculator": calculator, "logger": logger}, lambda deps: App(**deps))


def main() -> None:
    print(resolve(app).run())  # => log: -4

    print(f"same_app={resolve(app) is resolve(app)}")  # => same_app=True
    shared = resolve(app).calculator is resolve(calculator)
    print(f"shared_calculator={shared}")  # => shared_calculator=True


if __name__ == "__main__":
    main()
