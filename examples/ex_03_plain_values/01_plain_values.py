"""Plain values: dependencies that are not declarations pass straight through.

Only declarations are resolved and cached. Any other dependency value, such as
settings or a callable, reaches ``construct`` unchanged and never lands in the
container.
"""

from __future__ import annotations

from declwire import constructable, create_container, resolve


class Settings:
    def __init__(self, host: str, port: int) -> None:
        self.host = host
        self.port = port


settings = constructable({"host": "localhost", "port": 5432}, lambda deps: Settings(**deps))
dsn = constructable(
    {"settings": settings, "scheme": "postgresql"},
    lambda deps: f"{deps['scheme']}://{deps['settings'].host}:{deps['settings'].port}",
)


def main() -> None:
    container = create_container()

    print(f"dsn={resolve(dsn, container)}")  # => dsn=postgresql://localhost:5432
    print(f"entries={len(container)}")  # => entries=2
    print(f"settings_cached={settings in container}")  # => settings_cached=True


if __name__ == "__main__":
    main()
