from __future__ import annotations

import json
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, Self

from nix_config_parser.tokens import WHITESPACE


@dataclass(slots=True)
class NixConfig(Mapping[str, str]):
    """Settings parsed from a nix.conf, keyed by setting name.

    Iteration follows the order in which each setting was first assigned.
    Settings accepting several values keep them as one space-delimited
    string, exactly as written after the `=`.
    """

    settings: dict[str, str] = field(default_factory=dict)

    def __getitem__(self, name: str) -> str:
        return self.settings[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self.settings)

    def __len__(self) -> int:
        return len(self.settings)

    def set(self, name: str, value: str) -> None:
        """Assign a setting, keeping its original position if it already exists."""
        self.settings[name] = value

    def update(self, other: Mapping[str, str]) -> None:
        """Merge *other* in its own order; later values win."""
        self.settings.update(other.items())

    def to_dict(self) -> dict[str, str]:
        return dict(self.settings)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        """Rebuild a config from a plain mapping such as the output of `to_dict`."""
        config = cls()
        for name, value in data.items():
            if not isinstance(name, str):
                raise TypeError(
                    f"Setting name {name!r} must be a string, "
                    f"got {type(name).__name__}"
                )
            if not isinstance(value, str):
                raise TypeError(
                    f"Value of setting {name!r} must be a string, "
                    f"got {type(value).__name__}"
                )
            if not name or any(char in name for char in WHITESPACE):
                raise ValueError(f"Invalid setting name: {name!r}")
            config.set(name, value)
        return config

    def to_json(self, indent: int | None = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_json(cls, text: str) -> Self:
        data = json.loads(text)
        if not isinstance(data, dict):
            raise TypeError(f"Expected a JSON object, got {type(data).__name__}")
        return cls.from_dict(data)

    def dump(self) -> str:
        """Render the settings back as `name = value` lines, for display only."""
        return "\n".join(
            f"{name} = {value}".rstrip() for name, value in self.settings.items()
        )


__all__ = ["NixConfig"]
