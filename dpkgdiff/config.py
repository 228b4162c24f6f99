import os
from dataclasses import dataclass
from typing import Tuple

import msgspec


@dataclass
class Config:
    # Command prefix used to compare versions. The versions and the operator are appended
    comparator: Tuple[str, ...] | None = None

    @classmethod
    def from_file(cls, path: os.PathLike | str) -> "Config":
        with open(path, encoding="utf-8") as f:
            return cls.from_toml(f.read())

    @classmethod
    def from_toml(cls, toml: str) -> "Config":
        return msgspec.toml.decode(toml, type=cls)
