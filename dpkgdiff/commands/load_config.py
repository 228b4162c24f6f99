import os
from itertools import chain
from pathlib import Path
from typing import Iterable

import msgspec
from platformdirs import PlatformDirs

from dpkgdiff.config import Config
from dpkgdiff.versions.comparator import DEFAULT_COMPARATOR


def get_config_paths() -> list[Path]:
    dirs = PlatformDirs("dpkgdiff", multipath=True)
    search_paths: Iterable[Path] = chain(
        reversed([Path(p) for p in dirs.site_config_dir.split(os.pathsep)]),
        reversed([Path(p) for p in dirs.user_config_dir.split(os.pathsep)]),
    )
    config_paths: list[Path] = []
    for path in search_paths:
        config_paths.extend([Path(path) / "config.toml", Path(path) / "dpkgdiff.d" / "config.toml"])
    return config_paths


def load_config() -> Config:
    config: Config | None = None
    for path in get_config_paths():
        config = _merge(config, _try_load_config(path))
    if config is None or not config.comparator:
        return Config(comparator=DEFAULT_COMPARATOR)
    return config


def _try_load_config(path: Path) -> Config | None:
    try:
        return Config.from_file(path)
    except FileNotFoundError:
        return None
    except (msgspec.DecodeError, UnicodeDecodeError) as e:
        raise ValueError(f"Invalid config file {path}: {e}") from e


def _merge(base_config: Config | None, override_config: Config | None) -> Config | None:
    if base_config and override_config:
        return Config(
            comparator=override_config.comparator or base_config.comparator,
        )
    return override_config or base_config
