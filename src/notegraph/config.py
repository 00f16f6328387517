"""Vault configuration.

Settings come from, in increasing priority: built-in defaults, a TOML
file and environment variables::

    [notegraph]
    vault_dir    = "vault"
    mode         = "production"     # or "development"
    extension    = ".md"
    ignore       = ["node_modules", "templates"]
    max_workers  = 8
    default_note = "Home"

``NOTEGRAPH_VAULT_DIR`` and ``NOTEGRAPH_MODE`` override the file.  In
``development`` mode the vault is rescanned for every snapshot; in
``production`` mode the first snapshot is reused until invalidated.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Mapping

MODES = ("development", "production")

ENV_VAULT_DIR = "NOTEGRAPH_VAULT_DIR"
ENV_MODE = "NOTEGRAPH_MODE"


@dataclass(frozen=True)
class VaultConfig:
    vault_dir: Path = Path("vault")
    mode: str = "development"
    extension: str = ".md"
    ignore: tuple[str, ...] = ("node_modules",)
    max_workers: int | None = None
    default_note: str | None = None
    meta: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.mode not in MODES:
            raise ValueError(f"Unknown mode {self.mode!r}; expected one of {', '.join(MODES)}")
        if self.max_workers is not None and (
            not isinstance(self.max_workers, int) or isinstance(self.max_workers, bool)
        ):
            raise ValueError(f"max_workers must be an integer, got {self.max_workers!r}")
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError(f"max_workers must be positive, got {self.max_workers}")

    @property
    def cache_snapshots(self) -> bool:
        return self.mode == "production"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], *, base_dir: Path | None = None) -> "VaultConfig":
        section = data.get("notegraph", data)
        known = {"vault_dir", "mode", "extension", "ignore", "max_workers", "default_note"}
        ignore = section.get("ignore", ("node_modules",))
        if not isinstance(ignore, (list, tuple)) or not all(isinstance(name, str) for name in ignore):
            raise ValueError(f"ignore must be a list of directory names, got {ignore!r}")
        vault_dir = Path(section.get("vault_dir", "vault"))
        if base_dir is not None and not vault_dir.is_absolute():
            vault_dir = base_dir / vault_dir
        return cls(
            vault_dir=vault_dir,
            mode=section.get("mode", "development"),
            extension=section.get("extension", ".md"),
            ignore=tuple(ignore),
            max_workers=section.get("max_workers"),
            default_note=section.get("default_note"),
            meta={k: v for k, v in section.items() if k not in known},
        )

    def with_env(self, environ: Mapping[str, str] | None = None) -> "VaultConfig":
        """Return a copy with ``NOTEGRAPH_*`` environment overrides applied."""
        environ = os.environ if environ is None else environ
        changes: dict[str, Any] = {}
        if environ.get(ENV_VAULT_DIR):
            changes["vault_dir"] = Path(environ[ENV_VAULT_DIR])
        if environ.get(ENV_MODE):
            changes["mode"] = environ[ENV_MODE].strip().lower()
        return replace(self, **changes) if changes else self


def load_config(path: Path | str | None = None, environ: Mapping[str, str] | None = None) -> VaultConfig:
    """Load a :class:`VaultConfig` from an optional TOML file plus the environment.

    A relative ``vault_dir`` in the file is taken relative to the file.
    """
    if path is None:
        config = VaultConfig()
    else:
        path = Path(path)
        with open(path, "rb") as fh:
            data = tomllib.load(fh)
        config = VaultConfig.from_dict(data, base_dir=path.parent)
    return config.with_env(environ)
