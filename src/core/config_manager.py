"""Provisioning configuration: mod list from the environment and the game root."""
import os
from pathlib import Path
from typing import Mapping, NamedTuple, Optional, Tuple

from model_types import ModDescriptor
from .constants import (
    MOD_IDS_ENV,
    DEFAULT_GAME_ROOT,
    MODS_SUBDIR,
    BINARIES_SUBDIR,
    LOADER_DIR_NAME,
)


class InvalidModListError(ValueError):
    """Raised when a MOD_IDS token is not of the form id:version."""

    def __init__(self, token):
        self.token = token
        super().__init__(f"Invalid modID given: {token!r} (expected id:version)")


def parse_mod_ids(raw: Optional[str]) -> Tuple[ModDescriptor, ...]:
    """Parse a comma-separated list of id:version pairs.

    Args:
        raw: Value of MOD_IDS (None or empty means no mods)

    Returns:
        tuple: ModDescriptor entries in input order

    Raises:
        InvalidModListError: On the first malformed token
    """
    if not raw:
        return ()

    mods = []
    for token in raw.split(","):
        mod_id, sep, version = token.partition(":")
        if not sep or not mod_id or not version:
            raise InvalidModListError(token)
        mods.append(ModDescriptor(mod_id, version))
    return tuple(mods)


class ProvisionConfig(NamedTuple):
    """Everything a provisioning run needs, passed explicitly."""
    game_root: Path
    mods: Tuple[ModDescriptor, ...]

    @classmethod
    def from_environment(cls, environ: Optional[Mapping[str, str]] = None,
                         game_root=DEFAULT_GAME_ROOT) -> "ProvisionConfig":
        if environ is None:
            environ = os.environ
        return cls(Path(game_root), parse_mod_ids(environ.get(MOD_IDS_ENV)))

    @property
    def mods_dir(self) -> Path:
        return self.game_root / MODS_SUBDIR

    @property
    def binaries_dir(self) -> Path:
        return self.game_root / BINARIES_SUBDIR

    @property
    def loader_dir(self) -> Path:
        return self.mods_dir / LOADER_DIR_NAME
