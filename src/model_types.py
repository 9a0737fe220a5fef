"""Type definitions for better code clarity and IDE support."""
from typing import Callable, NamedTuple


class ModDescriptor(NamedTuple):
    """A requested mod: registry identifier and version, both opaque."""
    mod_id: str
    version: str


class ProvisionStep(NamedTuple):
    """One named unit of provisioning work; action raises on failure."""
    name: str
    action: Callable[[], None]
