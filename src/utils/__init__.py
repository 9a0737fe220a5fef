"""Utility modules for the Ficsit mod provisioner."""

from .symbols import LogSymbols

__all__ = ['LogSymbols']
