"""Provisioning core: configuration, fetching, extraction, and the step runner."""

from .constants import DEFAULT_GAME_ROOT
from .config_manager import InvalidModListError, ProvisionConfig, parse_mod_ids
from .installation_report import InstallationReport
from .provisioner import build_steps, provision, run_steps

__all__ = [
    'DEFAULT_GAME_ROOT',
    'InvalidModListError',
    'ProvisionConfig',
    'parse_mod_ids',
    'InstallationReport',
    'build_steps',
    'provision',
    'run_steps',
]
