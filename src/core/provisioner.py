"""Provisioning workflow: prepare the mods directory, then run install steps in order."""

from typing import List, Optional

from model_types import ProvisionStep
from utils.symbols import LogSymbols
from .config_manager import ProvisionConfig
from .constants import (
    UPSTREAM_OWNER,
    BOOTSTRAPPER_REPO,
    BOOTSTRAPPER_FILES,
    LOADER_REPO,
    LOADER_ARCHIVE,
    LOADER_DIR_NAME,
)
from .directories import prepare_mods_dir
from .installation_report import InstallationReport
from .installer import ModInstaller


def build_steps(config: ProvisionConfig, installer: ModInstaller) -> List[ProvisionStep]:
    """Ordered steps: bootstrapper DLLs, mod loader, then each mod in input order."""
    steps = []
    for file_name in BOOTSTRAPPER_FILES:
        steps.append(ProvisionStep(
            file_name,
            lambda f=file_name: installer.install_latest_file(
                UPSTREAM_OWNER, BOOTSTRAPPER_REPO, f, config.binaries_dir),
        ))

    steps.append(ProvisionStep(
        LOADER_DIR_NAME,
        lambda: installer.install_latest_zip(UPSTREAM_OWNER, LOADER_REPO, LOADER_ARCHIVE, config.loader_dir),
    ))

    for mod in config.mods:
        steps.append(ProvisionStep(
            f"{mod.mod_id}@{mod.version}",
            lambda m=mod: installer.install_mod(m, config.mods_dir),
        ))
    return steps


def run_steps(steps, log_callback=None, report: Optional[InstallationReport] = None) -> InstallationReport:
    """Run steps sequentially; the first failure is recorded and re-raised."""
    def log(msg, **kwargs):
        if log_callback:
            log_callback(msg, **kwargs)

    if report is None:
        report = InstallationReport()

    total = len(steps)
    for index, step in enumerate(steps, start=1):
        log(f"[{index}/{total}] {step.name}", debug=True)
        try:
            step.action()
        except Exception as e:
            report.add_error(step.name, str(e) or type(e).__name__)
            raise
        report.add_installed(step.name)
    return report


def provision(config: ProvisionConfig, log_callback=None,
              report: Optional[InstallationReport] = None) -> InstallationReport:
    """Bring config.mods_dir in line with config.mods.

    With no mods requested the whole mods directory is deleted and nothing is
    downloaded. Any error propagates and leaves partial state on disk.
    """
    if report is None:
        report = InstallationReport()

    if not prepare_mods_dir(config.mods_dir, config.mods, log_callback):
        return report

    if log_callback:
        count = len(config.mods)
        log_callback(f"Provisioning {count} mod{'s' if count != 1 else ''} into {config.mods_dir}")
        log_callback(LogSymbols.SEPARATOR * 60)

    installer = ModInstaller(log_callback)
    return run_steps(build_steps(config, installer), log_callback, report)
