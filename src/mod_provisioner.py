"""
Ficsit mod provisioner - Entry point
Installs the mod loader and the mods listed in MOD_IDS under the game root.
"""

import argparse
import os
import sys

from core import InstallationReport, ProvisionConfig, build_steps, provision, DEFAULT_GAME_ROOT
from core.installer import ModInstaller
from utils.console_log import ConsoleLogger
from utils.error_messages import get_user_friendly_error, suggest_fix_for_error
from utils.symbols import LogSymbols


def build_parser():
    parser = argparse.ArgumentParser(
        prog="ficsit-mod-provisioner",
        description="Provision FactoryGame/Mods from the MOD_IDS environment variable.",
    )
    parser.add_argument("-gameroot", default=DEFAULT_GAME_ROOT,
                        help="game files root (default: %(default)s)")
    parser.add_argument("-debug", action="store_true", help="show debug messages")
    parser.add_argument("-logfile", default=None, help="also append log entries to this file")
    parser.add_argument("-check", action="store_true",
                        help="validate MOD_IDS and list the planned steps without installing")
    return parser


def check_configuration(config, log):
    """Log the planned steps without touching the network or the disk."""
    if not config.mods:
        log(f"{LogSymbols.WARNING} No Mod IDs given: {config.mods_dir} would be deleted", warning=True)
        return
    for step in build_steps(config, ModInstaller()):
        log(f"  {LogSymbols.BULLET} {step.name}")
    log(f"{LogSymbols.SUCCESS} {len(config.mods)} mod(s) configured", success=True)


def main(argv=None, environ=None):
    """Main entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)
    log = ConsoleLogger(log_level='DEBUG' if args.debug else 'INFO', log_file=args.logfile)
    report = InstallationReport()

    try:
        config = ProvisionConfig.from_environment(os.environ if environ is None else environ, args.gameroot)
        if args.check:
            check_configuration(config, log)
            return 0
        provision(config, log, report)
    except Exception as e:
        log(f"{LogSymbols.ERROR} {e}", error=True)
        log(f"\n{get_user_friendly_error(suggest_fix_for_error(e), e)}", error=True)
        if report.installed or report.errors:
            log(report.generate_summary(), error=True)
        return 1

    if report.installed:
        log(report.generate_summary(), success=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())
