"""User-friendly error message templates."""

import zipfile

import requests

from utils.symbols import LogSymbols


def get_user_friendly_error(error_type, error_details=""):
    """Convert error type to user-friendly message with actionable steps."""
    messages = {
        'invalid_mod_list': (
            f"{LogSymbols.ERROR_BOLD} Invalid MOD_IDS\n\n"
            "MOD_IDS must be a comma-separated list of id:version pairs.\n\n"
            "Try:\n"
            f"{LogSymbols.BULLET} Use the form MOD_IDS=\"modA:1.0.0,modB:2.3.1\"\n"
            f"{LogSymbols.BULLET} Check for a missing ':' or a trailing comma\n"
            f"{LogSymbols.BULLET} Leave MOD_IDS empty to remove all mods"
        ),

        'network_timeout': (
            f"{LogSymbols.ERROR_BOLD} Connection failed\n\n"
            "The server could not be reached.\n\n"
            "Try:\n"
            f"{LogSymbols.BULLET} Check the container's network and DNS settings\n"
            f"{LogSymbols.BULLET} Try again later (server might be busy)\n"
            f"{LogSymbols.BULLET} Check if a firewall is blocking outbound HTTPS"
        ),

        'network_404': (
            f"{LogSymbols.ERROR_BOLD} Not found (404)\n\n"
            "The requested mod, version, or release asset does not exist.\n\n"
            "Try:\n"
            f"{LogSymbols.BULLET} Check the mod id and version on ficsit.app\n"
            f"{LogSymbols.BULLET} Make sure the version has not been removed"
        ),

        'http_status': (
            f"{LogSymbols.ERROR_BOLD} Unexpected server response\n\n"
            "The server answered with a non-200 status.\n\n"
            "Try:\n"
            f"{LogSymbols.BULLET} Try again later\n"
            f"{LogSymbols.BULLET} Check the registry status page"
        ),

        'disk_space': (
            f"{LogSymbols.ERROR_BOLD} Not enough disk space\n\n"
            "The game volume doesn't have enough free space for the mods.\n\n"
            "Try:\n"
            f"{LogSymbols.BULLET} Free up space on the game volume\n"
            f"{LogSymbols.BULLET} Remove unused mods from MOD_IDS"
        ),

        'permission_denied': (
            f"{LogSymbols.ERROR_BOLD} Permission denied\n\n"
            "The provisioner can't write to the game folder.\n\n"
            "Try:\n"
            f"{LogSymbols.BULLET} Check ownership of the -gameroot directory\n"
            f"{LogSymbols.BULLET} Stop the game server while provisioning"
        ),

        'corrupted_archive': (
            f"{LogSymbols.ERROR_BOLD} Corrupted download\n\n"
            "The downloaded file is not a valid zip archive.\n\n"
            "Try:\n"
            f"{LogSymbols.BULLET} Run the provisioner again\n"
            f"{LogSymbols.BULLET} Report the issue if it persists"
        ),
    }

    default_message = (
        f"{LogSymbols.ERROR_BOLD} An error occurred\n\n"
        f"Technical details: {error_details}\n\n"
        f"Try:\n"
        f"{LogSymbols.BULLET} Re-run with -debug for more information\n"
        f"{LogSymbols.BULLET} Report this on GitHub if it persists"
    )

    return messages.get(error_type, default_message)


def suggest_fix_for_error(exception):
    from core.config_manager import InvalidModListError

    # Configuration errors
    if isinstance(exception, InvalidModListError):
        return 'invalid_mod_list'

    # Network errors
    elif isinstance(exception, (requests.exceptions.Timeout, requests.exceptions.ConnectionError)):
        return 'network_timeout'
    elif isinstance(exception, requests.exceptions.HTTPError):
        if exception.response is not None and exception.response.status_code == 404:
            return 'network_404'
        return 'http_status'

    # Archive errors
    elif isinstance(exception, zipfile.BadZipFile):
        return 'corrupted_archive'

    # File system errors
    elif isinstance(exception, PermissionError):
        return 'permission_denied'
    elif isinstance(exception, OSError):
        if 'No space left' in str(exception):
            return 'disk_space'
        return 'permission_denied'

    return None  # Use default message
