"""ficsit.app registry lookups and release asset URLs."""
import requests

from .constants import MOD_INFO_URL, MOD_DOWNLOAD_URL, RELEASE_ASSET_URL
from .fetcher import fetch_json


def mod_info_url(mod_id: str) -> str:
    return MOD_INFO_URL.format(mod_id=mod_id)


def mod_download_url(mod_id: str, version: str) -> str:
    return MOD_DOWNLOAD_URL.format(mod_id=mod_id, version=version)


def latest_release_url(owner: str, repo: str, file_name: str) -> str:
    return RELEASE_ASSET_URL.format(owner=owner, repo=repo, file_name=file_name)


def resolve_mod_name(mod_id: str, log_callback=None) -> str:
    """Best-effort display name for mod_id.

    Never raises: any failure to fetch or read the registry entry falls back
    to the identifier itself.
    """
    def log(msg, **kwargs):
        if log_callback:
            log_callback(msg, **kwargs)

    try:
        payload = fetch_json(mod_info_url(mod_id))
    except (requests.exceptions.RequestException, ValueError) as e:
        log(f"  Name lookup failed for {mod_id}: {type(e).__name__}", debug=True)
        return mod_id

    data = payload.get("data") if isinstance(payload, dict) else None
    name = data.get("name") if isinstance(data, dict) else None
    if not name or not isinstance(name, str):
        log(f"  No name in registry entry for {mod_id}", debug=True)
        return mod_id
    return name
