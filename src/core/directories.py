"""Mods directory preparation."""
import shutil
from pathlib import Path

from utils.symbols import LogSymbols


def ensure_dir(path: Path) -> None:
    """Create path and missing parents; an existing directory is left as is."""
    Path(path).mkdir(parents=True, exist_ok=True)


def join_under(root: Path, name: str) -> Path:
    """Join name below root; leading separators do not reset to the filesystem root.

    '..' components are kept as-is.
    """
    return Path(root) / name.lstrip("/\\")


def remove_tree(path: Path) -> bool:
    """Recursively delete path. Returns False if it did not exist."""
    path = Path(path)
    if not path.exists():
        return False
    shutil.rmtree(path)
    return True


def prepare_mods_dir(mods_dir: Path, mods, log_callback=None) -> bool:
    """Create the mods directory, or wipe it when no mods are requested.

    Args:
        mods_dir: Target mods directory
        mods: Requested ModDescriptor sequence
        log_callback: Optional callback for logging messages

    Returns:
        bool: True if provisioning should continue, False if the tree was wiped
    """
    def log(msg, **kwargs):
        if log_callback:
            log_callback(msg, **kwargs)

    if not mods:
        log("No Mod IDs given. Deleting all!", warning=True)
        if remove_tree(mods_dir):
            log(f"  {LogSymbols.TRASH} Removed {mods_dir}")
        else:
            log(f"  {LogSymbols.INFO} {mods_dir} already absent", debug=True)
        return False

    ensure_dir(mods_dir)
    return True
