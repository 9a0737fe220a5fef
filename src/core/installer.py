import os
from pathlib import Path
from typing import Iterable

from model_types import ModDescriptor
from utils.symbols import LogSymbols
from .constants import INSTALLED_FILE_MODE
from .archive_extractor import ArchiveExtractor
from .directories import ensure_dir, join_under
from .fetcher import open_stream, iter_body, fetch_bytes
from .registry import latest_release_url, mod_download_url, resolve_mod_name


class ModInstaller:

    def __init__(self, log_callback=None):
        self.log_callback = log_callback
        self.extractor = ArchiveExtractor(log_callback)

    def _log(self, message, **kwargs):
        if self.log_callback:
            self.log_callback(message, **kwargs)

    def write_stream(self, chunks: Iterable[bytes], destination: Path) -> Path:
        """Create or truncate destination and copy chunks into it verbatim."""
        destination = Path(destination)
        with open(destination, 'wb') as f:
            for chunk in chunks:
                f.write(chunk)
        os.chmod(destination, INSTALLED_FILE_MODE)
        return destination

    def install_latest_file(self, owner: str, repo: str, file_name: str, destination_dir: Path) -> Path:
        """Download a latest-release asset verbatim into destination_dir."""
        url = latest_release_url(owner, repo, file_name)
        file_path = Path(destination_dir) / file_name
        self._log(f"{LogSymbols.DOWNLOADING} Fetching {file_name!r} to {str(file_path)!r}")
        with open_stream(url) as response:
            ensure_dir(destination_dir)
            self.write_stream(iter_body(response), file_path)
        self._log(f"  {LogSymbols.SUCCESS} {file_name} installed", success=True)
        return file_path

    def install_zip(self, url: str, label: str, destination: Path) -> Path:
        """Download a zip archive and extract it into destination."""
        self._log(f"{LogSymbols.DOWNLOADING} Fetching {label!r} to {str(destination)!r}")
        self._log(f"  From: {url}", debug=True)
        buffer = fetch_bytes(url)
        written = self.extractor.extract_zip_bytes(buffer, destination)
        self._log(f"  {LogSymbols.SUCCESS} {label} installed ({len(written)} file{'s' if len(written) != 1 else ''})",
                  success=True)
        return Path(destination)

    def install_latest_zip(self, owner: str, repo: str, file_name: str, destination: Path) -> Path:
        return self.install_zip(latest_release_url(owner, repo, file_name), file_name, destination)

    def install_mod(self, mod: ModDescriptor, mods_dir: Path) -> Path:
        """Resolve the mod's display name and extract its archive under mods_dir."""
        name = resolve_mod_name(mod.mod_id, self.log_callback)
        if name != mod.mod_id:
            self._log(f"  {LogSymbols.INFO} {mod.mod_id} {LogSymbols.ARROW_RIGHT} {name}", info=True)
        return self.install_zip(mod_download_url(mod.mod_id, mod.version), name, join_under(mods_dir, name))
