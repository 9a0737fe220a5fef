import io
import os
import shutil
import zipfile
from pathlib import Path
from typing import List

from .constants import INSTALLED_FILE_MODE
from .directories import join_under


class ArchiveExtractor:

    def __init__(self, log_callback=None):
        self.log_callback = log_callback

    def _log(self, message, **kwargs):
        if self.log_callback:
            self.log_callback(message, **kwargs)

    def extract_zip_bytes(self, buffer: bytes, destination: Path) -> List[Path]:
        """Write every entry of an in-memory zip under destination.

        Entries are written in archive order and the first failure aborts;
        files already written stay on disk. Absolute entry names are kept
        below destination; '..' components are not sanitized.

        Raises:
            zipfile.BadZipFile: buffer is not a zip archive (nothing written)
            OSError: a directory or file could not be created or written
        """
        destination = Path(destination)
        with zipfile.ZipFile(io.BytesIO(buffer)) as zip_ref:
            destination.mkdir(parents=True, exist_ok=True)
            written = []
            for info in zip_ref.infolist():
                target = self._write_entry(zip_ref, info, destination)
                if target is not None:
                    written.append(target)
            return written

    def _write_entry(self, zip_ref, info, destination):
        target = join_under(destination, info.filename)
        if info.is_dir():
            target.mkdir(parents=True, exist_ok=True)
            return None

        parent = os.path.dirname(info.filename)
        if parent:
            join_under(destination, parent).mkdir(parents=True, exist_ok=True)

        self._log(f"  writing file {target}", debug=True)
        with zip_ref.open(info) as source, open(target, 'wb') as out:
            shutil.copyfileobj(source, out)
        os.chmod(target, INSTALLED_FILE_MODE)
        return target
