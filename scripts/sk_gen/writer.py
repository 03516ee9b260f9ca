"""
Change-aware script file writer

Files are first staged next to their destination as '<path>.tmp' and only
moved into place by commit(). A run that dies half way leaves temp files
beside untouched originals instead of a half regenerated tree.
"""

import os
from pathlib import Path
import threading
from typing import Optional

from .errors import IOFailure
from .log import get_logger

logger = get_logger('writer')

DEFAULT_TEMP_SUFFIX = '.tmp'


class ScriptFileWriter:
    """Writes generated text only where it changed"""

    def __init__(self, encoding: str = 'utf-8', temp_suffix: str = DEFAULT_TEMP_SUFFIX):
        self.encoding = encoding
        self.temp_suffix = temp_suffix
        self._pending: dict[Path, Path] = {}  # destination -> temp file
        self._lock = threading.Lock()

    @property
    def pending(self) -> dict[Path, Path]:
        """Staged writes, destination -> temp file"""
        return dict(self._pending)

    def temp_path(self, path) -> Path:
        path = Path(path)
        return path.with_name(path.name + self.temp_suffix)

    def write_if_changed(self, path, new_content: str) -> bool:
        """Stage new_content for path unless the file already holds it

        Returns True if a write was staged.
        """
        path = Path(path)
        temp_path = self.temp_path(path)
        new_bytes = new_content.encode(self.encoding)

        with self._lock:
            if path in self._pending:
                if _read_bytes(temp_path) == new_bytes:
                    return False
            if _read_bytes(path) == new_bytes:
                # Back to what is on disk, drop an earlier staged version
                if self._pending.pop(path, None) is not None:
                    _remove(temp_path)
                return False

            _remove(temp_path)
            try:
                path.parent.mkdir(parents=True, exist_ok=True)
                with open(temp_path, 'wb') as f:
                    f.write(new_bytes)
            except OSError as exc:
                raise IOFailure(f"Failed to save file: '{temp_path}'", str(temp_path)) from exc

            self._pending[path] = temp_path
            logger.debug('staged %s', temp_path)
            return True

    def commit(self) -> int:
        """Move all staged files into place, returns the number of files written"""
        with self._lock:
            count = 0
            for path, temp_path in list(self._pending.items()):
                try:
                    os.replace(temp_path, path)
                except OSError as exc:
                    raise IOFailure(f"Couldn't write file '{path}'", str(path)) from exc
                del self._pending[path]
                count += 1

        if count:
            logger.info('updated %d script file(s)', count)
        return count


def _read_bytes(path: Path) -> Optional[bytes]:
    try:
        return path.read_bytes()
    except FileNotFoundError:
        return None
    except OSError as exc:
        raise IOFailure(f"Failed to read file: '{path}'", str(path)) from exc


def _remove(path: Path):
    try:
        path.unlink()
    except FileNotFoundError:
        pass
    except OSError as exc:
        raise IOFailure(f"Failed to delete file: '{path}'", str(path)) from exc
