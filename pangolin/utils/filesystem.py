"""Filesystem helpers for safe reads and atomic writes."""

import os
import tempfile
from pathlib import Path
from typing import Union
from ..core.errors import FilesystemError, PathError, AtomicWriteError
from ..core.log import get_logger

logger = get_logger(__name__)


def atomic_write(path: Path, data: Union[str, bytes], mode: str = "w") -> None:
    """Atomically write data to a file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    is_binary = isinstance(data, bytes) or "b" in mode
    write_mode = "wb" if is_binary else "w"
    tmp_path = None
    try:
        with tempfile.NamedTemporaryFile(
            mode=write_mode,
            dir=path.parent,
            delete=False,
            prefix=f".{path.name}.tmp",
            **({} if is_binary else {"encoding": "utf-8"}),
        ) as tmp_file:
            tmp_path = Path(tmp_file.name)
            tmp_file.write(data)
            tmp_file.flush()
            os.fsync(tmp_file.fileno())
        tmp_path.replace(path)
        logger.debug(
            "Atomically wrote %s %s to %s",
            len(data),
            "bytes" if is_binary else "chars",
            path,
        )
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            try:
                tmp_path.unlink()
            except OSError:
                pass
        raise AtomicWriteError(f"Failed to atomically write to {path}: {e}") from e


def read_text(path: Path, encoding: str = "utf-8") -> str:
    """Read text file with proper error handling."""
    try:
        return Path(path).read_text(encoding=encoding)
    except FileNotFoundError as e:
        raise PathError(f"File not found: {path}") from e
    except PermissionError as e:
        raise FilesystemError(f"Permission denied reading {path}") from e
    except UnicodeDecodeError as e:
        raise FilesystemError(f"Encoding error reading {path}: {e}") from e
    except OSError as e:
        raise FilesystemError(f"Error reading {path}: {e}") from e
