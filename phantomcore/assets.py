"""Locating and reading asset files below a set of search paths."""

from __future__ import annotations

import enum
import logging
from typing import IO, List, Tuple

from .config import RuntimeModule

logger = logging.getLogger(__name__)

_MAX_UP_LEVELS = 10


class AssetOpenMode(enum.IntEnum):
    """How an asset file is opened."""

    TEXT = 0
    BINARY = 1


class AssetSeekBase(enum.IntEnum):
    """Reference point for seeking inside an open asset file."""

    SET = 0
    CUR = 1
    END = 2


class AssetLoader(RuntimeModule):
    """Finds assets in ``<search path>/Assets/`` or ``Assets/``, climbing up to ten parent levels."""

    def __init__(self) -> None:
        self._search_paths: List[str] = []
        self.tick_count = 0

    @property
    def search_paths(self) -> Tuple[str, ...]:
        """The registered search paths, in lookup order."""
        return tuple(self._search_paths)

    def init(self) -> None:
        """Nothing to prepare."""

    def shutdown(self) -> None:
        """Forget every search path."""
        self._search_paths.clear()

    def tick(self) -> None:
        """Count one frame of the main loop."""
        self.tick_count += 1

    def add_search_path(self, path: str) -> None:
        """Register ``path`` unless it is already registered."""
        if path not in self._search_paths:
            self._search_paths.append(path)

    def remove_search_path(self, path: str) -> None:
        """Unregister ``path`` if it is registered."""
        if path in self._search_paths:
            self._search_paths.remove(path)

    def file_exists(self, file_path: str) -> bool:
        """True if ``file_path`` can be found and opened."""
        try:
            fp = self.open_file(file_path, AssetOpenMode.BINARY)
        except FileNotFoundError:
            return False
        fp.close()
        return True

    def _candidates(self, name: str):
        up_path = ""
        for _ in range(_MAX_UP_LEVELS):
            for search in self._search_paths:
                yield f"{up_path}{search}/Assets/{name}"
            yield f"{up_path}Assets/{name}"
            up_path += "../"

    def open_file(self, name: str, mode: AssetOpenMode) -> IO:
        """Open the first matching asset file; raise FileNotFoundError if none matches."""
        for full_path in self._candidates(name):
            logger.debug("Trying to open %s", full_path)
            try:
                if mode == AssetOpenMode.TEXT:
                    return open(full_path, "r", encoding="utf-8")
                return open(full_path, "rb")
            except (FileNotFoundError, IsADirectoryError, NotADirectoryError):
                continue
        raise FileNotFoundError(f"Error opening file '{name}'")

    def read_text(self, file_path: str) -> str:
        """Return the whole text of an asset file."""
        with self.open_file(file_path, AssetOpenMode.TEXT) as fp:
            text = fp.read()
        logger.debug("Read file '%s', %d characters", file_path, len(text))
        return text

    def read_binary(self, file_path: str) -> bytes:
        """Return the whole content of an asset file as bytes."""
        with self.open_file(file_path, AssetOpenMode.BINARY) as fp:
            content = fp.read()
        logger.debug("Read file '%s', %d bytes", file_path, len(content))
        return content

    def read(self, fp: IO, size: int) -> bytes:
        """Read up to ``size`` bytes (or characters) from an open asset file."""
        if fp is None:
            raise ValueError("null file descriptor")
        return fp.read(size)

    def get_size(self, fp: IO) -> int:
        """Return the length of an open file without moving its position."""
        pos = fp.tell()
        fp.seek(0, AssetSeekBase.END)
        length = fp.tell()
        fp.seek(pos, AssetSeekBase.SET)
        return length

    def seek(self, fp: IO, offset: int, where: AssetSeekBase) -> int:
        """Move the position of an open file and return the new position."""
        return fp.seek(offset, int(where))