"""Definition sources: where table lines come from.

A translator never opens files itself. It asks a locator to ``open`` a
table file by name and gets back an iterable of lines. Two locators are
provided:

* :class:`TableLocator` searches directories on disk, ending with the
  definition files shipped inside this package.
* :class:`MemoryLocator` serves lines held in memory, for embedding and
  tests.
"""

from __future__ import annotations

import contextlib
import logging
import os
from typing import Iterable, Iterator, Mapping, Protocol

from brailletables.constants import DATA_DIR_ENV
from brailletables.errors import SourceUnavailable

log = logging.getLogger("brailletables.sources")

PACKAGE_DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data")


class Locator(Protocol):
    def open(self, filename: str) -> contextlib.AbstractContextManager[Iterable[str]]:
        ...


class TableLocator:
    """Finds definition files on disk.

    Directories are tried in order: ``search_dirs``, then the directory in
    ``$BRAILLETABLES_DATA_DIR`` (if set), then the packaged data.
    """

    def __init__(
        self,
        search_dirs: Iterable[str] = (),
        env: Mapping[str, str] | None = None,
        include_packaged: bool = True,
    ):
        env = os.environ if env is None else env
        self.search_dirs: list[str] = list(search_dirs)
        env_dir = env.get(DATA_DIR_ENV)
        if env_dir:
            self.search_dirs.append(env_dir)
        if include_packaged:
            self.search_dirs.append(PACKAGE_DATA_DIR)

    def find(self, filename: str) -> str:
        """Path of the first existing *filename*; :class:`SourceUnavailable` if none."""
        for directory in self.search_dirs:
            path = os.path.join(directory, filename)
            if os.path.isfile(path):
                return path
        tried = ", ".join(self.search_dirs) or "(no directories)"
        raise SourceUnavailable(
            f"The txt file {filename} is not found. Searched: {tried}"
        )

    @contextlib.contextmanager
    def open(self, filename: str) -> Iterator[Iterable[str]]:
        path = self.find(filename)
        try:
            f = open(path, "r", encoding="utf-8", newline="")
        except OSError as exc:
            raise SourceUnavailable(f"Cannot read {path}: {exc}") from exc
        log.debug("Reading %s", path)
        with f:
            yield f


class MemoryLocator:
    """Serves definition lines from memory, keyed by file name."""

    def __init__(self, tables: Mapping[str, Iterable[str]]):
        self.tables: dict[str, list[str]] = {
            name: list(lines) for name, lines in tables.items()
        }

    @contextlib.contextmanager
    def open(self, filename: str) -> Iterator[Iterable[str]]:
        if filename not in self.tables:
            raise SourceUnavailable(f"No in-memory table named {filename}")
        yield iter(self.tables[filename])
