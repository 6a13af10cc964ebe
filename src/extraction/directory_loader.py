# src/extraction/directory_loader.py - v1
"""Load every supported file under a directory into Documents.

Files are visited recursively in sorted path order. Extensions without a
registered extractor are skipped; a file whose extractor fails is logged
and skipped so one bad file never aborts the directory.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from questgen.core.models import Document
from questgen.extraction.base_extractor import LoaderError
from questgen.extraction.extractor_factory import ExtractorFactory, default_loaders

logger = logging.getLogger(__name__)


class DirectoryLoader:
    """Directory-wide loader dispatching on file extension."""

    def __init__(
        self,
        directory: str | Path,
        loaders: dict[str, ExtractorFactory] | None = None,
    ) -> None:
        self._directory = Path(directory)
        source = loaders if loaders is not None else default_loaders()
        self._loaders = {ext.lower(): factory for ext, factory in source.items()}
        self.skipped: list[Path] = []
        self.failed: list[LoaderError] = []

    async def load(self) -> list[Document]:
        """Load all supported files.

        Raises:
            OSError: If the directory is missing, not a directory, or any
                directory under it cannot be read.
        """
        if not self._directory.is_dir():
            raise NotADirectoryError(f"Not a directory: {self._directory}")

        self.skipped = []
        self.failed = []
        documents: list[Document] = []

        for path in _list_files(self._directory):
            factory = self._loaders.get(path.suffix.lower())
            if factory is None:
                self.skipped.append(path)
                logger.debug("Skipping unsupported file %s", path)
                continue

            try:
                loaded = await factory().extract(path)
            except Exception as e:
                error = LoaderError(path, e)
                self.failed.append(error)
                logger.warning("%s, skipping", error)
                continue

            logger.debug("Loaded %d document(s) from %s", len(loaded), path.name)
            documents.extend(loaded)

        logger.info(
            "Loaded %d documents from %s (%d unsupported, %d failed)",
            len(documents), self._directory, len(self.skipped), len(self.failed),
        )
        return documents


def _list_files(root: Path) -> list[Path]:
    """Return every file under root in sorted path order."""
    files = [
        Path(dirpath) / name
        for dirpath, _dirnames, filenames in os.walk(root, onerror=_raise_walk_error)
        for name in filenames
        if (Path(dirpath) / name).is_file()
    ]
    return sorted(files)


def _raise_walk_error(error: OSError) -> None:
    raise error
