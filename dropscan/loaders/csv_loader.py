"""Streaming CSV source for domain drop lists."""

import csv
import logging
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, TextIO, Union

from ..exceptions import LoadError

logger = logging.getLogger(__name__)

COMMENT_PREFIXES = ('#', '//', ';')
DEFAULT_CHUNK_ROWS = 5000


def strip_comments(lines: Iterable[str]) -> Iterator[str]:
    """Drop blank lines and lines starting with #, // or ;."""
    for line in lines:
        trimmed = line.lstrip()
        if not trimmed.strip():
            continue
        if trimmed.startswith(COMMENT_PREFIXES):
            continue
        yield line


class CsvRowSource:
    """Reads header-keyed rows from a CSV file, one at a time or in chunks.

    Rows are yielded lazily so callers can build records as they arrive.
    cancel() stops iteration before the next row; a read or decode failure
    surfaces as LoadError carrying a readable message.
    """

    def __init__(
        self,
        path: Union[str, Path],
        encoding: str = 'utf-8-sig',
        chunk_rows: int = DEFAULT_CHUNK_ROWS,
    ):
        self.path = Path(path)
        self.encoding = encoding
        self.chunk_rows = max(1, chunk_rows)
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self):
        self._cancelled = True

    def _read(self, handle: TextIO) -> Iterator[Dict[str, Optional[str]]]:
        reader = csv.DictReader(strip_comments(handle))
        for row in reader:
            if self._cancelled:
                logger.debug("Reading %s cancelled at line %d", self.path, reader.line_num)
                return
            if not any(value for key, value in row.items() if key is not None):
                continue
            yield row

    def rows(self) -> Iterator[Dict[str, Optional[str]]]:
        try:
            with open(self.path, 'r', encoding=self.encoding, newline='') as handle:
                yield from self._read(handle)
        except UnicodeDecodeError as exc:
            raise LoadError(f"Cannot decode {self.path.name}: {exc.reason}") from exc
        except csv.Error as exc:
            raise LoadError(f"Malformed CSV in {self.path.name}: {exc}") from exc
        except OSError as exc:
            raise LoadError(f"Cannot read {self.path}: {exc.strerror or exc}") from exc

    def chunks(self) -> Iterator[List[Dict[str, Optional[str]]]]:
        chunk = []
        for row in self.rows():
            chunk.append(row)
            if len(chunk) >= self.chunk_rows:
                yield chunk
                chunk = []
        if chunk:
            yield chunk

    def __iter__(self):
        return self.rows()
