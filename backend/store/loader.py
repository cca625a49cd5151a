"""
Record store loader: reads scraped product records from a directory.

Each `*.json` file directly under the directory holds either one record (a JSON
object) or a batch (a JSON array of objects). Files are read in lexicographic
filename order and batch order is kept, so a run over the same directory always
yields the same sequence.

A missing directory raises DataDirNotFoundError, which callers may treat as
"no records". Anything else that goes wrong while reading a file raises
RecordFileError naming that file.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from models import PricedProduct

logger = logging.getLogger(__name__)

_RECORD_GLOB = "*.json"


class RecordStoreError(Exception):
    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path


class DataDirNotFoundError(RecordStoreError):
    """The record directory does not exist. Recoverable: treat as zero records."""

    def __init__(self, path: Path) -> None:
        super().__init__(path, "data directory does not exist")


class RecordFileError(RecordStoreError):
    """A record file could not be read or parsed. Fatal for the run."""


def _records_from_payload(path: Path, payload: Any) -> list[PricedProduct]:
    if isinstance(payload, dict):
        items = [payload]
    elif isinstance(payload, list):
        items = payload
    else:
        raise RecordFileError(
            path, f"expected a JSON object or array, got {type(payload).__name__}"
        )

    records: list[PricedProduct] = []
    for index, item in enumerate(items):
        try:
            records.append(PricedProduct.model_validate(item))
        except ValidationError as exc:
            raise RecordFileError(path, f"invalid record at index {index}: {exc}") from exc
    return records


def load_record_file(path: Path) -> list[PricedProduct]:
    """Load every record held by one file, in file order."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise RecordFileError(path, f"cannot read file: {exc}") from exc

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise RecordFileError(path, f"malformed JSON: {exc}") from exc

    return _records_from_payload(path, payload)


def _record_files(directory: Path) -> list[Path]:
    if not directory.exists():
        raise DataDirNotFoundError(directory)
    if not directory.is_dir():
        raise RecordFileError(directory, "data path is not a directory")
    try:
        candidates = sorted(directory.glob(_RECORD_GLOB), key=lambda p: p.name)
    except OSError as exc:
        raise RecordFileError(directory, f"cannot list directory: {exc}") from exc
    return [path for path in candidates if path.is_file()]


def load_from_dir(directory: Path) -> list[PricedProduct]:
    """
    Load all records found in `directory`.

    Raises DataDirNotFoundError if the directory is missing and RecordFileError
    on the first unreadable or malformed file; no partial result is returned
    in the latter case.
    """
    directory = Path(directory)
    files = _record_files(directory)

    records: list[PricedProduct] = []
    for path in files:
        loaded = load_record_file(path)
        logger.debug("Loaded %d record(s) from %s", len(loaded), path.name)
        records.extend(loaded)

    logger.info("Loaded %d records from %d files in %s", len(records), len(files), directory)
    return records
