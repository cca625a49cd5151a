from .loader import (
    DataDirNotFoundError,
    RecordFileError,
    RecordStoreError,
    load_from_dir,
    load_record_file,
)

__all__ = [
    "DataDirNotFoundError",
    "RecordFileError",
    "RecordStoreError",
    "load_from_dir",
    "load_record_file",
]
