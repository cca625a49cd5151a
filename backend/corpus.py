"""
Paths, page names and run configuration for the deals site.

Single source of truth for:
- RAW_SUBDIR   — subdirectory of the data dir holding scraped record files
- GeneratorConfig — explicit configuration threaded through a run
"""

import argparse
import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_DATA_DIR: Path = Path("./data")
DEFAULT_OUTPUT_DIR: Path = Path("docs")
RAW_SUBDIR = "raw"

HOME_PAGE = "index.html"
DISCOUNT_PAGE = "discount.html"
OTHER_PAGE = "other.html"

# The "40%" label is what the site has always shown; classification is
# percentage > 0 regardless.
DISCOUNT_TITLE = "Discounted (40%)"
OTHER_TITLE = "Other Products"


def normalize_path_prefix(prefix: str) -> str:
    """Validate a link prefix and strip any trailing slash ("/deals/" -> "/deals")."""
    prefix = prefix.strip()
    if not prefix:
        return ""
    if not prefix.startswith("/"):
        raise ValueError(f"path prefix {prefix!r} must start with '/'")
    return prefix.rstrip("/")


@dataclass(frozen=True)
class GeneratorConfig:
    """Where to read records, where to write pages, how to prefix links. Overridable via DEALZ_* env vars."""

    data_dir: Path = DEFAULT_DATA_DIR
    output_dir: Path = DEFAULT_OUTPUT_DIR
    path_prefix: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "data_dir", Path(self.data_dir))
        object.__setattr__(self, "output_dir", Path(self.output_dir))
        object.__setattr__(self, "path_prefix", normalize_path_prefix(self.path_prefix))

    @property
    def raw_dir(self) -> Path:
        return self.data_dir / RAW_SUBDIR

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "GeneratorConfig":
        """Build config from parsed `--data-dir`, `--output-dir` and `--path-prefix`."""
        return cls(
            data_dir=args.data_dir,
            output_dir=args.output_dir,
            path_prefix=args.path_prefix,
        )

    @classmethod
    def from_env(cls) -> "GeneratorConfig":
        """Build config from DEALZ_* env vars, falling back to defaults."""
        return cls(
            data_dir=Path(os.getenv("DEALZ_DATA_DIR", str(DEFAULT_DATA_DIR))),
            output_dir=Path(os.getenv("DEALZ_OUTPUT_DIR", str(DEFAULT_OUTPUT_DIR))),
            path_prefix=os.getenv("DEALZ_PATH_PREFIX", ""),
        )
