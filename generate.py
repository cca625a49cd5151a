"""
Generate script: loads scraped deal records and renders the static site.

Reads records from <data-dir>/raw, splits them into discounted and other
products, and writes index.html, discount.html and other.html to the output
directory.

Usage:
    uv run python generate.py --data-dir ./data --output-dir docs --path-prefix /dealz
"""

import argparse
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path

from jinja2 import TemplateError

from backend.corpus import (
    DISCOUNT_PAGE,
    DISCOUNT_TITLE,
    HOME_PAGE,
    OTHER_PAGE,
    OTHER_TITLE,
    GeneratorConfig,
    normalize_path_prefix,
)
from backend.partition import partition_products
from backend.render import PageRenderer, TemplateRenderer, render_to_file
from backend.store import DataDirNotFoundError, RecordStoreError, load_from_dir
from models import BaseContext, DealzContext, PricedProduct, Product

logger = logging.getLogger(__name__)


def load_records(raw_dir: Path) -> list[PricedProduct]:
    """Load records, treating a missing directory as an empty store."""
    try:
        records = load_from_dir(raw_dir)
    except DataDirNotFoundError:
        logger.warning("data dir %r does not exist, assuming no deals...", str(raw_dir))
        return []
    for record in records:
        logger.debug("%r", record)
    return records


def _render_dealz_page(
    renderer: PageRenderer,
    output_dir: Path,
    filename: str,
    base: BaseContext,
    title: str,
    last_updated: datetime,
    products: tuple[Product, ...],
) -> Path:
    context = DealzContext(
        base=base, title=title, last_updated=last_updated, products=products
    )
    return render_to_file(
        output_dir, filename, lambda sink: renderer.render_dealz(sink, context)
    )


def generate_site(
    config: GeneratorConfig,
    renderer: PageRenderer | None = None,
    *,
    now: datetime | None = None,
) -> list[Path]:
    """
    Run the whole pipeline once and return the written page paths.

    Fails fast: the first error aborts the remaining pages. Only a missing raw
    data directory is tolerated.
    """
    renderer = renderer or TemplateRenderer()
    last_updated = now or datetime.now(timezone.utc)
    base = BaseContext(path_prefix=config.path_prefix)

    config.output_dir.mkdir(parents=True, exist_ok=True)

    records = load_records(config.raw_dir)
    split = partition_products(records)
    logger.info(
        "%d discounted, %d other products", len(split.discounted), len(split.other)
    )

    written = [
        render_to_file(
            config.output_dir, HOME_PAGE, lambda sink: renderer.render_home(sink, base)
        ),
        _render_dealz_page(
            renderer, config.output_dir, DISCOUNT_PAGE, base,
            DISCOUNT_TITLE, last_updated, split.discounted,
        ),
        _render_dealz_page(
            renderer, config.output_dir, OTHER_PAGE, base,
            OTHER_TITLE, last_updated, split.other,
        ),
    ]
    return written


def _path_prefix_arg(value: str) -> str:
    try:
        return normalize_path_prefix(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser(defaults: GeneratorConfig | None = None) -> argparse.ArgumentParser:
    defaults = defaults or GeneratorConfig()
    parser = argparse.ArgumentParser(description="Render the deals site from scraped data.")
    parser.add_argument(
        "--data-dir", type=Path, default=defaults.data_dir,
        help="directory that contains scraped data files (records are read from <data-dir>/raw)",
    )
    parser.add_argument(
        "--output-dir", type=Path, default=defaults.output_dir,
        help="directory to write rendered HTML content to",
    )
    parser.add_argument(
        "--path-prefix", type=_path_prefix_arg, default=defaults.path_prefix,
        help="prefix page link URLs (in case pages are hosted at a subpath); should start with '/'",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log every loaded record")
    return parser


def main(argv: list[str] | None = None) -> int:
    try:
        defaults = GeneratorConfig.from_env()
    except ValueError as exc:
        build_parser().error(str(exc))
    args = build_parser(defaults).parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )
    config = GeneratorConfig.from_args(args)

    try:
        generate_site(config)
    except (RecordStoreError, OSError, TemplateError) as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
