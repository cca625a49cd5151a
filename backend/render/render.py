"""
Page rendering: the file adapter plus the template-backed renderer.

render_to_file owns the output file's lifecycle: it creates (or truncates) the
file, hands the open text stream to the render callable and closes it whether
or not rendering succeeds. Errors from the callable propagate unchanged and a
partially written file is left in place.

PageRenderer is the seam between the pipeline and the template engine; tests
substitute a fake that records the contexts it was given.
"""

import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import Protocol, TextIO

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from models import BaseContext, DealzContext

logger = logging.getLogger(__name__)

TEMPLATES_DIR: Path = Path(__file__).resolve().parent / "templates"

_HOME_TEMPLATE = "home.html.j2"
_DEALZ_TEMPLATE = "dealz.html.j2"


class PageRenderer(Protocol):
    def render_home(self, sink: TextIO, context: BaseContext) -> None: ...
    def render_dealz(self, sink: TextIO, context: DealzContext) -> None: ...


def render_to_file(
    output_dir: Path, filename: str, render: Callable[[TextIO], None]
) -> Path:
    path = Path(output_dir) / filename
    with path.open("w", encoding="utf-8", newline="\n") as sink:
        render(sink)
    logger.info("Wrote %s", path.name)
    return path


def _format_price(value: float) -> str:
    return f"{value:,.2f}"


def _format_timestamp(value: datetime) -> str:
    return value.strftime("%Y-%m-%d %H:%M %Z").strip()


def build_environment(templates_dir: Path = TEMPLATES_DIR) -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(templates_dir)),
        autoescape=select_autoescape(["html", "html.j2"]),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters["price"] = _format_price
    env.filters["timestamp"] = _format_timestamp
    return env


class TemplateRenderer:
    """Renders the home and deal pages from the bundled Jinja2 templates."""

    def __init__(self, env: Environment | None = None) -> None:
        self.env = env or build_environment()

    def render_home(self, sink: TextIO, context: BaseContext) -> None:
        template = self.env.get_template(_HOME_TEMPLATE)
        sink.write(template.render(path_prefix=context.path_prefix))

    def render_dealz(self, sink: TextIO, context: DealzContext) -> None:
        template = self.env.get_template(_DEALZ_TEMPLATE)
        sink.write(
            template.render(
                path_prefix=context.path_prefix,
                title=context.title,
                last_updated=context.last_updated,
                products=context.products,
            )
        )
