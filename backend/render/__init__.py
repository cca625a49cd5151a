from .render import (
    PageRenderer,
    TemplateRenderer,
    build_environment,
    render_to_file,
)

__all__ = ["PageRenderer", "TemplateRenderer", "build_environment", "render_to_file"]
