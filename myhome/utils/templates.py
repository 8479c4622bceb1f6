"""
Jinja2 rendering of the HTML email templates shipped with the package.
"""

from pathlib import Path
from typing import Any, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"


class TemplateRenderer:
    """Render templates from a directory (defaults to ``myhome/templates``)."""

    def __init__(self, templates_dir: Optional[Path] = None):
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir or TEMPLATES_DIR)),
            autoescape=select_autoescape(["html", "xml"]),
        )

    def render(self, template_name: str, **context: Any) -> str:
        return self.env.get_template(template_name).render(**context)
