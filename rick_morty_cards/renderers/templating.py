"""Jinja2 environment shared by the HTML renderers and the Flask app."""

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ..constants.paths import TEMPLATES_DIR

environment = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


def render(template_name: str, **context) -> str:
    return environment.get_template(template_name).render(**context)
