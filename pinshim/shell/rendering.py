"""
Jinja2 rendering of the shell scripts pinshim generates.

Templates live in the templates/ directory next to this module.
"""

import logging
from functools import lru_cache
from pathlib import Path

from pinshim.core.exceptions import TemplateRenderError

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"


@lru_cache(maxsize=None)
def _environment():
    """
    Initialize the Jinja2 template environment.

    Raises:
        TemplateRenderError: If the template directory is missing
    """
    from jinja2 import Environment, FileSystemLoader

    if not TEMPLATE_DIR.exists():
        raise TemplateRenderError(f"Template directory not found: {TEMPLATE_DIR}")

    environment = Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    logger.debug(f"Jinja2 templates initialized from: {TEMPLATE_DIR}")
    return environment


def render_template(template_name: str, **context) -> str:
    """
    Render a template from TEMPLATE_DIR.

    Raises:
        TemplateRenderError: If the template is missing or fails to render
    """
    try:
        template = _environment().get_template(template_name)
        return template.render(**context)
    except TemplateRenderError:
        raise
    except Exception as e:
        raise TemplateRenderError(
            f"Failed to render template {template_name}: {e}"
        ) from e
