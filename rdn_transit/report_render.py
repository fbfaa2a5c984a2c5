"""
Handles Jinja2 HTML rendering for the agency summary.
"""
from jinja2 import Environment, FileSystemLoader
import os
from typing import Dict, Any

from rdn_transit.utils import format_count, safe_color_hex

# Global template environment for caching
_template_env = None


def _get_template_env():
    """Get or create the global template environment."""
    global _template_env
    if _template_env is None:
        _template_env = Environment(
            loader=FileSystemLoader(os.path.dirname(__file__)),
            cache_size=50,
            auto_reload=False,
            autoescape=True,
        )
        _template_env.filters['safe_color_hex'] = safe_color_hex
        _template_env.filters['format_count'] = format_count

    return _template_env


def render_html_report(template_name: str, data: Dict[str, Any]) -> str:
    """Render an HTML template from the package's templates directory."""
    env = _get_template_env()
    template = env.get_template(f"templates/{template_name}")
    return template.render(**data)
