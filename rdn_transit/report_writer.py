"""
Writers for the agency output files (JSON data, HTML summary).
"""
from typing import Any, Dict
from rdn_transit.report_render import render_html_report
from rdn_transit.logger import get_logger
import os
import json


def render_and_write_html(template_name: str, data: Dict[str, Any], output_path: str) -> None:
    """
    Render a template with data and write to an HTML file.

    Args:
        template_name: Name of the Jinja2 template file
        data: Dictionary containing data to render in the template
        output_path: Path where the HTML file should be written
    """
    logger = get_logger("report_writer")

    try:
        html_output = render_html_report(template_name, data)

        os.makedirs(os.path.dirname(output_path) or '.', exist_ok=True)

        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(html_output)

        logger.debug(f"HTML summary written to: {output_path}")
    except Exception as e:
        logger.error(f"Error writing HTML summary to {output_path}: {e}")
        raise


def write_json(output_dir: str, filename: str, data: Any, pretty: bool = False) -> None:
    """
    Write data to a JSON file.

    Args:
        output_dir: Directory where the JSON file should be written
        filename: Name of the JSON file
        data: JSON-serializable data
        pretty: Whether to format JSON with indentation
    """
    logger = get_logger("report_writer")

    try:
        os.makedirs(output_dir or '.', exist_ok=True)

        filepath = os.path.join(output_dir, filename)
        with open(filepath, 'w', encoding='utf-8') as f:
            if pretty:
                json.dump(data, f, ensure_ascii=False, indent=2)
            else:
                json.dump(data, f, ensure_ascii=False, separators=(',', ':'))

        logger.info(f"JSON written to: {filepath}")
    except Exception as e:
        logger.error(f"Error writing JSON to {output_dir}/{filename}: {e}")
        raise
