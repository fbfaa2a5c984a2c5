"""
Common utility functions used across the agency tools.
"""
from typing import Dict, Any


def normalize_stop_code(stop_code: str, numeric_only: bool = False) -> str:
    """Normalize stop code based on formatting requirements."""
    if not stop_code:
        return ""

    if numeric_only:
        numeric_code = ''.join(c for c in stop_code if c.isdigit())
        # Convert to integer and back to string to remove leading zeros
        return str(int(numeric_code)) if numeric_code else ""

    return stop_code


def create_stop_id_to_code_mapping(stops: Dict[str, Any], numeric_stop_code: bool = False) -> Dict[str, str]:
    """Create a reverse lookup from stop_id to stop_code."""
    stop_id_to_code = {}
    for stop_id, stop in stops.items():
        if stop.stop_code:
            stop_code = normalize_stop_code(stop.stop_code, numeric_stop_code)
            if stop_code:
                stop_id_to_code[stop_id] = stop_code
    return stop_id_to_code


def get_pretty_duration(seconds: float) -> str:
    """Format a duration as e.g. '1m 5.20s' or '0.42s'."""
    minutes, secs = divmod(seconds, 60)
    if minutes >= 1:
        return f"{int(minutes)}m {secs:.2f}s"
    return f"{secs:.2f}s"


def safe_color_hex(color: str) -> str:
    """Ensure color is a valid 6-character hex code."""
    if not color:
        return "cccccc"

    color = color.lstrip('#')

    if len(color) == 6 and all(c in '0123456789abcdefABCDEF' for c in color):
        return color.lower()

    return "cccccc"


def format_count(count: int) -> str:
    """Format count with consistent number formatting."""
    return f"{count:,}"
