"""
Module for loading GTFS routes data.
"""
import os
import csv
from dataclasses import dataclass
from typing import Dict
from rdn_transit.logger import get_logger

logger = get_logger("routes")


@dataclass
class Route:
    route_id: str
    agency_id: str
    route_short_name: str
    route_long_name: str
    route_color: str


@dataclass
class AgencyRoute:
    id: int
    short_name: str
    long_name: str
    color: str
    route_type: int


def load_routes(feed_dir: str) -> Dict[str, Route]:
    """
    Load routes data from the GTFS feed.

    Returns:
        Dict[str, Route]: Routes keyed by GTFS route_id. A missing route_color
        column or value is loaded as an empty string so the agency color
        table can fill it in.
    """
    routes: Dict[str, Route] = {}
    routes_file_path = os.path.join(feed_dir, 'routes.txt')

    try:
        with open(routes_file_path, 'r', encoding='utf-8-sig', newline='') as routes_file:
            reader = csv.DictReader(routes_file)
            header = reader.fieldnames or []
            if 'route_color' not in header:
                logger.warning("Column 'route_color' not found in routes.txt. Colors will come from the agency table.")

            for row in reader:
                route = Route(
                    route_id=row['route_id'],
                    agency_id=row.get('agency_id') or '',
                    route_short_name=(row.get('route_short_name') or '').strip(),
                    route_long_name=(row.get('route_long_name') or '').strip(),
                    route_color=(row.get('route_color') or '').strip(),
                )
                routes[route.route_id] = route
    except FileNotFoundError:
        raise FileNotFoundError(f"Routes file not found at {routes_file_path}")
    except KeyError as e:
        raise KeyError(f"Missing required column in routes file: {e}")

    return routes
