"""
Feed transformation orchestrator.

Runs one agency's tools over a loaded feed: filter, transform, merge trips
per route direction, then write the results. Agency-specific decisions all
live in the tools object; this module only sequences them.
"""
import os
from dataclasses import asdict
from typing import Any, Dict, List, Optional, Tuple

from .logger import get_logger
from .report_writer import render_and_write_html, write_json
from .routes import AgencyRoute
from .stops import AgencyStop
from .trips import AgencyTrip
from .utils import create_stop_id_to_code_mapping

logger = get_logger("orchestrators")


def _insert_stops(tools, route_id: int, direction: int, sequence: List[str],
                  trip_stop_ids: List[str], stops: Dict[str, Any]) -> None:
    """
    Add a trip's stops to the ordered stop list of its route direction.

    A new stop goes before the first known stop that tools.compare_early()
    says comes after it. Without an opinion it goes right after the stop
    that precedes it on the trip, or at the end.
    """
    previous_stop_id: Optional[str] = None
    for stop_id in trip_stop_ids:
        if stop_id in sequence:
            previous_stop_id = stop_id
            continue
        insert_at = None
        for index, known_stop_id in enumerate(sequence):
            if tools.compare_early(route_id, direction, stops.get(stop_id), stops.get(known_stop_id)) < 0:
                insert_at = index
                break
        if insert_at is None:
            if previous_stop_id is not None:
                insert_at = sequence.index(previous_stop_id) + 1
            else:
                insert_at = len(sequence)
        sequence.insert(insert_at, stop_id)
        previous_stop_id = stop_id


def run_agency_tools(tools, feed, output_dir: str, prefix: str = '', pretty: bool = False) -> Dict[str, Any]:
    """
    Transform a feed with an agency's tools and write the results.

    Args:
        tools: DefaultAgencyTools (sub)class instance.
        feed: Loaded GtfsFeed.
        output_dir: Directory for the output files.
        prefix: Prefix for every output file name.
        pretty: Whether to indent the JSON output.

    Returns:
        Dictionary with generation statistics.

    Raises:
        AgencyToolsError: When the curated agency tables do not cover the feed.
    """
    if tools.excluding_all():
        logger.warning("No useful service IDs in this feed, excluding everything.")
        return {'excluded_all': True, 'routes': 0, 'trips': 0, 'stops': 0}

    agency_routes: Dict[int, AgencyRoute] = {}
    kept_routes = {}
    for route in feed.routes.values():
        if tools.exclude_route(route):
            logger.debug(f"Excluding route {route.route_id} (agency {route.agency_id})")
            continue
        route_id = tools.get_route_id(route)
        kept_routes[route.route_id] = route
        if route_id in agency_routes:
            logger.debug(f"Route {route.route_id} shares ID {route_id} with an earlier route")
            continue
        agency_routes[route_id] = AgencyRoute(
            id=route_id,
            short_name=route.route_short_name,
            long_name=tools.get_route_long_name(route),
            color=tools.get_route_color(route),
            route_type=tools.get_agency_route_type(),
        )

    stop_id_to_code = create_stop_id_to_code_mapping(feed.stops)
    agency_trips: Dict[Tuple[int, int], AgencyTrip] = {}
    direction_stop_ids: Dict[Tuple[int, int], List[str]] = {}
    observed_stop_codes: Dict[int, set] = {}
    service_ids = set()
    excluded_trips = 0

    for trip in feed.trips:
        route = kept_routes.get(trip.route_id)
        if route is None or tools.exclude_trip(trip):
            excluded_trips += 1
            continue
        trip_stop_ids = [
            stop_time.stop_id for stop_time in feed.stop_times.get(trip.trip_id, [])
            if not tools.exclude_stop_time(stop_time)
        ]
        stop_codes = [stop_id_to_code.get(stop_id, stop_id) for stop_id in trip_stop_ids]

        agency_trip = tools.set_trip_headsign(route, trip)
        if agency_trip is None:
            agency_trip = tools.split_trip(route, trip, stop_codes)

        key = (agency_trip.route_id, agency_trip.headsign_id)
        existing = agency_trips.get(key)
        if existing is None:
            existing = agency_trips[key] = agency_trip
        elif existing.headsign_value != agency_trip.headsign_value:
            merged = tools.merge_headsign(existing, agency_trip)
            logger.debug(f"Merged '{existing.headsign_value}' and '{agency_trip.headsign_value}' into '{merged}'")
            existing.set_headsign_string(merged, existing.headsign_id)

        existing.trip_ids.append(trip.trip_id)
        service_ids.add(trip.service_id)
        observed_stop_codes.setdefault(agency_trip.route_id, set()).update(stop_codes)
        _insert_stops(tools, key[0], key[1], direction_stop_ids.setdefault(key, []), trip_stop_ids, feed.stops)

    for route_id, stop_codes in observed_stop_codes.items():
        stale = tools.stale_anchors(route_id, stop_codes)
        if stale:
            logger.warning(f"Route {route_id} anchors not visited by any trip: {', '.join(stale)}")

    used_stop_ids = []
    for key, agency_trip in agency_trips.items():
        agency_trip.stop_ids = [
            tools.get_stop_id(feed.stops[stop_id])
            for stop_id in direction_stop_ids.get(key, []) if stop_id in feed.stops
        ]
        used_stop_ids.extend(direction_stop_ids.get(key, []))

    agency_stops: Dict[int, AgencyStop] = {}
    for stop_id in dict.fromkeys(used_stop_ids):
        stop = feed.stops.get(stop_id)
        if stop is None:
            logger.warning(f"Stop {stop_id} referenced by stop_times.txt is missing from stops.txt")
            continue
        agency_stop = AgencyStop(
            id=tools.get_stop_id(stop),
            code=stop.stop_code or '',
            name=tools.clean_stop_name(stop.stop_name or ''),
            lat=stop.stop_lat,
            lon=stop.stop_lon,
        )
        agency_stops.setdefault(agency_stop.id, agency_stop)

    calendars = [asdict(c) for c in feed.calendars if not tools.exclude_calendar(c)]
    calendar_dates = [asdict(cd) for cd in feed.calendar_dates if not tools.exclude_calendar_date(cd)]

    routes_data = [asdict(r) for r in sorted(agency_routes.values(), key=lambda r: r.id)]
    trips_data = [t.to_dict() for _, t in sorted(agency_trips.items())]
    stops_data = [asdict(s) for s in sorted(agency_stops.values(), key=lambda s: s.id)]

    write_json(output_dir, f"{prefix}routes.json", routes_data, pretty)
    write_json(output_dir, f"{prefix}trips.json", trips_data, pretty)
    write_json(output_dir, f"{prefix}stops.json", stops_data, pretty)
    write_json(output_dir, f"{prefix}calendars.json",
               {'calendar': calendars, 'calendar_dates': calendar_dates}, pretty)

    result = {
        'excluded_all': False,
        'routes': len(routes_data),
        'trips': len(trips_data),
        'stops': len(stops_data),
        'excluded_trips': excluded_trips,
        'service_ids': sorted(service_ids),
    }
    render_and_write_html("agency_summary.html.j2", {
        'agency_label': tools.agency_label,
        'agency_color': tools.get_agency_color(),
        'routes': routes_data,
        'trips': trips_data,
        'summary': result,
    }, os.path.join(output_dir, f"{prefix}summary.html"))

    logger.info(f"Wrote {len(routes_data)} routes, {len(trips_data)} trip directions and {len(stops_data)} stops to {output_dir}")
    return result
