"""
Calendar loading and the "useful service IDs" pre-pass.
"""
import csv
import os
from dataclasses import dataclass
from typing import List, Set
from rdn_transit.logger import get_logger

logger = get_logger("services")


@dataclass
class Calendar:
    service_id: str
    start_date: str
    end_date: str


@dataclass
class CalendarDate:
    service_id: str
    date: str
    exception_type: str


def load_calendars(feed_dir: str) -> List[Calendar]:
    calendars: List[Calendar] = []
    try:
        with open(os.path.join(feed_dir, 'calendar.txt'), 'r', encoding="utf-8-sig", newline='') as calendar_file:
            reader = csv.DictReader(calendar_file)
            if 'service_id' not in (reader.fieldnames or []):
                logger.error("Required column not found in header: service_id")
                return calendars
            for row in reader:
                calendars.append(Calendar(
                    service_id=row['service_id'],
                    start_date=row.get('start_date') or '',
                    end_date=row.get('end_date') or '',
                ))
    except FileNotFoundError:
        logger.warning("calendar.txt file not found.")
    return calendars


def load_calendar_dates(feed_dir: str) -> List[CalendarDate]:
    calendar_dates: List[CalendarDate] = []
    try:
        with open(os.path.join(feed_dir, 'calendar_dates.txt'), 'r', encoding="utf-8-sig", newline='') as calendar_dates_file:
            reader = csv.DictReader(calendar_dates_file)
            if 'service_id' not in (reader.fieldnames or []):
                logger.error("Required column not found in header: service_id")
                return calendar_dates
            for row in reader:
                calendar_dates.append(CalendarDate(
                    service_id=row['service_id'],
                    date=row.get('date') or '',
                    exception_type=row.get('exception_type') or '',
                ))
    except FileNotFoundError:
        logger.warning("calendar_dates.txt file not found.")
    return calendar_dates


def extract_useful_service_ids(feed, tools) -> Set[str]:
    """
    Service IDs referenced by at least one trip the agency keeps.

    A trip is kept when its route is not excluded by ``tools`` and the trip
    itself passes the agency's trip filter. ``tools.service_ids`` must still
    be None at this point so the trip filter does not depend on the result.

    Args:
        feed: Loaded GtfsFeed.
        tools: Agency tools providing exclude_route and exclude_trip.

    Returns:
        Set[str]: The useful service IDs.
    """
    kept_route_ids = {
        route_id for route_id, route in feed.routes.items()
        if not tools.exclude_route(route)
    }
    service_ids = {
        trip.service_id for trip in feed.trips
        if trip.route_id in kept_route_ids and not tools.exclude_trip(trip)
    }
    logger.info(f"Found {len(service_ids)} useful service IDs across {len(kept_route_ids)} routes")
    return service_ids
