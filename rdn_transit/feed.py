"""
In-memory GTFS feed for a single run.
"""
from dataclasses import dataclass, field
from typing import Dict, List

from rdn_transit.logger import get_logger
from rdn_transit.routes import Route, load_routes
from rdn_transit.services import Calendar, CalendarDate, load_calendar_dates, load_calendars
from rdn_transit.stop_times import StopTime, get_stops_for_trips
from rdn_transit.stops import Stop, get_all_stops
from rdn_transit.trips import Trip, load_trips

logger = get_logger("feed")


@dataclass
class GtfsFeed:
    routes: Dict[str, Route] = field(default_factory=dict)
    trips: List[Trip] = field(default_factory=list)
    stops: Dict[str, Stop] = field(default_factory=dict)
    stop_times: Dict[str, List[StopTime]] = field(default_factory=dict)
    calendars: List[Calendar] = field(default_factory=list)
    calendar_dates: List[CalendarDate] = field(default_factory=list)


def load_feed(feed_dir: str) -> GtfsFeed:
    """Read the GTFS tables the agency tools use from an extracted feed directory."""
    feed = GtfsFeed(
        routes=load_routes(feed_dir),
        trips=load_trips(feed_dir),
        stops=get_all_stops(feed_dir),
        stop_times=get_stops_for_trips(feed_dir),
        calendars=load_calendars(feed_dir),
        calendar_dates=load_calendar_dates(feed_dir),
    )
    logger.info(
        f"Loaded feed from {feed_dir}: {len(feed.routes)} routes, {len(feed.trips)} trips, "
        f"{len(feed.stops)} stops, {len(feed.calendars)} calendars, {len(feed.calendar_dates)} calendar dates"
    )
    return feed
