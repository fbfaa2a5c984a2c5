import re
import time
from typing import List, Optional, Set

from rdn_transit.clean_utils import clean_label
from rdn_transit.cli_parser import create_agency_tools_parser
from rdn_transit.config import good_enough_from_env
from rdn_transit.download import prepare_feed_directory
from rdn_transit.feed import load_feed
from rdn_transit.logger import get_logger
from rdn_transit.orchestrators import run_agency_tools
from rdn_transit.trips import AgencyTrip
from rdn_transit.utils import get_pretty_duration

logger = get_logger("agency_tools")

re_not_in_service = re.compile(r'not in service', re.IGNORECASE)
re_route_id_letters_suffix = re.compile(r'-[a-z]+$', re.IGNORECASE)

ROUTE_TYPE_BUS = 3


def merge_empty(headsign_value: str, headsign_value_to_merge: str) -> Optional[str]:
    """If one of the two labels is empty, the other one wins. None otherwise."""
    if not headsign_value:
        return headsign_value_to_merge
    if not headsign_value_to_merge:
        return headsign_value
    return None


class DefaultAgencyTools:
    """
    Default behaviour for one agency's feed. Agencies subclass this and
    override the hooks their feed needs.
    """
    agency_label = "agency"

    def __init__(self, good_enough_accepted: Optional[bool] = None):
        if good_enough_accepted is None:
            good_enough_accepted = good_enough_from_env()
        self.good_enough_accepted = good_enough_accepted
        self.service_ids: Optional[Set[str]] = None

    def is_good_enough_accepted(self) -> bool:
        return self.good_enough_accepted

    # Filters

    def excluding_all(self) -> bool:
        return self.service_ids is not None and len(self.service_ids) == 0

    def exclude_service_id(self, service_id: str) -> bool:
        return self.service_ids is not None and service_id not in self.service_ids

    def exclude_route(self, route) -> bool:
        return False

    def exclude_trip(self, trip) -> bool:
        if re_not_in_service.search(trip.headsign or ''):
            return True
        return self.exclude_service_id(trip.service_id)

    def exclude_stop_time(self, stop_time) -> bool:
        return bool(re_not_in_service.search(stop_time.stop_headsign or ''))

    def exclude_calendar(self, calendar) -> bool:
        return self.exclude_service_id(calendar.service_id)

    def exclude_calendar_date(self, calendar_date) -> bool:
        return self.exclude_service_id(calendar_date.service_id)

    # Routes

    def get_agency_route_type(self) -> int:
        return ROUTE_TYPE_BUS

    def get_agency_color(self) -> Optional[str]:
        return None

    def get_route_id(self, route) -> int:
        """GTFS route_id as a number, without a trailing "-LETTERS" suffix."""
        return int(re_route_id_letters_suffix.sub('', route.route_id))

    def get_route_long_name(self, route) -> str:
        return clean_label(route.route_long_name)

    def get_route_color(self, route) -> Optional[str]:
        return route.route_color or self.get_agency_color()

    # Trips

    def clean_trip_headsign(self, trip_headsign: str) -> str:
        return clean_label(trip_headsign)

    def set_trip_headsign(self, route, trip) -> Optional[AgencyTrip]:
        """
        Label a trip. Returning None hands the trip over to split_trip().
        """
        return AgencyTrip(
            self.get_route_id(route),
            self.clean_trip_headsign(trip.headsign),
            trip.direction_id or 0,
        )

    def split_trip(self, route, trip, stop_codes: List[str]) -> AgencyTrip:
        return AgencyTrip(
            self.get_route_id(route),
            self.clean_trip_headsign(trip.headsign),
            trip.direction_id or 0,
        )

    def merge_headsign(self, trip: AgencyTrip, trip_to_merge: AgencyTrip) -> str:
        """
        Label for two trips of the same route and direction.

        Keeps the first label when it already contains the second one,
        otherwise shows both.
        """
        merged = merge_empty(trip.headsign_value, trip_to_merge.headsign_value)
        if merged is not None:
            return merged
        if trip_to_merge.headsign_value in trip.headsign_value:
            return trip.headsign_value
        return f"{trip.headsign_value} / {trip_to_merge.headsign_value}"

    def compare_early(self, route_id: int, direction: int, stop, other_stop) -> int:
        """Order two stops of one direction. 0 means no opinion."""
        return 0

    def stale_anchors(self, route_id: int, observed_stop_codes: Set[str]) -> List[str]:
        return []

    # Stops

    def clean_stop_name(self, stop_name: str) -> str:
        return clean_label(stop_name)

    def get_stop_id(self, stop) -> int:
        return int(stop.stop_id)

    # Run

    def configure(self, options) -> None:
        self.good_enough_accepted = self.good_enough_accepted or options.good_enough

    def prepare(self, feed) -> None:
        """Hook run once the feed is loaded and before anything is filtered."""

    def start(self, args: Optional[List[str]] = None) -> Optional[dict]:
        """
        Run the agency tools.

        Args:
            args: [input feed, output directory, output files prefix]; each
                one falls back to its default when omitted.

        Returns:
            Generation statistics, or None when the download was skipped.
        """
        parser = create_agency_tools_parser()
        options = parser.parse_args(args or [])
        self.configure(options)

        logger.info(f"Generating {self.agency_label} data...")
        start = time.perf_counter()

        feed_dir = prepare_feed_directory(options.input, options.output_dir, options.force_download)
        if feed_dir is None:
            logger.info("Download was skipped (feed not modified).")
            return None

        feed = load_feed(feed_dir)
        self.prepare(feed)
        result = run_agency_tools(self, feed, options.output_dir, options.prefix, options.pretty)

        logger.info(f"Generating {self.agency_label} data... DONE in {get_pretty_duration(time.perf_counter() - start)}.")
        return result
