"""
Agency tools for RDN Transit System (Nanaimo) buses.

https://bctransit.com/servlet/bctransit/data/GTFS - Nanaimo
https://nanaimo.mapstrat.com/current/google_transit.zip
"""
from typing import Dict, List, Optional, Set

from rdn_transit.agency.default import DefaultAgencyTools, merge_empty
from rdn_transit.agency.headsign_policy import DefaultClean, resolve_headsign
from rdn_transit.agency.rdn_config import build_rdn_config
from rdn_transit.agency import rdn_text
from rdn_transit.config import AgencyConfig, good_enough_from_env
from rdn_transit.errors import UnexpectedMergeError, UnexpectedRouteColorError
from rdn_transit.logger import get_logger
from rdn_transit.services import extract_useful_service_ids
from rdn_transit.trips import AgencyTrip

logger = get_logger("rdn")


class RdnTransitAgencyTools(DefaultAgencyTools):
    agency_label = "RDN Transit System bus"

    def __init__(self, config: Optional[AgencyConfig] = None):
        if config is None:
            config = build_rdn_config(good_enough_from_env())
        super().__init__(good_enough_accepted=config.good_enough_accepted)
        self.config = config
        # route ID -> route short name, filled while labelling trips
        self._route_short_names: Dict[int, str] = {}

    def configure(self, options) -> None:
        super().configure(options)
        self.config = self.config.with_good_enough(self.good_enough_accepted)

    def is_good_enough_accepted(self) -> bool:
        return self.config.good_enough_accepted

    def prepare(self, feed) -> None:
        self.service_ids = None
        self.service_ids = extract_useful_service_ids(feed, self)

    # Filters

    def _exclude_by_token(self, service_id: str) -> bool:
        token = self.config.service_id_token
        return bool(token) and token not in service_id

    def exclude_route(self, route) -> bool:
        if route.agency_id != self.config.agency_id:
            return True
        return super().exclude_route(route)

    def exclude_trip(self, trip) -> bool:
        if self._exclude_by_token(trip.service_id):
            return True
        return super().exclude_trip(trip)

    def exclude_calendar(self, calendar) -> bool:
        if self._exclude_by_token(calendar.service_id):
            return True
        return super().exclude_calendar(calendar)

    def exclude_calendar_date(self, calendar_date) -> bool:
        if self._exclude_by_token(calendar_date.service_id):
            return True
        return super().exclude_calendar_date(calendar_date)

    # Routes

    def get_agency_color(self) -> str:
        return self.config.agency_color

    def get_route_id(self, route) -> int:
        if route.route_short_name.isdigit():
            return int(route.route_short_name)  # use route short name as route ID
        return super().get_route_id(route)

    def get_route_long_name(self, route) -> str:
        return self.clean_route_long_name(route.route_long_name)

    def get_route_color(self, route) -> str:
        if route.route_color:
            return route.route_color
        rsn = int(route.route_short_name) if route.route_short_name.isdigit() else None
        color = self.config.route_colors.get(rsn)
        if color:
            return color
        if self.is_good_enough_accepted():
            logger.warning(f"No color for route {route.route_short_name}, using {self.config.fallback_route_color}")
            return self.config.fallback_route_color
        raise UnexpectedRouteColorError(route)

    # Trips

    def set_trip_headsign(self, route, trip) -> Optional[AgencyTrip]:
        route_id = self.get_route_id(route)
        self._route_short_names.setdefault(route_id, route.route_short_name)
        if route_id in self.config.route_trip_specs:
            return None  # split
        policy = self.config.direction_policies.get(route_id, DefaultClean())
        headsign = resolve_headsign(policy, trip.headsign, trip.direction_id, self.clean_trip_headsign)
        if headsign is None:
            headsign = self.clean_trip_headsign(trip.headsign)
        return AgencyTrip(route_id, headsign, trip.direction_id or 0)

    def split_trip(self, route, trip, stop_codes: List[str]) -> AgencyTrip:
        route_id = self.get_route_id(route)
        route_trip_spec = self.config.route_trip_specs.get(route_id)
        if route_trip_spec is None:
            return super().split_trip(route, trip, stop_codes)
        direction = route_trip_spec.direction_for(stop_codes, trip.direction_id)
        return AgencyTrip(route_id, route_trip_spec.headsign(direction), direction)

    def _route_short_name_number(self, route_id: int) -> int:
        short_name = self._route_short_names.get(route_id, '')
        return int(short_name) if short_name.isdigit() else route_id

    def merge_headsign(self, trip: AgencyTrip, trip_to_merge: AgencyTrip) -> str:
        merged = merge_empty(trip.headsign_value, trip_to_merge.headsign_value)
        if merged is not None:
            return merged
        headsign_values = {trip.headsign_value, trip_to_merge.headsign_value}
        rsn = self._route_short_name_number(trip.route_id)
        for rule in self.config.merge_rules.get(rsn, ()):
            if rule.accepts(headsign_values):
                return rule.merged
        if self.is_good_enough_accepted():
            return super().merge_headsign(trip, trip_to_merge)
        raise UnexpectedMergeError(trip, trip_to_merge)

    def compare_early(self, route_id: int, direction: int, stop, other_stop) -> int:
        route_trip_spec = self.config.route_trip_specs.get(route_id)
        if route_trip_spec is None or stop is None or other_stop is None:
            return super().compare_early(route_id, direction, stop, other_stop)
        return route_trip_spec.compare_early(direction, stop.stop_code, other_stop.stop_code)

    def stale_anchors(self, route_id: int, observed_stop_codes: Set[str]) -> List[str]:
        route_trip_spec = self.config.route_trip_specs.get(route_id)
        if route_trip_spec is None:
            return []
        return route_trip_spec.stale_anchors(observed_stop_codes)

    # Text

    def clean_route_long_name(self, route_long_name: str) -> str:
        return rdn_text.clean_route_long_name(route_long_name, self.config.preserved_acronyms)

    def clean_trip_headsign(self, trip_headsign: str) -> str:
        return rdn_text.clean_trip_headsign(trip_headsign, self.config.preserved_acronyms)

    def clean_stop_name(self, stop_name: str) -> str:
        return rdn_text.clean_stop_name(stop_name)

    # Stops

    def get_stop_id(self, stop) -> int:
        if stop.stop_code and stop.stop_code.isdigit():
            return int(stop.stop_code)  # use stop code as stop ID
        return super().get_stop_id(stop)
