"""
Functions for handling GTFS trip data.
"""
import os
import csv
from typing import List, Optional
from rdn_transit.logger import get_logger

logger = get_logger("trips")


class Trip:
    """
    Class representing a trip in the GTFS data.
    """
    def __init__(self, route_id: str, service_id: str, trip_id: str, headsign: str, direction_id: Optional[int]):
        self.route_id = route_id
        self.service_id = service_id
        self.trip_id = trip_id
        self.headsign = headsign
        self.direction_id = direction_id

    def __str__(self):
        return f"Trip({self.route_id=}, {self.service_id=}, {self.trip_id=}, {self.headsign=}, {self.direction_id=})"


class AgencyTrip:
    """
    One direction of a route as shown to riders, after headsign assignment.

    ``headsign_id`` is the direction (0 or 1) the label belongs to.
    """
    def __init__(self, route_id: int, headsign_value: str, headsign_id: int):
        self.route_id = route_id
        self.headsign_value = headsign_value
        self.headsign_id = headsign_id
        self.trip_ids: List[str] = []
        self.stop_ids: List[int] = []

    def set_headsign_string(self, headsign_value: str, headsign_id: int):
        self.headsign_value = headsign_value
        self.headsign_id = headsign_id

    def to_dict(self) -> dict:
        return {
            'route_id': self.route_id,
            'headsign_value': self.headsign_value,
            'headsign_id': self.headsign_id,
            'trip_ids': self.trip_ids,
            'stop_ids': self.stop_ids,
        }

    def __str__(self):
        return f"AgencyTrip({self.route_id=}, {self.headsign_value=}, {self.headsign_id=})"


def load_trips(feed_dir: str) -> List[Trip]:
    """
    Load all trips from 'trips.txt'.

    Returns:
        List[Trip]: Trips in file order. An empty direction_id is loaded as None.
    """
    trips: List[Trip] = []

    try:
        with open(os.path.join(feed_dir, 'trips.txt'), 'r', encoding='utf-8-sig', newline='') as trips_file:
            reader = csv.DictReader(trips_file)
            required_columns = ['route_id', 'service_id', 'trip_id']
            missing_columns = [col for col in required_columns if col not in (reader.fieldnames or [])]
            if missing_columns:
                logger.error(f"Required columns not found in header: {missing_columns}")
                return trips

            for row_num, row in enumerate(reader, start=2):
                direction_value = (row.get('direction_id') or '').strip()
                try:
                    direction_id = int(direction_value) if direction_value else None
                except ValueError:
                    logger.warning(f"Skipping trips.txt line {row_num} with invalid direction_id: {direction_value}")
                    continue

                trips.append(Trip(
                    route_id=row['route_id'],
                    service_id=row['service_id'],
                    trip_id=row['trip_id'],
                    headsign=row.get('trip_headsign') or '',
                    direction_id=direction_id,
                ))
    except FileNotFoundError:
        logger.warning("trips.txt file not found.")

    return trips
