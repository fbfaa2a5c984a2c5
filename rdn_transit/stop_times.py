"""
Functions for handling GTFS stop_times data.
"""
import csv
import os
from typing import Dict, List
from rdn_transit.logger import get_logger

logger = get_logger("stop_times")


class StopTime:
    """
    Class representing a stop time entry in the GTFS data.
    """
    def __init__(self, trip_id: str, stop_id: str, stop_sequence: int, stop_headsign: str = ''):
        self.trip_id = trip_id
        self.stop_id = stop_id
        self.stop_sequence = stop_sequence
        self.stop_headsign = stop_headsign

    def __str__(self):
        return f"StopTime({self.trip_id=}, {self.stop_id=}, {self.stop_sequence=}, {self.stop_headsign=})"


def get_stops_for_trips(feed_dir: str) -> Dict[str, List[StopTime]]:
    """
    Load 'stop_times.txt' grouped by trip.

    Returns:
        Dict[str, List[StopTime]]: Trip ID to its stop times, ordered by stop_sequence.
    """
    stops: Dict[str, List[StopTime]] = {}

    try:
        with open(os.path.join(feed_dir, 'stop_times.txt'), 'r', encoding="utf-8-sig", newline='') as stop_times_file:
            reader = csv.DictReader(stop_times_file)

            required_columns = ['trip_id', 'stop_id', 'stop_sequence']
            missing_columns = [col for col in required_columns if col not in (reader.fieldnames or [])]
            if missing_columns:
                logger.error(f"Required columns not found in header: {missing_columns}")
                return stops

            for row in reader:
                trip_id = row['trip_id']
                try:
                    stop_time = StopTime(
                        trip_id=trip_id,
                        stop_id=row['stop_id'],
                        stop_sequence=int(row['stop_sequence']),
                        stop_headsign=row.get('stop_headsign') or '',
                    )
                except ValueError as e:
                    logger.warning(f"Error parsing stop_sequence for trip {trip_id}: {e}")
                    continue
                stops.setdefault(trip_id, []).append(stop_time)

        for trip_id in stops:
            stops[trip_id].sort(key=lambda st: st.stop_sequence)
    except FileNotFoundError:
        logger.warning("stop_times.txt file not found.")
    return stops
