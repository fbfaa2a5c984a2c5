"""
Label cleaning for the RDN feed: route long names, trip headsigns and stop
names. Each function is an ordered list of regex rules; later rules expect
the earlier ones to have run.
"""
import re
from typing import Iterable

from rdn_transit import clean_utils

EXCHANGE_SHORT = "Exch"
VI_UNIVERSITY_SHORT = "VIU"

re_exchange = re.compile(r'\bexchange\b', re.IGNORECASE)
re_vi_university = re.compile(r'\b(vi university|viu)\b', re.IGNORECASE)

# Feed typos
re_beach = re.compile(r'\bbch\b', re.IGNORECASE)
re_cinnabar = re.compile(r'\bcinnibar\b', re.IGNORECASE)
re_shuttle = re.compile(r'\bshutlle\b', re.IGNORECASE)

re_starts_with_dash = re.compile(r'^\s*(?:-\s+)+')
re_starts_with_number = re.compile(r'^(?:\d+(?: -)?\S*\s*)+')
re_ends_with_bay = re.compile(r'\s+bay [a-z]$', re.IGNORECASE)
re_starts_with_impl_or_bound = re.compile(
    r'^\s*(?:(?:\(-IMPL-\)|(?:east|west|north|south)(?:bound|boudn)\b)\s*)+', re.IGNORECASE)


def clean_route_long_name(route_long_name: str, preserved: Iterable[str] = ()) -> str:
    route_long_name = re_starts_with_dash.sub('', route_long_name)
    route_long_name = clean_utils.normalize_uppercase_words(route_long_name, preserved)
    route_long_name = clean_utils.clean_slashes(route_long_name)
    route_long_name = clean_utils.clean_numbers(route_long_name)
    route_long_name = clean_utils.clean_street_types(route_long_name)
    return clean_utils.clean_label(route_long_name)


def clean_trip_headsign(trip_headsign: str, preserved: Iterable[str] = ()) -> str:
    """
    Examples:
        "EXCHANGE to WOODGROVE via HWY" -> "Woodgrove"
        "Cinnibar and Cedar" -> "Cinnabar & Cedar"
        "40 Woodgrove Centre Exchange Bay D" -> "Woodgrove Centre Exch"
    """
    trip_headsign = clean_utils.normalize_uppercase_words(trip_headsign, preserved)
    trip_headsign = re_beach.sub("Beach", trip_headsign)
    trip_headsign = re_cinnabar.sub("Cinnabar", trip_headsign)
    trip_headsign = re_shuttle.sub("Shuttle", trip_headsign)
    trip_headsign = re_exchange.sub(EXCHANGE_SHORT, trip_headsign)
    trip_headsign = re_vi_university.sub(VI_UNIVERSITY_SHORT, trip_headsign)
    trip_headsign = clean_utils.keep_to_and_remove_via(trip_headsign)
    trip_headsign = re_ends_with_bay.sub('', trip_headsign.strip())
    trip_headsign = clean_utils.CLEAN_AND.sub(clean_utils.CLEAN_AND_REPLACEMENT, trip_headsign)
    trip_headsign = clean_utils.CLEAN_AT.sub(clean_utils.CLEAN_AT_REPLACEMENT, trip_headsign)
    trip_headsign = clean_utils.clean_parentheses(trip_headsign)
    trip_headsign = re_starts_with_number.sub('', trip_headsign.strip())
    trip_headsign = clean_utils.clean_street_types(trip_headsign)
    return clean_utils.clean_label(trip_headsign)


def clean_stop_name(stop_name: str) -> str:
    """
    Example:
        "Eastbound Exchange St at Albert" -> "Exch Street / Albert"
    """
    stop_name = re_starts_with_impl_or_bound.sub('', stop_name)
    stop_name = clean_utils.CLEAN_AT.sub(clean_utils.CLEAN_AT_REPLACEMENT, stop_name)
    stop_name = re_exchange.sub(EXCHANGE_SHORT, stop_name)
    stop_name = clean_utils.clean_street_types(stop_name)
    return clean_utils.clean_label(stop_name)
