import pytest

from rdn_transit.agency.rdn import RdnTransitAgencyTools
from rdn_transit.agency.rdn_config import build_rdn_config


def write_file(path, content):
    with open(path, 'w', encoding='utf-8') as f:
        f.write(content)


ROUTES_TXT = (
    "route_id,agency_id,route_short_name,route_long_name,route_type,route_color\n"
    "7-NAN,1,7,CINNABAR / CEDAR,3,\n"
    "40-NAN,1,40,VIU Express,3,\n"
    "11-NAN,1,11,Lantzville,3,\n"
    "99-NAN,1,99,- Intercity,3,ABCDEF\n"
    "70-CVX,2,70,Comox Valley,3,\n"
)

TRIPS_TXT = (
    "route_id,service_id,trip_id,trip_headsign,direction_id\n"
    "7-NAN,WKDY,T7A,7 Cinnibar via Cedar,0\n"
    "7-NAN,WKDY,T7B,Downtown,0\n"
    "7-NAN,WKDY,T7C,Prideaux Exchange,1\n"
    "40-NAN,WKDY,T40A,EXCHANGE to WOODGROVE via HWY,0\n"
    "40-NAN,SAT,T40B,Not In Service,1\n"
    "11-NAN,WKDY,T11A,11 Lantzville,0\n"
    "11-NAN,WKDY,T11B,11 Woodgrove,1\n"
    "99-NAN,WKDY,T99A,Qualicum Beach,0\n"
    "70-CVX,CVX,T70A,Courtenay,0\n"
)

STOPS_TXT = (
    "stop_id,stop_code,stop_name,stop_lat,stop_lon\n"
    "S1,110522,Prideaux Street Exchange Bay B,49.16,-123.94\n"
    "S2,110100,Eastbound Albert at Pine,49.17,-123.95\n"
    "S3,110101,Westbound Pine at Albert,49.17,-123.96\n"
    "S4,109925,Woodgrove Centre Exchange Bay D,49.23,-124.05\n"
    "S5,110220,Northbound Hammond Bay at Lagoon,49.24,-124.03\n"
    "S6,110226,Eastwind at Northwind,49.25,-124.02\n"
    "S7,109829,Dover at Applecross,49.22,-124.03\n"
    "S8,109922,Hammond Bay at Uplands,49.21,-124.00\n"
    "S9,104141,Westbound Island Hwy W at 2711 Blk,49.32,-124.31\n"
)

STOP_TIMES_TXT = (
    "trip_id,arrival_time,departure_time,stop_id,stop_sequence,stop_headsign\n"
    "T7A,08:00:00,08:00:00,S1,1,\n"
    "T7A,08:05:00,08:05:00,S2,2,\n"
    "T7B,09:00:00,09:00:00,S1,1,\n"
    "T7B,09:03:00,09:03:00,S3,2,\n"
    "T7B,09:06:00,09:06:00,S2,3,\n"
    "T7C,10:00:00,10:00:00,S2,1,\n"
    "T7C,10:05:00,10:05:00,S1,2,\n"
    "T40A,08:00:00,08:00:00,S1,1,\n"
    "T40A,08:20:00,08:20:00,S4,2,\n"
    "T40B,08:00:00,08:00:00,S4,1,\n"
    "T11A,07:00:00,07:00:00,S4,1,\n"
    "T11A,07:05:00,07:05:00,S5,2,\n"
    "T11A,07:10:00,07:10:00,S6,3,\n"
    "T11B,07:30:00,07:30:00,S6,1,\n"
    "T11B,07:35:00,07:35:00,S7,2,\n"
    "T11B,07:40:00,07:40:00,S8,3,\n"
    "T11B,07:45:00,07:45:00,S4,4,Not in service\n"
    "T99A,06:00:00,06:00:00,S4,1,\n"
    "T99A,07:00:00,07:00:00,S9,2,\n"
)

CALENDAR_TXT = (
    "service_id,monday,tuesday,wednesday,thursday,friday,saturday,sunday,start_date,end_date\n"
    "WKDY,1,1,1,1,1,0,0,20250901,20251231\n"
    "SAT,0,0,0,0,0,1,0,20250901,20251231\n"
    "CVX,1,1,1,1,1,1,1,20250901,20251231\n"
)

CALENDAR_DATES_TXT = (
    "service_id,date,exception_type\n"
    "WKDY,20251225,2\n"
    "CVX,20251226,1\n"
)


@pytest.fixture
def feed_dir(tmp_path):
    """A small RDN-like feed with one foreign agency route."""
    directory = tmp_path / "feed"
    directory.mkdir()
    write_file(directory / 'routes.txt', ROUTES_TXT)
    write_file(directory / 'trips.txt', TRIPS_TXT)
    write_file(directory / 'stops.txt', STOPS_TXT)
    write_file(directory / 'stop_times.txt', STOP_TIMES_TXT)
    write_file(directory / 'calendar.txt', CALENDAR_TXT)
    write_file(directory / 'calendar_dates.txt', CALENDAR_DATES_TXT)
    return directory


@pytest.fixture
def rdn_tools():
    return RdnTransitAgencyTools(build_rdn_config())


@pytest.fixture
def relaxed_rdn_tools():
    return RdnTransitAgencyTools(build_rdn_config(good_enough_accepted=True))
