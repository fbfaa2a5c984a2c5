"""
Curated tables for RDN Transit System (Nanaimo, BC Transit).

https://bctransit.com/*/footer/open-data
"""
from rdn_transit.agency.headsign_policy import MergeRule
from rdn_transit.config import AgencyConfig
from rdn_transit.direction_split import RouteTripSpec

INCLUDE_AGENCY_ID = "1"  # RDN Transit System only

AGENCY_COLOR_GREEN = "34B233"  # GREEN (from PDF Corporate Graphic Standards)
AGENCY_COLOR_BLUE = "002C77"  # BLUE (from PDF Corporate Graphic Standards)
AGENCY_COLOR = AGENCY_COLOR_GREEN

ROUTE_COLOR_LOCAL = "809699"
ROUTE_COLOR_FREQUENT = "009FC2"

AND = " & "
CINNABAR = "Cinnabar"
CEDAR = "Cedar"
CINNABAR_CEDAR = CINNABAR + AND + CEDAR
COUNTRY_CLUB = "Country Club"
DOWNTOWN = "Downtown"
VI_UNIVERSITY_SHORT = "VIU"
WOODGROVE = "Woodgrove"
WESTWOOD = "Westwood"
BC_FERRIES = "BC Ferries"
LANTZVILLE = "Lantzville"
RAVENSONG = "Ravensong"

ROUTE_COLORS = {
    1: ROUTE_COLOR_LOCAL,
    5: ROUTE_COLOR_LOCAL,
    6: ROUTE_COLOR_LOCAL,
    7: ROUTE_COLOR_LOCAL,
    11: ROUTE_COLOR_LOCAL,
    15: ROUTE_COLOR_LOCAL,
    20: ROUTE_COLOR_LOCAL,
    25: ROUTE_COLOR_LOCAL,
    30: ROUTE_COLOR_LOCAL,
    40: ROUTE_COLOR_FREQUENT,
    50: ROUTE_COLOR_LOCAL,
    88: "B3AA7E",  # LIGHT BROWN
    90: "4F6F19",  # DARK GREEN
    91: ROUTE_COLOR_LOCAL,
    92: ROUTE_COLOR_LOCAL,
    97: ROUTE_COLOR_LOCAL,
    98: ROUTE_COLOR_LOCAL,
    99: AGENCY_COLOR_GREEN,  # LIGHT GREEN
}

# Routes whose direction labels do not come from the cleaned feed headsign.
# Empty in the current feed: every route is labelled by DefaultClean.
DIRECTION_POLICIES = {}

# Checked in order; the first rule holding both labels wins.
MERGE_RULES = {
    5: (
        MergeRule.of([WESTWOOD, DOWNTOWN], DOWNTOWN),
    ),
    6: (
        MergeRule.of([COUNTRY_CLUB, DOWNTOWN], DOWNTOWN),
    ),
    7: (
        MergeRule.of([DOWNTOWN, CINNABAR, CINNABAR_CEDAR], CINNABAR_CEDAR),
    ),
    11: (
        MergeRule.of([BC_FERRIES, LANTZVILLE], LANTZVILLE),
    ),
    15: (
        MergeRule.of(["A " + VI_UNIVERSITY_SHORT, VI_UNIVERSITY_SHORT + " Only", VI_UNIVERSITY_SHORT + "-",
                      VI_UNIVERSITY_SHORT], VI_UNIVERSITY_SHORT),
        MergeRule.of(["A " + WOODGROVE, WOODGROVE], WOODGROVE),
    ),
    20: (
        MergeRule.of([COUNTRY_CLUB, DOWNTOWN], DOWNTOWN),
        MergeRule.of([DOWNTOWN, COUNTRY_CLUB, WOODGROVE], WOODGROVE),
    ),
    25: (
        MergeRule.of([WOODGROVE, BC_FERRIES], BC_FERRIES),
    ),
    40: (
        MergeRule.of(["School Special", WOODGROVE], WOODGROVE),
        MergeRule.of([VI_UNIVERSITY_SHORT + " Only", DOWNTOWN], DOWNTOWN),
    ),
    91: (
        MergeRule.of([BC_FERRIES, WOODGROVE], WOODGROVE),
    ),
    99: (
        MergeRule.of(["Duke Pt", "Qualicum Beach"], "Qualicum Beach"),
    ),
}

# Anchors are stop codes.
ROUTE_TRIP_SPECS = {
    11: RouteTripSpec(
        11, ("West", WOODGROVE),
        (
            (
                "109925",  # Woodgrove Centre Exchange Bay D
                "110220",
                "110226",  # Eastwind at Northwind
            ),
            (
                "110226",  # Eastwind at Northwind
                "109829",  # Dover at Applecross
                "109830",  # Uplands at McRobb
                "109831",  # Nanaimo Seniors Village
                "109929",  # Dover at Uplands
                "109921",  # Dover Bay High School
                "109922",  # Hammond Bay at Uplands
                "109925",  # Woodgrove Centre Exchange Bay D
            ),
        ),
    ),
    25: RouteTripSpec(
        25, (WOODGROVE, BC_FERRIES),
        (
            (
                "109880",  # Departure Bay Ferry
                "109964",  # Stewart at Maple
                "109872",  # Front at Gabriola Ferry Term
                "109873",  # Front at Esplanade
                "109874",  # Victoria at Albert
                "109875",  # Fitzwilliam at Wesley
                "110063",  # Fitzwilliam at MacHleary
                "110519",  # VIU Exchange Bay B
                "110005",  # Metral 6300 block
                "109881",  # Brechin at Beach
                "110215",  # Norwell at Victoria
                "110006",  # Metral at Enterprise
                "109925",  # Woodgrove Centre Exchange Bay D
            ),
            (
                "109925",  # Woodgrove Centre Exchange Bay D
                "110516",  # Country Club Exchange Bay A
                "109880",  # Departure Bay Ferry
            ),
        ),
    ),
    88: RouteTripSpec(
        88, ("Parksville", "Wembley Mall"),
        (
            (
                "110299",  # Jensen Ave E at Craig
                "110441",  # Pym St N at Jenkins
                "104168",  # Wembley Mall at Wembley Rd
            ),
            (
                "104168",  # Wembley Mall at Wembley Rd
                "110280",  # Finholm St S at Morison
                "110299",  # Jensen Ave E at Craig
            ),
        ),
    ),
    97: RouteTripSpec(
        97, (RAVENSONG, "East"),
        (
            (
                "110376",  # Eastbound Sunrise at Drew
                "104080",  # Westbound Pintail at Eaglecrest Dr
                "104113",  # Southbound Eaglecrest farside Mallard
                "104122",
                "110358",  # Southbound Jones at Fern Rd W
            ),
            (
                "110358",  # Southbound Jones at Fern Rd W
                "104060",
                "104061",
                "110376",  # Eastbound Sunrise at Drew
            ),
        ),
    ),
    98: RouteTripSpec(
        98, (RAVENSONG, "Island Hwy W"),
        (
            (
                "104141",  # Westbound Island Hwy W at 2711 Blk
                "104146",  # Westbound Island Hwy W ACR Beach Dr
                "104147",  # Southbound Garrett at Parkridge
                "104138",  # Southbound Garrett at Garrett Turn-About
                "104149",  # Eastbound Canyon at 727
                "110358",  # Southbound Jones at Fern Rd W
            ),
            (
                "110358",  # Southbound Jones at Fern Rd W
                "104134",
                "104140",  # Eastbound Crescent Rd W at Memorial
                "104141",  # Westbound Island Hwy W at 2711 Blk
            ),
        ),
    ),
}

PRESERVED_ACRONYMS = frozenset({"VIU", "BC", "NRGH", "RDN", "NE", "NW", "SE", "SW"})


def build_rdn_config(good_enough_accepted: bool = False) -> AgencyConfig:
    return AgencyConfig(
        agency_id=INCLUDE_AGENCY_ID,
        agency_color=AGENCY_COLOR,
        fallback_route_color=AGENCY_COLOR_BLUE,
        route_colors=ROUTE_COLORS,
        direction_policies=DIRECTION_POLICIES,
        merge_rules=MERGE_RULES,
        route_trip_specs=ROUTE_TRIP_SPECS,
        preserved_acronyms=PRESERVED_ACRONYMS,
        good_enough_accepted=good_enough_accepted,
    )
