from dataclasses import replace
from itertools import combinations, permutations

import pytest
from rdn_transit.agency.headsign_policy import (CompassDirection, DefaultClean, MergeRule, StaticLabel,
                                                resolve_headsign)
from rdn_transit.agency.rdn import RdnTransitAgencyTools
from rdn_transit.agency.rdn_config import MERGE_RULES, build_rdn_config
from rdn_transit.errors import UnexpectedMergeError
from rdn_transit.routes import Route
from rdn_transit.trips import AgencyTrip, Trip


def make_route(rsn):
    return Route(f"{rsn}-NAN", "1", str(rsn), "", "")


def test_static_label_policy():
    policy = StaticLabel({0: "Woodgrove", 1: "Downtown"})
    assert resolve_headsign(policy, "anything", 0, str.upper) == "Woodgrove"
    assert resolve_headsign(policy, "anything", 1, str.upper) == "Downtown"
    assert resolve_headsign(policy, "anything", None, str.upper) is None


def test_compass_direction_policy():
    policy = CompassDirection(("North", "South"))
    assert resolve_headsign(policy, "Southbound to Cedar", 0, str.upper) == "South"
    assert resolve_headsign(policy, "EASTBOUDN Exchange", 1, str.upper) == "East"
    assert resolve_headsign(policy, "Cedar", 1, str.upper) == "South"
    assert resolve_headsign(policy, "Cedar", None, str.upper) is None


def test_default_clean_policy():
    assert resolve_headsign(DefaultClean(), "downtown", 0, str.upper) == "DOWNTOWN"
    assert resolve_headsign(DefaultClean(), None, 0, str.upper) == ""


def test_merge_rule_accepts_subsets_only():
    rule = MergeRule.of(["Downtown", "Cinnabar", "Cinnabar & Cedar"], "Cinnabar & Cedar")
    assert rule.accepts({"Downtown", "Cinnabar"})
    assert rule.accepts({"Cinnabar & Cedar", "Cinnabar"})
    assert not rule.accepts({"Downtown", "Woodgrove"})


def test_set_trip_headsign_default_clean(rdn_tools):
    agency_trip = rdn_tools.set_trip_headsign(make_route(40), Trip("40-NAN", "WKDY", "T1", "EXCHANGE to WOODGROVE via HWY", 0))
    assert (agency_trip.route_id, agency_trip.headsign_value, agency_trip.headsign_id) == (40, "Woodgrove", 0)


def tools_with_policies(direction_policies):
    return RdnTransitAgencyTools(replace(build_rdn_config(), direction_policies=direction_policies))


def test_current_routes_use_cleaned_feed_headsign(rdn_tools):
    trip = rdn_tools.set_trip_headsign(make_route(50), Trip("50-NAN", "WKDY", "T1", "50 Dover Bay", 0))
    assert trip.headsign_value == "Dover Bay"


def test_set_trip_headsign_static_and_compass_policies():
    tools = tools_with_policies({
        50: StaticLabel({0: "Woodgrove", 1: "Downtown"}),
        90: CompassDirection(("North", "South")),
    })
    trip = tools.set_trip_headsign(make_route(50), Trip("50-NAN", "WKDY", "T1", "50 Dover", 1))
    assert trip.headsign_value == "Downtown"
    trip = tools.set_trip_headsign(make_route(90), Trip("90-NAN", "WKDY", "T2", "Northbound Island Hwy", 1))
    assert trip.headsign_value == "North"
    trip = tools.set_trip_headsign(make_route(90), Trip("90-NAN", "WKDY", "T3", "Parksville", 1))
    assert trip.headsign_value == "South"


def test_static_label_without_direction_falls_back_to_cleaned_headsign():
    tools = tools_with_policies({50: StaticLabel({0: "Woodgrove", 1: "Downtown"})})
    trip = tools.set_trip_headsign(make_route(50), Trip("50-NAN", "WKDY", "T1", "50 WOODGROVE", None))
    assert trip.headsign_value == "Woodgrove"
    assert trip.headsign_id == 0


@pytest.mark.parametrize("rsn", [11, 25, 88, 97, 98])
def test_split_routes_defer_to_split_trip(rdn_tools, rsn):
    assert rdn_tools.set_trip_headsign(make_route(rsn), Trip(f"{rsn}-NAN", "WKDY", "T1", "Anything", 0)) is None


def test_split_trip_uses_anchors(rdn_tools):
    route = make_route(11)
    trip = Trip("11-NAN", "WKDY", "T1", "11 Woodgrove", None)
    agency_trip = rdn_tools.split_trip(route, trip, ["110226", "109829", "109922", "109925"])
    assert (agency_trip.headsign_value, agency_trip.headsign_id) == ("Woodgrove", 1)
    agency_trip = rdn_tools.split_trip(route, trip, ["109925", "110220", "110226"])
    assert (agency_trip.headsign_value, agency_trip.headsign_id) == ("West", 0)


def test_merge_headsign_with_rule(rdn_tools):
    rdn_tools.set_trip_headsign(make_route(7), Trip("7-NAN", "WKDY", "T1", "Downtown", 0))
    merged = rdn_tools.merge_headsign(AgencyTrip(7, "Downtown", 0), AgencyTrip(7, "Cinnabar", 0))
    assert merged == "Cinnabar & Cedar"


def test_merge_headsign_with_empty_label(rdn_tools):
    assert rdn_tools.merge_headsign(AgencyTrip(7, "", 0), AgencyTrip(7, "Cinnabar", 0)) == "Cinnabar"
    assert rdn_tools.merge_headsign(AgencyTrip(7, "Cinnabar", 0), AgencyTrip(7, "", 0)) == "Cinnabar"


def test_unmapped_merge_raises(rdn_tools):
    with pytest.raises(UnexpectedMergeError) as excinfo:
        rdn_tools.merge_headsign(AgencyTrip(7, "Downtown", 0), AgencyTrip(7, "Woodgrove", 0))
    assert "Unexpected trips to merge" in str(excinfo.value)


def test_unmapped_merge_good_enough(relaxed_rdn_tools):
    assert relaxed_rdn_tools.merge_headsign(AgencyTrip(7, "Downtown", 0), AgencyTrip(7, "Woodgrove", 0)) == "Downtown / Woodgrove"
    assert relaxed_rdn_tools.merge_headsign(AgencyTrip(7, "Woodgrove Centre", 0), AgencyTrip(7, "Woodgrove", 0)) == "Woodgrove Centre"


def test_merge_rules_for_route_20(rdn_tools):
    assert rdn_tools.merge_headsign(AgencyTrip(20, "Country Club", 1), AgencyTrip(20, "Downtown", 1)) == "Downtown"
    assert rdn_tools.merge_headsign(AgencyTrip(20, "Woodgrove", 0), AgencyTrip(20, "Country Club", 0)) == "Woodgrove"
    assert rdn_tools.merge_headsign(AgencyTrip(20, "Downtown", 0), AgencyTrip(20, "Woodgrove", 0)) == "Woodgrove"


def test_route_20_three_labels_in_one_direction(rdn_tools):
    merged = rdn_tools.merge_headsign(AgencyTrip(20, "Country Club", 0), AgencyTrip(20, "Downtown", 0))
    assert rdn_tools.merge_headsign(AgencyTrip(20, merged, 0), AgencyTrip(20, "Woodgrove", 0)) == "Woodgrove"


@pytest.mark.parametrize("rsn", sorted(MERGE_RULES))
def test_each_label_pair_is_decided_by_first_matching_rule(rdn_tools, rsn):
    rules = MERGE_RULES[rsn]
    for rule in rules:
        for first, second in combinations(sorted(rule.labels), 2):
            expected = next(other.merged for other in rules if other.accepts({first, second}))
            assert rdn_tools.merge_headsign(AgencyTrip(rsn, first, 0), AgencyTrip(rsn, second, 0)) == expected


@pytest.mark.parametrize("rsn", sorted(MERGE_RULES))
def test_merging_a_rule_labels_in_any_order_never_fails(rdn_tools, rsn):
    merged_labels = {rule.merged for rule in MERGE_RULES[rsn]}
    for rule in MERGE_RULES[rsn]:
        for labels in permutations(sorted(rule.labels)):
            current = labels[0]
            for label in labels[1:]:
                if label != current:
                    current = rdn_tools.merge_headsign(AgencyTrip(rsn, current, 0), AgencyTrip(rsn, label, 0))
            assert current in merged_labels
