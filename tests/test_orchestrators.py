import json
import os

import pytest
import rdn_agency_tools
from conftest import ROUTES_TXT


def read_json(directory, filename):
    with open(os.path.join(directory, filename), 'r', encoding='utf-8') as f:
        return json.load(f)


@pytest.fixture
def generated(rdn_tools, feed_dir, tmp_path):
    out = tmp_path / "out"
    result = rdn_tools.start([str(feed_dir), str(out), "rdn_"])
    return result, str(out)


def test_start_returns_statistics(generated):
    result, _ = generated
    assert result == {
        'excluded_all': False,
        'routes': 4,
        'trips': 6,
        'stops': 9,
        'excluded_trips': 2,
        'service_ids': ["WKDY"],
    }


def test_routes_output(generated):
    _, out = generated
    routes = {r['id']: r for r in read_json(out, "rdn_routes.json")}
    assert sorted(routes) == [7, 11, 40, 99]
    assert routes[7]['long_name'] == "Cinnabar / Cedar"
    assert routes[99]['long_name'] == "Intercity"
    assert {route_id: r['color'] for route_id, r in routes.items()} == {
        7: "809699", 11: "809699", 40: "009FC2", 99: "ABCDEF",
    }
    assert all(r['route_type'] == 3 for r in routes.values())


def test_trips_output(generated):
    _, out = generated
    trips = {(t['route_id'], t['headsign_id']): t for t in read_json(out, "rdn_trips.json")}
    assert {key: t['headsign_value'] for key, t in trips.items()} == {
        (7, 0): "Cinnabar & Cedar",
        (7, 1): "Prideaux Exch",
        (11, 0): "West",
        (11, 1): "Woodgrove",
        (40, 0): "Woodgrove",
        (99, 0): "Qualicum Beach",
    }
    assert trips[(7, 0)]['trip_ids'] == ["T7A", "T7B"]
    assert trips[(7, 0)]['stop_ids'] == [110522, 110101, 110100]
    # The last stop of T11B is flagged "Not in service"
    assert trips[(11, 1)]['stop_ids'] == [110226, 109829, 109922]
    assert trips[(11, 0)]['stop_ids'] == [109925, 110220, 110226]


def test_stops_output(generated):
    _, out = generated
    stops = {s['id']: s for s in read_json(out, "rdn_stops.json")}
    assert len(stops) == 9
    assert stops[110100]['name'] == "Albert / Pine"
    assert stops[110522]['name'] == "Prideaux Street Exch Bay B"
    assert stops[104141]['name'] == "Island Highway W / 2711 Blk"
    assert stops[110220]['name'] == "Hammond Bay / Lagoon"
    assert stops[109925]['code'] == "109925"


def test_calendars_and_summary_output(generated):
    _, out = generated
    calendars = read_json(out, "rdn_calendars.json")
    assert [c['service_id'] for c in calendars['calendar']] == ["WKDY"]
    assert [cd['service_id'] for cd in calendars['calendar_dates']] == ["WKDY"]
    with open(os.path.join(out, "rdn_summary.html"), 'r', encoding='utf-8') as f:
        html = f.read()
    assert "RDN Transit System bus" in html
    assert "Cinnabar &amp; Cedar" in html


def test_excluding_all_writes_nothing(rdn_tools, feed_dir, tmp_path):
    with open(feed_dir / 'trips.txt', 'w', encoding='utf-8') as f:
        f.write("route_id,service_id,trip_id,trip_headsign,direction_id\n"
                "7-NAN,WKDY,T7A,Not In Service,0\n")
    out = tmp_path / "out"

    result = rdn_tools.start([str(feed_dir), str(out)])

    assert result == {'excluded_all': True, 'routes': 0, 'trips': 0, 'stops': 0}
    assert not os.path.exists(out / "routes.json")


def test_cli_stops_on_unknown_route_color(feed_dir, tmp_path, monkeypatch):
    monkeypatch.delenv('RDN_GOOD_ENOUGH', raising=False)
    with open(feed_dir / 'routes.txt', 'w', encoding='utf-8') as f:
        f.write(ROUTES_TXT.replace("7-NAN,1,7,", "7-NAN,1,77,"))

    with pytest.raises(SystemExit) as excinfo:
        rdn_agency_tools.main([str(feed_dir), str(tmp_path / "out")])
    assert excinfo.value.code == 1


def test_cli_good_enough_uses_fallback_color(feed_dir, tmp_path, monkeypatch):
    monkeypatch.delenv('RDN_GOOD_ENOUGH', raising=False)
    with open(feed_dir / 'routes.txt', 'w', encoding='utf-8') as f:
        f.write(ROUTES_TXT.replace("7-NAN,1,7,", "7-NAN,1,77,"))
    out = tmp_path / "out"

    rdn_agency_tools.main([str(feed_dir), str(out), "--good-enough"])

    routes = {r['id']: r for r in read_json(str(out), "routes.json")}
    assert routes[77]['color'] == "002C77"
