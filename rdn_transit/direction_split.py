"""
Manual trip-direction overrides.

Some routes do not carry a usable direction in the feed (loops, routes whose
trips run through both terminals). For those, a hand-curated list of stop
codes per direction ("anchors") is used to decide which direction a trip
belongs to and in which order two stops of that direction come.
"""
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from rdn_transit.logger import get_logger

logger = get_logger("direction_split")


def _longest_common_subsequence(anchors: Sequence[str], stop_codes: Sequence[str]) -> int:
    previous = [0] * (len(stop_codes) + 1)
    for anchor in anchors:
        current = [0]
        for index, stop_code in enumerate(stop_codes):
            if anchor == stop_code:
                current.append(previous[index] + 1)
            else:
                current.append(max(current[index], previous[index + 1]))
        previous = current
    return previous[-1]


@dataclass(frozen=True)
class RouteTripSpec:
    """
    Expected stop path of a route, one ordered anchor list per direction.

    The two anchor lists may share stops: a loop terminal usually ends one
    list and starts the other.
    """
    route_id: int
    headsigns: Tuple[str, str]
    anchors: Tuple[Tuple[str, ...], Tuple[str, ...]]

    def headsign(self, direction: int) -> str:
        return self.headsigns[direction]

    def match_length(self, direction: int, stop_codes: Sequence[str]) -> int:
        """Number of anchors of ``direction`` visited in order by ``stop_codes``."""
        return _longest_common_subsequence(self.anchors[direction], stop_codes)

    def direction_for(self, stop_codes: Sequence[str], direction_flag: Optional[int] = None) -> int:
        """
        Pick the direction (0 or 1) whose anchors best match a trip's stops.

        Ties are broken with the feed direction flag when there is one;
        without a flag the tie goes to direction 0.
        """
        scores = [self.match_length(0, stop_codes), self.match_length(1, stop_codes)]
        if scores[0] != scores[1]:
            return 0 if scores[0] > scores[1] else 1
        if direction_flag in (0, 1):
            return direction_flag
        logger.warning(f"Route {self.route_id}: trip matches both directions equally ({scores[0]} anchors), using direction 0")
        return 0

    def compare_early(self, direction: int, stop_code: str, other_stop_code: str) -> int:
        """
        Compare two stops of one direction by anchor order.

        Returns -1 when ``stop_code`` comes first, 1 when it comes after and
        0 when either stop is not an anchor of that direction.
        """
        anchors = self.anchors[direction]
        if stop_code not in anchors or other_stop_code not in anchors:
            return 0
        index = anchors.index(stop_code)
        other_index = anchors.index(other_stop_code)
        if index < other_index:
            return -1
        if index > other_index:
            return 1
        return 0

    def stale_anchors(self, observed_stop_codes: Iterable[str]) -> List[str]:
        """Anchors that no trip of the route visits, in anchor order."""
        observed = set(observed_stop_codes)
        stale: List[str] = []
        for anchor_list in self.anchors:
            for anchor in anchor_list:
                if anchor not in observed and anchor not in stale:
                    stale.append(anchor)
        return stale
