"""
Per-route headsign policies and merge rules.

A route's policy decides which label a trip gets for its direction:

- ``StaticLabel``: a literal label per direction flag.
- ``CompassDirection``: a compass word, read from a "...bound" prefix in the
  feed headsign when there is one, else taken from the direction flag.
- ``DefaultClean``: the feed headsign run through the agency's cleaner.
"""
import re
from dataclasses import dataclass
from typing import Callable, FrozenSet, Iterable, Mapping, Optional, Tuple, Union

re_compass_bound = re.compile(r'^\s*(east|west|north|south)(bound|boudn)\b', re.IGNORECASE)


@dataclass(frozen=True)
class StaticLabel:
    labels: Mapping[int, str]


@dataclass(frozen=True)
class CompassDirection:
    headings: Tuple[str, str]


@dataclass(frozen=True)
class DefaultClean:
    pass


DirectionPolicy = Union[StaticLabel, CompassDirection, DefaultClean]


@dataclass(frozen=True)
class MergeRule:
    """Two labels that are both in ``labels`` are shown as ``merged``."""
    labels: FrozenSet[str]
    merged: str

    @classmethod
    def of(cls, labels: Iterable[str], merged: str) -> "MergeRule":
        return cls(frozenset(labels), merged)

    def accepts(self, headsign_values: Iterable[str]) -> bool:
        return self.labels.issuperset(headsign_values)


def resolve_headsign(policy: DirectionPolicy, headsign: str, direction_id: Optional[int],
                     clean: Callable[[str], str]) -> Optional[str]:
    """
    Label for a trip under ``policy``.

    Returns None when a static policy has no label for the direction, so the
    caller can fall back to the cleaned feed headsign.
    """
    if isinstance(policy, StaticLabel):
        return policy.labels.get(direction_id)
    if isinstance(policy, CompassDirection):
        match = re_compass_bound.match(headsign or '')
        if match:
            return match.group(1).capitalize()
        if direction_id in (0, 1):
            return policy.headings[direction_id]
        return None
    return clean(headsign or '')
