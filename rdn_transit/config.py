"""
Configuration settings for the agency tools.
"""
import os
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import FrozenSet, Mapping, Optional, Tuple

from rdn_transit.agency.headsign_policy import DirectionPolicy, MergeRule
from rdn_transit.direction_split import RouteTripSpec

# Defaults used when start() receives no arguments.
DEFAULT_INPUT = os.path.join('input', 'gtfs.zip')
DEFAULT_OUTPUT_DIR = os.path.join('output', '')
DEFAULT_FILES_PREFIX = ''

GOOD_ENOUGH_ENV = 'RDN_GOOD_ENOUGH'


def good_enough_from_env() -> bool:
    return os.environ.get(GOOD_ENOUGH_ENV, '').strip().lower() in ('1', 'true', 'yes')


@dataclass(frozen=True)
class AgencyConfig:
    """
    Curated tables for one agency. Built once at start-up and never mutated.

    ``good_enough_accepted`` is the relaxed mode: unknown route colors fall
    back to ``fallback_route_color`` and unmapped headsign merges use the
    default merge instead of stopping the run.
    """
    agency_id: str
    agency_color: str
    fallback_route_color: str
    route_colors: Mapping[int, str]
    direction_policies: Mapping[int, DirectionPolicy]
    merge_rules: Mapping[int, Tuple[MergeRule, ...]]
    route_trip_specs: Mapping[int, RouteTripSpec]
    preserved_acronyms: FrozenSet[str] = field(default_factory=frozenset)
    service_id_token: Optional[str] = None
    good_enough_accepted: bool = False

    def __post_init__(self):
        for name in ('route_colors', 'direction_policies', 'merge_rules', 'route_trip_specs'):
            value = getattr(self, name)
            if not isinstance(value, MappingProxyType):
                object.__setattr__(self, name, MappingProxyType(dict(value)))
        object.__setattr__(self, 'preserved_acronyms', frozenset(self.preserved_acronyms))

    def with_good_enough(self, accepted: bool) -> "AgencyConfig":
        return replace(self, good_enough_accepted=accepted)
