"""
Errors raised when the curated agency tables no longer match the live feed.

These are never handled inside the package: they travel up to the CLI entry
point, which logs them and stops the run.
"""


class AgencyToolsError(Exception):
    """Base class for configuration gaps detected while transforming a feed."""


class UnexpectedRouteColorError(AgencyToolsError):
    def __init__(self, route):
        self.route = route
        super().__init__(f"Unexpected route color for {route}!")


class UnexpectedMergeError(AgencyToolsError):
    def __init__(self, trip, trip_to_merge):
        self.trip = trip
        self.trip_to_merge = trip_to_merge
        super().__init__(f"Unexpected trips to merge {trip} & {trip_to_merge}!")
