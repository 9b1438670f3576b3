"""Exception types raised by the NPB data library.

Parse-level irregularities never raise: malformed rows are skipped and
missing fields default to "". Only caller errors and failed fetches surface.
"""

from __future__ import annotations


class NPBDataError(Exception):
    """Base class for all npb_data errors."""


class UnknownTeamError(NPBDataError):
    """Team code is not in the registry. Raised before any network access."""

    def __init__(self, team_code: str):
        self.team_code = team_code
        super().__init__(f"Unknown team code: {team_code}")


class FetchError(NPBDataError):
    """HTTP request to the source site did not succeed.

    Attributes:
        url: Requested URL
        status_code: HTTP status of the response, or None when the request
            failed at the transport level (DNS, connection reset, timeout)
    """

    def __init__(self, url: str, status_code: int | None = None, reason: str | None = None):
        self.url = url
        self.status_code = status_code
        detail = status_code if status_code is not None else (reason or "transport error")
        super().__init__(f"Failed to fetch {url}: {detail}")
