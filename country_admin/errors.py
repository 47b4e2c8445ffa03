"""
Error types shared by the gateway and the list page.

Every one of them is reduced to a plain message string at the boundary
where it is caught; none of them carries a structured error code.
"""


class StoreError(Exception):
    """Failure talking to or querying the country table."""


class NetworkError(Exception):
    """A request from the list page failed or answered with a non-2xx status."""


class SaveNotImplemented(NotImplementedError):
    """
    Saving from the edit panel is not wired yet.

    TODO: send the edited name to an update endpoint keyed by country_id
    (PUT /api/countries/{country_id}), then close the panel and reload the list.
    """

    def __init__(self, country_id: int):
        self.country_id = country_id
        super().__init__(f"Saving country {country_id} is not implemented")
