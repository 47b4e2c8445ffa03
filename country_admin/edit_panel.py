from dataclasses import dataclass
from typing import Optional

from country_admin.errors import SaveNotImplemented
from country_admin.schemas import CountryResponse


@dataclass
class EditPanel:
    """
    Side panel bound to at most one country.

    With a country it shows the name field, Save and Close; without one it
    only shows a placeholder. It holds no state of its own beyond what the
    list view hands it.
    """

    country: Optional[CountryResponse] = None
    is_open: bool = False

    title = "Edit Country"
    placeholder = "No country selected"

    @property
    def bound(self) -> bool:
        return self.country is not None

    @property
    def name(self) -> str:
        return self.country.country if self.country else ""

    def save(self, name: str) -> None:
        # TODO: PUT the new name to /api/countries/{country_id}, close the
        # panel and reload the list once an update endpoint exists.
        if self.country is None:
            raise ValueError("No country is bound to the panel")
        raise SaveNotImplemented(self.country.country_id)
