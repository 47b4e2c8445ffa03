import asyncio
import logging
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Set, Tuple

import httpx

from country_admin import paging
from country_admin.config import settings
from country_admin.edit_panel import EditPanel
from country_admin.errors import NetworkError
from country_admin.schemas import CountryResponse

logger = logging.getLogger(__name__)

COUNTRIES_URL = "/api/countries"


class ViewPhase(str, Enum):
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


class CountryListView:
    """
    State of one country list page, from mount until the user leaves.

    The collection is fetched once by `load()` and afterwards only shrinks
    through a successful bulk delete. Everything the table shows (the page
    window, the header checkbox, the pager buttons) is derived from it by
    the functions in `country_admin.paging`.
    """

    def __init__(self, client: httpx.AsyncClient, page_size: Optional[int] = None):
        self._client = client
        self.page_size = page_size or settings.PAGE_SIZE
        self.phase = ViewPhase.LOADING
        self.error: Optional[str] = None
        self.countries: Tuple[CountryResponse, ...] = ()
        self.selected: Set[int] = set()
        self.current_page = 1
        self.current_country: Optional[CountryResponse] = None
        self.panel_open = False

    # ============================================================================
    # LOADING
    # ============================================================================

    async def load(self) -> None:
        """
        Fetch the full list once and move to READY or ERROR.

        Calling it again after the first fetch does nothing; a new page load
        means a new view.
        """
        if self.phase is not ViewPhase.LOADING:
            return

        try:
            response = await self._client.get(COUNTRIES_URL)
            if not response.is_success:
                raise NetworkError("Failed to fetch countries")
            body = response.json()
            rows = body.get("data") if isinstance(body, dict) else None
            if not isinstance(rows, list):
                raise NetworkError("Failed to fetch countries")
            self.countries = tuple(CountryResponse.model_validate(row) for row in rows)
        except (httpx.HTTPError, NetworkError, ValueError) as e:
            self._fail(e)
            return

        self.phase = ViewPhase.READY
        logger.debug("Loaded %d countries", len(self.countries))

    def _fail(self, error: Exception) -> None:
        self.error = str(error) or "Unknown error occurred"
        self.phase = ViewPhase.ERROR
        logger.error("Country list failed: %s", self.error)

    # ============================================================================
    # PAGINATION
    # ============================================================================

    @property
    def total(self) -> int:
        return len(self.countries)

    @property
    def total_pages(self) -> int:
        return paging.total_pages(self.total, self.page_size)

    @property
    def window(self) -> Sequence[CountryResponse]:
        return paging.page_window(self.countries, self.current_page, self.page_size)

    @property
    def window_ids(self) -> List[int]:
        return [c.country_id for c in self.window]

    @property
    def has_previous(self) -> bool:
        return paging.has_previous(self.current_page)

    @property
    def has_next(self) -> bool:
        return paging.has_next(self.current_page, self.total, self.page_size)

    @property
    def range_label(self) -> str:
        return paging.range_label(self.current_page, self.total, self.page_size)

    def go_to_page(self, page: int) -> None:
        self.current_page = paging.clamp_page(page, self.total, self.page_size)

    def next_page(self) -> None:
        self.go_to_page(self.current_page + 1)

    def previous_page(self) -> None:
        self.go_to_page(self.current_page - 1)

    # ============================================================================
    # SELECTION
    # ============================================================================

    @property
    def all_selected(self) -> bool:
        return paging.all_selected(self.selected, self.window_ids)

    def is_selected(self, country_id: int) -> bool:
        return country_id in self.selected

    def toggle(self, country_id: int) -> None:
        if country_id in self.selected:
            self.selected.discard(country_id)
        else:
            self.selected.add(country_id)

    def select_all(self, checked: bool) -> None:
        """
        Header checkbox handler.

        Checking replaces the selection with the current page's ids; ids
        picked on other pages are dropped. Unchecking clears everything.
        """
        if checked:
            self.selected = set(self.window_ids)
        else:
            self.selected = set()

    def restore_selection(self, country_ids: Iterable[int]) -> None:
        known = {c.country_id for c in self.countries}
        self.selected = {country_id for country_id in country_ids if country_id in known}

    # ============================================================================
    # BULK DELETE
    # ============================================================================

    async def delete_selected(self) -> None:
        """
        Delete every selected country, one request per id, all in flight at once.

        The collection changes only if every request succeeds. If any fails
        the view shows a single error and keeps every row, even the ones the
        server may already have deleted.
        """
        if not self.selected:
            return

        ids = sorted(self.selected)
        results = await asyncio.gather(
            *(self._client.delete(f"{COUNTRIES_URL}/{country_id}") for country_id in ids),
            return_exceptions=True,
        )

        failures = [
            (country_id, result)
            for country_id, result in zip(ids, results)
            if isinstance(result, BaseException) or not result.is_success
        ]
        if failures:
            country_id, result = failures[0]
            if isinstance(result, BaseException):
                error = result
            else:
                error = NetworkError(
                    f"Failed to delete country {country_id}: {response_message(result)}"
                )
            logger.warning("%d of %d deletes failed", len(failures), len(ids))
            self._fail(error)
            return

        removed = set(ids)
        self.countries = tuple(c for c in self.countries if c.country_id not in removed)
        self.selected = set()
        logger.info("Deleted %d countries", len(ids))

    # ============================================================================
    # EDIT PANEL
    # ============================================================================

    def open_edit(self, country: CountryResponse) -> None:
        self.current_country = country
        self.panel_open = True

    def open_create(self) -> None:
        self.current_country = None
        self.panel_open = True

    def close_panel(self) -> None:
        self.panel_open = False

    @property
    def panel(self) -> EditPanel:
        return EditPanel(country=self.current_country, is_open=self.panel_open)

    def find(self, country_id: int) -> Optional[CountryResponse]:
        for country in self.countries:
            if country.country_id == country_id:
                return country
        return None


def response_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return f"HTTP {response.status_code}"
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return f"HTTP {response.status_code}"
