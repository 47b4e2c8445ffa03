import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional
from urllib.parse import urlencode

import httpx
from fastapi import APIRouter, Depends, Form, Query, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from country_admin.config import settings
from country_admin.list_view import CountryListView, ViewPhase

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(tags=["pages"])


def format_timestamp(value: Optional[datetime]) -> str:
    if value is None:
        return ""
    return value.strftime("%Y.%m.%d %H:%M")


templates.env.filters["timestamp"] = format_timestamp


async def get_api_client(request: Request):
    """
    Dependency for the HTTP client a list page fetches through.

    Without API_BASE_URL the page calls this same application in-process.
    """
    if settings.API_BASE_URL:
        client = httpx.AsyncClient(base_url=settings.API_BASE_URL, timeout=settings.API_TIMEOUT)
    else:
        client = httpx.AsyncClient(
            transport=httpx.ASGITransport(app=request.app),
            base_url="http://country-admin",
            timeout=settings.API_TIMEOUT,
        )
    async with client:
        yield client


def list_url(view: CountryListView, page: Optional[int] = None, **params) -> str:
    """Link back to the list page keeping the current page and selection."""
    query = {"page": page or view.current_page, "selected": sorted(view.selected)}
    query.update({key: value for key, value in params.items() if value is not None})
    return "/countries?" + urlencode(query, doseq=True)


def render_error(request: Request, view: CountryListView) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "error.html",
        {"error": view.error},
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


# ============================================================================
# GET / - Redirect to the list page
# ============================================================================

@router.get("/", include_in_schema=False)
async def index():
    return RedirectResponse("/countries", status_code=status.HTTP_302_FOUND)


# ============================================================================
# GET /countries - Country list page
# ============================================================================

@router.get("/countries", response_class=HTMLResponse)
async def countries_page(
    request: Request,
    page: int = 1,
    selected: List[int] = Query([]),
    select_all: Optional[str] = None,
    edit: Optional[int] = None,
    new: bool = False,
    client: httpx.AsyncClient = Depends(get_api_client),
):
    view = CountryListView(client)
    await view.load()
    if view.phase is ViewPhase.ERROR:
        return render_error(request, view)

    view.go_to_page(page)
    view.restore_selection(selected)
    if select_all == "on":
        view.select_all(True)
    elif select_all == "off":
        view.select_all(False)

    if edit is not None:
        country = view.find(edit)
        if country is not None:
            view.open_edit(country)
    elif new:
        view.open_create()

    return templates.TemplateResponse(
        request,
        "countries.html",
        {"view": view, "panel": view.panel, "list_url": list_url},
    )


# ============================================================================
# POST /countries/delete - Delete the selected countries
# ============================================================================

@router.post("/countries/delete", response_class=HTMLResponse)
async def delete_selected(
    request: Request,
    selected: List[int] = Form([]),
    page: int = Form(1),
    client: httpx.AsyncClient = Depends(get_api_client),
):
    view = CountryListView(client)
    await view.load()
    if view.phase is ViewPhase.READY:
        view.go_to_page(page)
        view.restore_selection(selected)
        await view.delete_selected()

    if view.phase is ViewPhase.ERROR:
        return render_error(request, view)

    return RedirectResponse(list_url(view), status_code=status.HTTP_303_SEE_OTHER)
