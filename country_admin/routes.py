import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from country_admin.database import get_session
from country_admin.schemas import (
    CountryCreate,
    CountryEnvelope,
    CountryListEnvelope,
    CountryResponse,
    ErrorEnvelope,
)
from country_admin.services import CountryService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["countries"])
service = CountryService()

ERROR_RESPONSES = {
    500: {
        "model": ErrorEnvelope,
        "description": "Any failure, including a malformed request body",
    }
}


def error_response(error: Exception, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR) -> JSONResponse:
    message = str(error) or "Unknown error occurred"
    return JSONResponse(
        status_code=status_code,
        content=ErrorEnvelope(error=message).model_dump(),
    )


# ============================================================================
# GET /api/countries - All countries sorted by name
# ============================================================================

@router.get("/countries", response_model=CountryListEnvelope, responses=ERROR_RESPONSES)
async def list_countries(session: AsyncSession = Depends(get_session)):

    try:
        countries = await service.list_countries(session)
        return CountryListEnvelope(
            data=[CountryResponse.model_validate(c) for c in countries],
        )
    except Exception as e:
        logger.exception("Listing countries failed")
        return error_response(e)


# ============================================================================
# POST /api/countries - Add a country
# ============================================================================

@router.post(
    "/countries",
    response_model=CountryEnvelope,
    responses=ERROR_RESPONSES,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": CountryCreate.model_json_schema()}},
        }
    },
)
async def create_country(request: Request, session: AsyncSession = Depends(get_session)):

    try:
        # Parsed here so a broken body gets the same envelope as a store failure
        payload = CountryCreate.model_validate(await request.json())
        country = await service.create_country(session, payload.country)
        return CountryEnvelope(data=CountryResponse.model_validate(country))
    except Exception as e:
        logger.exception("Creating country failed")
        return error_response(e)


# ============================================================================
# DELETE /api/countries/{country_id} - Referenced by the list page, not built
# ============================================================================

@router.delete(
    "/countries/{country_id}",
    status_code=status.HTTP_501_NOT_IMPLEMENTED,
    responses={501: {"model": ErrorEnvelope, "description": "Deleting is not implemented"}},
)
async def delete_country(country_id: int):
    # TODO: delete the row keyed by country_id once the behaviour for a
    # missing id (404 or idempotent success) is decided.
    logger.warning("Delete requested for country %s, which is not implemented", country_id)
    return error_response(
        NotImplementedError(f"Deleting country {country_id} is not implemented"),
        status_code=status.HTTP_501_NOT_IMPLEMENTED,
    )
