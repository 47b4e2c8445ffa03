"""
Pydantic schemas for API request/response validation.
Separates API layer from database models.
"""

from pydantic import BaseModel
from typing import List, Literal
from datetime import datetime


class CountryResponse(BaseModel):
    """
    Response schema for a single country row.
    Used in GET /api/countries and POST /api/countries
    """

    country_id: int
    country: str
    last_update: datetime

    class Config:
        from_attributes = True
        json_schema_extra = {
            "example": {
                "country_id": 1,
                "country": "Afghanistan",
                "last_update": "2006-02-15T09:44:00Z",
            }
        }


class CountryCreate(BaseModel):
    """
    Request body for POST /api/countries
    """

    country: str

    class Config:
        json_schema_extra = {"example": {"country": "Wakanda"}}


class CountryListEnvelope(BaseModel):
    """
    Success envelope for GET /api/countries, rows sorted by name.
    """

    success: Literal[True] = True
    data: List[CountryResponse]

    class Config:
        json_schema_extra = {
            "example": {
                "success": True,
                "data": [
                    {
                        "country_id": 1,
                        "country": "Afghanistan",
                        "last_update": "2006-02-15T09:44:00Z",
                    }
                ],
            }
        }


class CountryEnvelope(BaseModel):
    """
    Success envelope for POST /api/countries, carries the inserted row.
    """

    success: Literal[True] = True
    data: CountryResponse


class ErrorEnvelope(BaseModel):
    """
    Error envelope returned by every endpoint on failure.
    """

    success: Literal[False] = False
    error: str

    class Config:
        json_schema_extra = {
            "example": {"success": False, "error": "relation \"country\" does not exist"}
        }
