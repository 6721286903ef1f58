"""
Pydantic DTOs for Region, Country and Location.

Relations to other entities are flattened to their ids.
"""

from pydantic import BaseModel
from typing import Optional


class RegionDTO(BaseModel):
    """Transport shape of a Region."""
    id: Optional[int] = None
    region_name: Optional[str] = None


class CountryDTO(BaseModel):
    """Transport shape of a Country."""
    id: Optional[int] = None
    country_name: Optional[str] = None
    region_id: Optional[int] = None


class LocationDTO(BaseModel):
    """Transport shape of a Location."""
    id: Optional[int] = None
    street_address: Optional[str] = None
    postal_code: Optional[str] = None
    city: Optional[str] = None
    state_province: Optional[str] = None
    country_id: Optional[int] = None
