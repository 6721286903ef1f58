"""
Country Domain Service

Manages countries and their link to a region.
"""

from typing import List

from hrapp.models import Country
from hrapp.schemas import CountryDTO
from hrapp.services.base import EntityService


class CountryService(EntityService[Country, CountryDTO]):
    """Service for managing countries."""

    entity_name = "Country"
    entity_plural = "Countries"

    def find_all_where_location_is_null(self) -> List[CountryDTO]:
        """Get all the countries no location points at."""
        return self.find_all_where_relation_is_null("location")
