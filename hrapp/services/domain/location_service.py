"""
Location Domain Service

Manages postal locations and their link to a country.
"""

from typing import List

from hrapp.models import Location
from hrapp.schemas import LocationDTO
from hrapp.services.base import EntityService


class LocationService(EntityService[Location, LocationDTO]):
    """Service for managing locations."""

    entity_name = "Location"
    entity_plural = "Locations"

    def find_all_where_department_is_null(self) -> List[LocationDTO]:
        """Get all the locations no department is placed at."""
        return self.find_all_where_relation_is_null("department")
