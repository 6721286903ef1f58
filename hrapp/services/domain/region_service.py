"""
Region Domain Service

Manages regions, the top of the geographic hierarchy.
"""

from typing import List

from hrapp.models import Region
from hrapp.schemas import RegionDTO
from hrapp.services.base import EntityService


class RegionService(EntityService[Region, RegionDTO]):
    """Service for managing regions."""

    entity_name = "Region"
    entity_plural = "Regions"

    def find_all_where_country_is_null(self) -> List[RegionDTO]:
        """Get all the regions no country belongs to."""
        return self.find_all_where_relation_is_null("country")
