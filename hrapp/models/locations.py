"""
Region, Country and Location SQLAlchemy models.

These three entities form the geographic chain of the HR domain:
a Country belongs to one Region and a Location sits in one Country.
Each link is one-to-one, owned by the entity holding the foreign key.
"""

from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship

from hrapp.core.database import Base


class Region(Base):
    """Region model, the top of the geographic hierarchy."""
    __tablename__ = "regions"

    id = Column(Integer, primary_key=True, index=True)
    region_name = Column(String(255), nullable=True)

    # Inverse side of Country.region
    country = relationship("Country", back_populates="region", uselist=False)

    def __repr__(self):
        return f"<Region(id={self.id}, region_name='{self.region_name}')>"


class Country(Base):
    """Country model, owns its link to a Region."""
    __tablename__ = "countries"

    id = Column(Integer, primary_key=True, index=True)
    country_name = Column(String(255), nullable=True)
    region_id = Column(Integer, ForeignKey("regions.id"), unique=True, nullable=True)

    region = relationship("Region", back_populates="country")

    # Inverse side of Location.country
    location = relationship("Location", back_populates="country", uselist=False)

    def __repr__(self):
        return f"<Country(id={self.id}, country_name='{self.country_name}')>"


class Location(Base):
    """
    Location model representing a postal address.

    Owns its link to a Country and is referenced one-to-one by a
    Department.
    """
    __tablename__ = "locations"

    id = Column(Integer, primary_key=True, index=True)
    street_address = Column(String(255), nullable=True)
    postal_code = Column(String(50), nullable=True)
    city = Column(String(255), nullable=True)
    state_province = Column(String(255), nullable=True)
    country_id = Column(Integer, ForeignKey("countries.id"), unique=True, nullable=True)

    country = relationship("Country", back_populates="location")

    # Inverse side of Department.location
    department = relationship("Department", back_populates="location", uselist=False)

    def __repr__(self):
        return f"<Location(id={self.id}, city='{self.city}')>"
