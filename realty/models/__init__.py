"""Domain models for real estate listings."""

from realty.models.property import LISTING_KINDS, Apartment, Condo, Property, from_dict

__all__ = ["Apartment", "Condo", "LISTING_KINDS", "Property", "from_dict"]
