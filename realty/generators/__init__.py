"""Synthetic listing generators."""

from realty.generators.address import AddressFactory, StreetAddress
from realty.generators.base import BaseGenerator
from realty.generators.listing import (
    ApartmentGenerator,
    CondoGenerator,
    ListingGenerator,
    PropertyGenerator,
)

__all__ = [
    "AddressFactory",
    "ApartmentGenerator",
    "BaseGenerator",
    "CondoGenerator",
    "ListingGenerator",
    "PropertyGenerator",
    "StreetAddress",
]
