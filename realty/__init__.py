"""Real estate listing models with synthetic data generation."""

from realty.exceptions import (
    ConfigurationError,
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidArgumentError,
    RealtyError,
    SinkError,
)
from realty.models import Apartment, Condo, Property, from_dict
from realty.store import PropertyRegistry

__version__ = "0.1.0"

__all__ = [
    "Apartment",
    "Condo",
    "ConfigurationError",
    "DuplicateEntityError",
    "EntityNotFoundError",
    "InvalidArgumentError",
    "Property",
    "PropertyRegistry",
    "RealtyError",
    "SinkError",
    "from_dict",
]
