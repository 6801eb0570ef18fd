"""In-memory listing registry keyed on listing id."""

from dataclasses import dataclass, field
from typing import Iterator, TypeVar

from realty.exceptions import DuplicateEntityError, EntityNotFoundError
from realty.logging import get_logger, listing_context
from realty.models import Property

logger = get_logger(__name__)

P = TypeVar("P", bound=Property)


@dataclass
class PropertyRegistry:
    """Store for listings with unique ids.

    Listings are kept in insertion order. Because models are immutable,
    replacing a listing means removing it and adding the new one.
    """

    properties: dict[int | str, Property] = field(default_factory=dict)

    def add(self, prop: Property) -> None:
        """Add a listing to the registry."""
        if prop.id in self.properties:
            logger.warning("Rejected duplicate %s %s", prop.kind, prop.id, **listing_context(prop))
            raise DuplicateEntityError(f"Listing {prop.id} already registered")
        self.properties[prop.id] = prop
        logger.debug("Registered %s %s", prop.kind, prop.id, **listing_context(prop))

    def add_all(self, props: list[Property]) -> None:
        """Add several listings, stopping at the first duplicate."""
        for prop in props:
            self.add(prop)

    def get(self, listing_id: int | str) -> Property:
        """Return the listing with the given id."""
        try:
            return self.properties[listing_id]
        except KeyError:
            raise EntityNotFoundError(f"Listing {listing_id} not found") from None

    def remove(self, listing_id: int | str) -> Property:
        """Remove and return the listing with the given id."""
        prop = self.get(listing_id)
        del self.properties[listing_id]
        logger.debug("Removed %s %s", prop.kind, listing_id, **listing_context(prop))
        return prop

    def of_kind(self, cls: type[P]) -> Iterator[P]:
        """Iterate listings that are instances of ``cls``, subclasses included."""
        for prop in self.properties.values():
            if isinstance(prop, cls):
                yield prop

    def in_city(self, city: str, state: str | None = None) -> list[Property]:
        """Return listings in a city, optionally narrowed by state.

        Matching ignores case and surrounding whitespace.
        """
        city_key = city.strip().casefold()
        state_key = state.strip().casefold() if state is not None else None
        return [
            prop
            for prop in self.properties.values()
            if prop.city.strip().casefold() == city_key
            and (state_key is None or prop.state.strip().casefold() == state_key)
        ]

    def count_by_kind(self) -> dict[str, int]:
        """Return the number of listings per ``kind``."""
        counts: dict[str, int] = {}
        for prop in self.properties.values():
            counts[prop.kind] = counts.get(prop.kind, 0) + 1
        return counts

    def __len__(self) -> int:
        return len(self.properties)

    def __contains__(self, listing_id: object) -> bool:
        return listing_id in self.properties

    def __iter__(self) -> Iterator[Property]:
        return iter(self.properties.values())
