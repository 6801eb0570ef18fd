"""Listing generators for each property kind."""

from __future__ import annotations

import random
from decimal import Decimal
from typing import Iterator

from realty.exceptions import ConfigurationError
from realty.generators.address import AddressFactory
from realty.generators.base import BaseGenerator
from realty.models import LISTING_KINDS, Apartment, Condo, Property


class PropertyGenerator(BaseGenerator):
    """Generate synthetic standalone properties."""

    def __init__(self, seed: int | None = None, locale: str = "en_US") -> None:
        super().__init__(seed, locale)
        self._address_factory = AddressFactory(seed=seed, locale=locale)

    def generate(self) -> Property:
        """Generate a property.

        Returns
        -------
        Property
            Generated property.
        """
        address = self._address_factory.generate()
        return Property(
            id=self.fake.uuid4(),
            street=address.street,
            city=address.city,
            state=address.state,
            zip=address.zip,
        )

    def generate_batch(self, count: int) -> Iterator[Property]:
        """Generate multiple listings.

        Parameters
        ----------
        count : int
            Number of listings to generate.

        Yields
        ------
        Property
            Generated listings.
        """
        for _ in range(count):
            yield self.generate()


class ApartmentGenerator(PropertyGenerator):
    """Generate synthetic apartments."""

    UNIT_LETTERS = "ABCDEF"

    def _unit(self) -> str:
        floor = random.randint(1, 40)
        door = random.randint(1, 24)
        if random.random() < 0.5:
            return f"{floor}{door:02d}"
        return f"{floor}{door:02d}{random.choice(self.UNIT_LETTERS)}"

    def generate(self) -> Apartment:
        address = self._address_factory.generate()
        return Apartment(
            id=self.fake.uuid4(),
            street=address.street,
            unit=self._unit(),
            city=address.city,
            state=address.state,
            zip=address.zip,
        )


class CondoGenerator(ApartmentGenerator):
    """Generate synthetic condos with asking price and floor area."""

    SQUARE_FEET_RANGE = (450, 3200)
    PRICE_PER_SQUARE_FOOT_RANGE = (150, 1400)

    def generate(self) -> Condo:
        address = self._address_factory.generate()
        square_feet = random.randint(*self.SQUARE_FEET_RANGE)
        # Asking prices are listed in whole thousands
        raw_price = square_feet * random.randint(*self.PRICE_PER_SQUARE_FOOT_RANGE)
        price = Decimal(round(raw_price, -3))
        return Condo(
            id=self.fake.uuid4(),
            street=address.street,
            unit=self._unit(),
            city=address.city,
            state=address.state,
            zip=address.zip,
            price=price,
            square_feet=square_feet,
        )


_GENERATOR_CLASSES: dict[str, type[PropertyGenerator]] = {
    Property.kind: PropertyGenerator,
    Apartment.kind: ApartmentGenerator,
    Condo.kind: CondoGenerator,
}


class ListingGenerator:
    """Generate a mix of listing kinds by weight.

    Parameters
    ----------
    kind_weights : dict[str, float]
        Relative weight per listing kind (``property``, ``apartment``,
        ``condo``). Weights do not need to sum to 1.0.
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``en_US``).
    """

    def __init__(
        self,
        kind_weights: dict[str, float],
        seed: int | None = None,
        locale: str = "en_US",
    ) -> None:
        unknown = sorted(set(kind_weights) - set(LISTING_KINDS))
        if unknown:
            raise ConfigurationError(f"Unknown listing kinds: {', '.join(unknown)}")
        if not kind_weights or sum(kind_weights.values()) <= 0:
            raise ConfigurationError("kind_weights must contain a positive weight")

        self._kinds = list(kind_weights.keys())
        self._weights = list(kind_weights.values())
        # Offset seeds so the per-kind Faker instances do not repeat ids
        self._generators = {
            kind: _GENERATOR_CLASSES[kind](
                seed=None if seed is None else seed + offset,
                locale=locale,
            )
            for offset, kind in enumerate(self._kinds)
        }
        if seed is not None:
            random.seed(seed)

    def generate(self) -> Property:
        """Generate a single listing of a weighted-random kind."""
        kind = random.choices(self._kinds, weights=self._weights, k=1)[0]
        return self._generators[kind].generate()

    def generate_batch(self, count: int) -> Iterator[Property]:
        """Generate ``count`` listings of mixed kinds."""
        for _ in range(count):
            yield self.generate()
