"""Street address generation with Faker locale providers."""

from __future__ import annotations

from dataclasses import dataclass

from faker import Faker

# Faker names the first-level subdivision differently per locale
_STATE_METHODS = ("state_abbr", "state", "prefecture", "province", "region", "county")


@dataclass(frozen=True)
class StreetAddress:
    """Address fields shared by every listing kind."""

    street: str
    city: str
    state: str
    zip: str


class AddressFactory:
    """Generate realistic street addresses.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``en_US``).
    """

    def __init__(self, seed: int | None = None, locale: str = "en_US") -> None:
        self._fake = Faker(locale)
        if seed is not None:
            self._fake.seed_instance(seed)
        self._state_method = next(
            (method for method in _STATE_METHODS if hasattr(self._fake, method)),
            "city",
        )

    def generate(self) -> StreetAddress:
        """Generate an address.

        Returns
        -------
        StreetAddress
            Generated address.
        """
        fake = self._fake
        return StreetAddress(
            street=f"{fake.building_number()} {fake.street_name()}",
            city=fake.city(),
            state=getattr(fake, self._state_method)(),
            zip=fake.postcode(),
        )
