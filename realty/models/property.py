"""Listing models: a base property record and its specializations.

``Property`` holds identity and address fields. ``Apartment`` extends it with
a unit and prefixes the unit to the base mailing address. ``Condo`` extends
``Apartment`` with a price and a floor area.

Subclasses take their own positional order (``unit`` right after ``street``),
so they write ``__init__`` by hand and hand the shared fields to the parent
constructor before setting their own.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from decimal import MAX_EMAX, MIN_EMIN, ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Any, ClassVar, Mapping

from realty.exceptions import InvalidArgumentError

CENTS = Decimal("0.01")


def _require_identifier(name: str, value: Any) -> None:
    """Accept a non-empty string or a non-negative integer."""
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise InvalidArgumentError(f"{name} must be a string or integer, got {value!r}")
    if isinstance(value, int) and value < 0:
        raise InvalidArgumentError(f"{name} must not be negative, got {value!r}")
    if isinstance(value, str) and not value.strip():
        raise InvalidArgumentError(f"{name} must not be blank")


def _require_text(name: str, value: Any) -> None:
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{name} must be a string, got {value!r}")
    if not value.strip():
        raise InvalidArgumentError(f"{name} must not be blank")


def _require_amount(name: str, value: Any, allow_zero: bool = True) -> Decimal:
    """Convert a price-like value to Decimal, rejecting negatives and NaN."""
    if isinstance(value, bool) or not isinstance(value, (int, float, str, Decimal)):
        raise InvalidArgumentError(f"{name} must be numeric, got {value!r}")
    try:
        amount = Decimal(str(value))
    except InvalidOperation as exc:
        raise InvalidArgumentError(f"{name} must be numeric, got {value!r}") from exc
    if not amount.is_finite():
        raise InvalidArgumentError(f"{name} must be finite, got {value!r}")
    if amount < 0 or (amount == 0 and not allow_zero):
        bound = "non-negative" if allow_zero else "positive"
        raise InvalidArgumentError(f"{name} must be {bound}, got {value!r}")
    return amount


@dataclass(frozen=True)
class Property:
    """Real estate property identified by id and street address."""

    kind: ClassVar[str] = "property"

    id: int | str
    street: str
    city: str
    state: str
    zip: int | str  # ZIP code, formatted as given

    def __post_init__(self) -> None:
        _require_identifier("id", self.id)
        _require_text("street", self.street)
        _require_text("city", self.city)
        _require_text("state", self.state)
        _require_identifier("zip", self.zip)

    def mailing_address(self) -> str:
        """Return the two-line postal address."""
        return f"{self.street}\n{self.city}, {self.state} {self.zip}"

    def to_dict(self) -> dict[str, Any]:
        """Return the fields as a plain dict tagged with ``kind``."""
        data: dict[str, Any] = {"kind": self.kind}
        data.update({f.name: getattr(self, f.name) for f in fields(self)})
        return data


@dataclass(frozen=True, init=False)
class Apartment(Property):
    """Property within a multi-unit building."""

    kind: ClassVar[str] = "apartment"

    unit: str

    def __init__(
        self,
        id: int | str,
        street: str,
        unit: str,
        city: str,
        state: str,
        zip: int | str,
    ) -> None:
        super().__init__(id, street, city, state, zip)
        _require_text("unit", unit)
        object.__setattr__(self, "unit", unit)

    def mailing_address(self) -> str:
        """Return the unit line followed by the building's address."""
        return f"Unit: {self.unit}\n" + super().mailing_address()


@dataclass(frozen=True, init=False)
class Condo(Apartment):
    """Owner-occupied apartment listed for sale."""

    kind: ClassVar[str] = "condo"

    price: Decimal
    square_feet: int | float

    def __init__(
        self,
        id: int | str,
        street: str,
        unit: str,
        city: str,
        state: str,
        zip: int | str,
        price: int | float | str | Decimal,
        square_feet: int | float,
    ) -> None:
        super().__init__(id, street, unit, city, state, zip)
        object.__setattr__(self, "price", _require_amount("price", price))
        if isinstance(square_feet, str):
            raise InvalidArgumentError(f"square_feet must be numeric, got {square_feet!r}")
        _require_amount("square_feet", square_feet, allow_zero=False)
        object.__setattr__(self, "square_feet", square_feet)

    @property
    def price_per_square_foot(self) -> Decimal:
        """Asking price divided by floor area, rounded to cents."""
        area = Decimal(str(self.square_feet))
        with localcontext() as ctx:
            # Room for every integer digit of the quotient plus cents
            ctx.prec = max(ctx.prec, self.price.adjusted() - area.adjusted() + 16)
            ctx.Emax = MAX_EMAX
            ctx.Emin = MIN_EMIN
            return (self.price / area).quantize(CENTS, rounding=ROUND_HALF_UP)


LISTING_KINDS: dict[str, type[Property]] = {
    cls.kind: cls for cls in (Property, Apartment, Condo)
}


def from_dict(data: Mapping[str, Any]) -> Property:
    """Rebuild a listing from the output of ``to_dict()``.

    Parameters
    ----------
    data : Mapping[str, Any]
        Field values plus a ``kind`` key. A missing ``kind`` means
        ``"property"``. Unknown keys are ignored.

    Returns
    -------
    Property
        Instance of the class named by ``kind``.
    """
    kind = data.get("kind", Property.kind)
    cls = LISTING_KINDS.get(kind)
    if cls is None:
        raise InvalidArgumentError(f"Unknown listing kind: {kind!r}")

    names = [f.name for f in fields(cls)]
    missing = [name for name in names if name not in data]
    if missing:
        raise InvalidArgumentError(f"Missing fields for {kind}: {', '.join(missing)}")

    return cls(**{name: data[name] for name in names})
