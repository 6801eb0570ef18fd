"""Pytest configuration and fixtures."""

import logging

import pytest

from realty.models import Apartment, Condo, Property


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo handler and level changes made by setup_logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    levels = {name: logging.getLogger(name).level for name in ("", "realty", "faker")}
    yield
    for handler in root.handlers[:]:
        if handler not in handlers and type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    for name, level in levels.items():
        logging.getLogger(name).setLevel(level)


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def sample_property() -> Property:
    """St Charles Place, from the lesson."""
    return Property(12345, "123 St Charles Place", "New York", "NY", 12080)


@pytest.fixture
def sample_apartment() -> Apartment:
    """Boardwalk unit, from the lesson."""
    return Apartment(56789, "111 Boardwalk", "212B", "New York", "NY", 12070)


@pytest.fixture
def sample_condo() -> Condo:
    """Condo priced at an even $500 per square foot."""
    return Condo("condo-001", "1 Marvin Gardens", "4A", "Atlantic City", "NJ", "08401", 500000, 1000)
