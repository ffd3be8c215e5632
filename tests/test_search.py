from decimal import Decimal

import pytest

from models import Landlord, Property, PropertyType
from services.property_service import PropertyService, parse_price_ceiling


@pytest.mark.parametrize(
    "term, expected",
    [
        ("1500", Decimal("1500")),
        (" 1500.50 ", Decimal("1500.50")),
        ("0", Decimal("0")),
        ("Pelotas", None),
        ("12 de Maio", None),
        ("nan", None),
        ("Infinity", None),
        ("", None),
        ("   ", None),
        ("1_500", None),
        ("١٥٠٠", None),
    ],
)
def test_parse_price_ceiling(term, expected):
    assert parse_price_ceiling(term) == expected


@pytest.fixture
def listings(db, admin):
    owner = Landlord(name="Joana ProprietÃ¡ria", email="joana@alugaaqui.com", password="x")
    other = Landlord(name="Carlos Souza", email="carlos@alugaaqui.com", password="x")
    db.add_all([owner, other])
    db.flush()

    def add(title, city, rent, landlord=owner, available=True):
        prop = Property(
            title=title,
            address="Rua A, 1",
            city=city,
            type=PropertyType.CASA,
            monthly_rent=Decimal(rent),
            available=available,
            landlord_id=landlord.id,
            admin_id=admin.id,
        )
        db.add(prop)
        db.flush()
        return prop

    props = {
        "cheap": add("Kitnet no Centro", "Pelotas", "800"),
        "mid": add("Casa com pÃ¡tio", "Pelotas", "1500"),
        "pricey": add("Cobertura", "Porto Alegre", "4200", landlord=other),
        "hidden": add("Casa antiga", "Pelotas", "500", available=False),
    }
    db.commit()
    return props


def ids(results):
    return [prop.id for prop in results]


def test_numeric_term_filters_by_rent_ceiling(db, listings):
    results = PropertyService(db).search("1500")
    assert ids(results) == [listings["mid"].id, listings["cheap"].id]


def test_numeric_term_is_inclusive_and_excludes_unavailable(db, listings):
    results = PropertyService(db).search("500")
    assert results == []


def test_text_term_matches_city_case_insensitively(db, listings):
    results = PropertyService(db).search("pelotas")
    assert ids(results) == [listings["mid"].id, listings["cheap"].id]


def test_text_term_matches_title(db, listings):
    assert ids(PropertyService(db).search("COBERT")) == [listings["pricey"].id]


def test_text_term_matches_landlord_name(db, listings):
    assert ids(PropertyService(db).search("souza")) == [listings["pricey"].id]


def test_text_term_without_match_returns_empty(db, listings):
    assert PropertyService(db).search("FlorianÃ³polis") == []


def test_featured_respects_configured_limit(db, listings):
    featured = PropertyService(db, featured_limit=2).list_featured()
    assert ids(featured) == [listings["pricey"].id, listings["mid"].id]


def test_list_available_skips_unavailable(db, listings):
    assert listings["hidden"].id not in ids(PropertyService(db).list_available())


@pytest.mark.parametrize("term", ["_", "%", "C_sa", "%sa"])
def test_like_wildcards_in_term_match_literally(db, listings, term):
    assert PropertyService(db).search(term) == []


def test_term_with_literal_percent_is_found(db, listings):
    listings["mid"].title = "Casa 100% reformada"
    db.commit()
    assert ids(PropertyService(db).search("100% ref")) == [listings["mid"].id]
