"""Reference catalog model tests: camelCase input and set-valued attributes."""

from pathlib import Path

from restotarget.domain.catalog import Campaign, ReferenceCatalogs, Restaurant, names_of
from restotarget.domain.filters import Dimension, RuleMode

CATALOG = Path(__file__).resolve().parent.parent / "data" / "catalog.json"


class TestRestaurant:
    """Single or multiple type ids always become sets."""

    def test_scalar_type_becomes_singleton(self):
        r = Restaurant.model_validate({"id": 1, "name": "A", "typeId": 3, "menuTypeId": 4})
        assert r.type_ids == frozenset({3})
        assert r.menu_type_ids == frozenset({4})

    def test_list_type_kept(self):
        r = Restaurant.model_validate({"id": 1, "name": "A", "typeId": [3, 5]})
        assert r.dimension_values(Dimension.restaurant_types) == frozenset({3, 5})

    def test_dimension_values(self):
        r = Restaurant(id=1, name="A", district_id=10, price_segment_id=2)
        assert r.dimension_values("locations") == frozenset({10})
        assert r.dimension_values("price_segments") == frozenset({2})
        assert r.dimension_values("menu_types") == frozenset()
        assert r.dimension_values("advertisers") == frozenset()

    def test_missing_district_has_no_location(self):
        assert Restaurant(id=1, name="A").dimension_values("locations") == frozenset()


class TestCampaign:
    """Flat persisted targeting keys are lifted into CampaignTargeting."""

    def test_flat_keys(self):
        c = Campaign.model_validate({"id": 1, "name": "C", "advertiserId": 4, "menuTypesMode": "denied", "menuTypes": [2]})
        assert c.targeting.menu_types_mode == RuleMode.denied
        assert c.targeting.menu_types == frozenset({2})
        assert c.dimension_values("advertisers") == frozenset({4})

    def test_defaults(self):
        c = Campaign(id=1, name="C")
        assert c.targeting.to_rule_set().is_empty


class TestReferenceCatalogs:
    """Demo catalog loads and resolves names."""

    def test_load_demo_catalog(self):
        catalogs = ReferenceCatalogs.load_json(CATALOG)
        assert len(catalogs.restaurants) == 4
        assert catalogs.campaign(2).blocked
        assert catalogs.advertiser_name(1) == "Fresh Drinks"
        assert catalogs.advertiser_name(99) == "ID: 99"

    def test_restaurant_profile(self):
        catalogs = ReferenceCatalogs.load_json(CATALOG)
        profile = catalogs.restaurant_profile(catalogs.restaurant(3))
        assert profile == {
            "id": 3,
            "name": "Burger Point",
            "city": "South City",
            "district": "Riverside",
            "restaurant_types": ["Pizzeria", "Fast food"],
            "menu_types": ["Lunch"],
            "price_segment": "Budget",
        }

    def test_names_of_unknown(self):
        catalogs = ReferenceCatalogs.load_json(CATALOG)
        assert names_of(catalogs.menu_types, [3, 42]) == ["All day", "-"]
