"""Reference catalog models: restaurants, campaigns and their dictionaries."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Literal, Sequence, TypeVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from .filters import Dimension, DimensionRule, RuleMode, RuleSet

_FROZEN = ConfigDict(frozen=True, populate_by_name=True)


def _as_id_set(value: Any) -> Any:
    """Normalise a scalar id (legacy single-valued field) to a one-element list."""
    if value is None:
        return []
    if isinstance(value, (int, str)):
        return [value]
    return value


class CatalogItem(BaseModel):
    """Identified, named reference item (district, menu type, advertiser, ...)."""

    model_config = _FROZEN

    id: int = Field(..., description="Catalog identifier")
    name: str = Field(..., description="Display name")
    blocked: bool = Field(default=False, description="Whether the item is inactive")


class District(CatalogItem):
    city_id: int | None = Field(
        default=None,
        validation_alias=AliasChoices("city_id", "cityId"),
        description="Owning city",
    )


class Placement(CatalogItem):
    """Display slot that can be enabled per targeting edge."""


class Schedule(CatalogItem):
    """Named, colored time-window definition attachable to an enabled slot."""

    color: str = Field(default="#9e9e9e", description="Display color")


class Advertiser(CatalogItem):
    """Owner of campaigns."""


class Restaurant(BaseModel):
    """Restaurant with its classifiable attributes."""

    model_config = _FROZEN

    id: int = Field(..., description="Restaurant identifier")
    name: str = Field(..., description="Display name")
    blocked: bool = Field(default=False, description="Whether the restaurant is inactive")
    city_id: int | None = Field(default=None, validation_alias=AliasChoices("city_id", "cityId"))
    district_id: int | None = Field(
        default=None, validation_alias=AliasChoices("district_id", "districtId")
    )
    type_ids: frozenset[int] = Field(
        default_factory=frozenset,
        validation_alias=AliasChoices("type_ids", "typeIds", "typeId"),
        description="Restaurant type identifiers",
    )
    menu_type_ids: frozenset[int] = Field(
        default_factory=frozenset,
        validation_alias=AliasChoices("menu_type_ids", "menuTypeIds", "menuTypeId"),
        description="Menu type identifiers",
    )
    price_segment_id: int | None = Field(
        default=None, validation_alias=AliasChoices("price_segment_id", "priceSegmentId")
    )

    @field_validator("type_ids", "menu_type_ids", mode="before")
    @classmethod
    def _scalar_to_set(cls, value: Any) -> Any:
        return _as_id_set(value)

    def dimension_values(self, dimension: str) -> frozenset[int]:
        if dimension == Dimension.locations:
            return frozenset(_as_id_set(self.district_id))
        if dimension == Dimension.restaurant_types:
            return self.type_ids
        if dimension == Dimension.menu_types:
            return self.menu_type_ids
        if dimension == Dimension.price_segments:
            return frozenset(_as_id_set(self.price_segment_id))
        return frozenset()


class CampaignTargeting(BaseModel):
    """A campaign's own restaurant targeting rules, used to seed bulk-add."""

    model_config = _FROZEN

    locations_mode: RuleMode = Field(
        default=RuleMode.allowed, validation_alias=AliasChoices("locations_mode", "locationsMode")
    )
    locations: frozenset[int] = Field(default_factory=frozenset)
    restaurant_types_mode: RuleMode = Field(
        default=RuleMode.allowed,
        validation_alias=AliasChoices("restaurant_types_mode", "restaurantTypesMode"),
    )
    restaurant_types: frozenset[int] = Field(
        default_factory=frozenset,
        validation_alias=AliasChoices("restaurant_types", "restaurantTypes"),
    )
    menu_types_mode: RuleMode = Field(
        default=RuleMode.allowed, validation_alias=AliasChoices("menu_types_mode", "menuTypesMode")
    )
    menu_types: frozenset[int] = Field(
        default_factory=frozenset, validation_alias=AliasChoices("menu_types", "menuTypes")
    )

    def to_rule_set(self) -> RuleSet:
        return RuleSet(
            locations=DimensionRule(mode=self.locations_mode, values=self.locations),
            restaurant_types=DimensionRule(
                mode=self.restaurant_types_mode, values=self.restaurant_types
            ),
            menu_types=DimensionRule(mode=self.menu_types_mode, values=self.menu_types),
        )


_TARGETING_KEYS = {
    "locationsMode",
    "locations",
    "restaurantTypesMode",
    "restaurantTypes",
    "menuTypesMode",
    "menuTypes",
}


class Campaign(BaseModel):
    """Advertising campaign as seen by the targeting engine."""

    model_config = _FROZEN

    id: int = Field(..., description="Campaign identifier")
    name: str = Field(..., description="Campaign name")
    advertiser_id: int | None = Field(
        default=None, validation_alias=AliasChoices("advertiser_id", "advertiserId")
    )
    blocked: bool = Field(default=False, description="Whether the campaign is blocked")
    targeting: CampaignTargeting = Field(
        default_factory=CampaignTargeting, description="Default restaurant targeting rules"
    )

    @model_validator(mode="before")
    @classmethod
    def _lift_flat_targeting(cls, data: Any) -> Any:
        # Persisted campaigns keep their rules as flat camelCase keys.
        if isinstance(data, dict) and "targeting" not in data:
            flat = {k: data[k] for k in _TARGETING_KEYS if k in data}
            if flat:
                data = {k: v for k, v in data.items() if k not in _TARGETING_KEYS}
                data["targeting"] = flat
        return data

    def dimension_values(self, dimension: str) -> frozenset[int]:
        if dimension == Dimension.advertisers:
            return frozenset(_as_id_set(self.advertiser_id))
        return frozenset()


_Item = TypeVar("_Item", bound=BaseModel)


def find_by_id(items: Iterable[_Item], item_id: int) -> _Item | None:
    for item in items:
        if getattr(item, "id", None) == item_id:
            return item
    return None


def names_of(items: Sequence[CatalogItem], ids: Iterable[int]) -> list[str]:
    """Resolve ids to display names; unknown ids render as '-'."""
    names = []
    for item_id in sorted(ids):
        item = find_by_id(items, item_id)
        names.append(item.name if item is not None else "-")
    return names


def _name_or_dash(items: Sequence[CatalogItem], item_id: int | None) -> str:
    if item_id is None:
        return "-"
    return names_of(items, [item_id])[0]


class ReferenceCatalogs(BaseModel):
    """Read-only reference lists supplied by the host application."""

    model_config = ConfigDict(populate_by_name=True)

    restaurants: list[Restaurant] = Field(default_factory=list)
    campaigns: list[Campaign] = Field(default_factory=list)
    cities: list[CatalogItem] = Field(default_factory=list)
    districts: list[District] = Field(default_factory=list)
    restaurant_types: list[CatalogItem] = Field(
        default_factory=list, validation_alias=AliasChoices("restaurant_types", "restaurantTypes")
    )
    menu_types: list[CatalogItem] = Field(
        default_factory=list, validation_alias=AliasChoices("menu_types", "menuTypes")
    )
    price_segments: list[CatalogItem] = Field(
        default_factory=list, validation_alias=AliasChoices("price_segments", "priceSegments")
    )
    placements: list[Placement] = Field(default_factory=list)
    schedules: list[Schedule] = Field(default_factory=list)
    advertisers: list[Advertiser] = Field(default_factory=list)

    @classmethod
    def load_json(cls, path: Path) -> ReferenceCatalogs:
        """Load catalogs from a JSON document. Raises on missing file or invalid schema."""
        return cls.model_validate_json(Path(path).read_text(encoding="utf-8"))

    def restaurant(self, restaurant_id: int) -> Restaurant | None:
        return find_by_id(self.restaurants, restaurant_id)

    def campaign(self, campaign_id: int) -> Campaign | None:
        return find_by_id(self.campaigns, campaign_id)

    def counterparts(self, kind: Literal["restaurant", "campaign"]) -> list[Restaurant] | list[Campaign]:
        if kind == "restaurant":
            return self.restaurants
        if kind == "campaign":
            return self.campaigns
        raise ValueError(f"Unknown counterpart kind: {kind!r}")

    def restaurant_profile(self, restaurant: Restaurant) -> dict[str, Any]:
        """Human-readable attribute summary for a restaurant info card."""
        return {
            "id": restaurant.id,
            "name": restaurant.name,
            "city": _name_or_dash(self.cities, restaurant.city_id),
            "district": _name_or_dash(self.districts, restaurant.district_id),
            "restaurant_types": names_of(self.restaurant_types, restaurant.type_ids),
            "menu_types": names_of(self.menu_types, restaurant.menu_type_ids),
            "price_segment": _name_or_dash(self.price_segments, restaurant.price_segment_id),
        }

    def advertiser_name(self, advertiser_id: int) -> str:
        advertiser = find_by_id(self.advertisers, advertiser_id)
        return advertiser.name if advertiser is not None else f"ID: {advertiser_id}"
