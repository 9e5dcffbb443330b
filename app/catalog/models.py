from dataclasses import dataclass, field
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.catalog import fields


def _object_id(raw: dict[str, Any]) -> Optional[str]:
    value = raw.get("id")
    return value if isinstance(value, str) and value else None


@dataclass(frozen=True)
class CatalogItemVariation:
    """ITEM_VARIATION object, either top-level or embedded in an item."""

    raw: dict[str, Any]
    type: Literal["ITEM_VARIATION"] = "ITEM_VARIATION"

    @property
    def id(self) -> Optional[str]:
        return _object_id(self.raw)

    @property
    def item_id(self) -> Any:
        return fields.probe(self.raw, fields.VARIATION_ITEM_ID)

    @property
    def category_id(self) -> Optional[str]:
        value = fields.probe(self.raw, fields.VARIATION_CATEGORY_ID)
        if isinstance(value, str) and value:
            return value
        return None

    @property
    def price_amount(self) -> Any:
        return fields.probe(self.raw, fields.VARIATION_PRICE_AMOUNT)

    @property
    def image_ids(self) -> list:
        value = fields.probe(self.raw, fields.VARIATION_IMAGE_IDS)
        return value if isinstance(value, list) else []


@dataclass(frozen=True)
class CatalogCategory:
    raw: dict[str, Any]
    type: Literal["CATEGORY"] = "CATEGORY"

    @property
    def id(self) -> Optional[str]:
        return _object_id(self.raw)

    @property
    def name(self) -> Any:
        return fields.probe(self.raw, fields.CATEGORY_NAME)


@dataclass(frozen=True)
class CatalogItem:
    raw: dict[str, Any]
    type: Literal["ITEM"] = "ITEM"

    @property
    def id(self) -> Optional[str]:
        return _object_id(self.raw)

    @property
    def name(self) -> Any:
        return fields.probe(self.raw, fields.ITEM_NAME)

    @property
    def description(self) -> Optional[str]:
        return fields.probe(self.raw, fields.ITEM_DESCRIPTION)

    @property
    def categories(self) -> Any:
        return fields.probe(self.raw, fields.ITEM_CATEGORIES)

    @property
    def variations(self) -> list[CatalogItemVariation]:
        embedded = fields.probe(self.raw, fields.ITEM_VARIATIONS)
        if not isinstance(embedded, list):
            return []
        return [CatalogItemVariation(v) for v in embedded if isinstance(v, dict)]

    @property
    def image_ids(self) -> list:
        value = fields.probe(self.raw, fields.ITEM_IMAGE_IDS)
        return value if isinstance(value, list) else []

    @property
    def is_deleted(self) -> bool:
        return bool(fields.probe(self.raw, fields.IS_DELETED))


@dataclass(frozen=True)
class CatalogImage:
    raw: dict[str, Any]
    type: Literal["IMAGE"] = "IMAGE"

    @property
    def id(self) -> Optional[str]:
        return _object_id(self.raw)

    @property
    def url(self) -> Optional[str]:
        return fields.probe(self.raw, fields.IMAGE_URL)


@dataclass(frozen=True)
class CatalogModifier:
    raw: dict[str, Any]
    type: Literal["MODIFIER"] = "MODIFIER"

    @property
    def id(self) -> Optional[str]:
        return _object_id(self.raw)

    @property
    def data(self) -> dict[str, Any]:
        # Embedded modifiers sometimes carry their fields at the top level
        value = fields.probe(self.raw, fields.MODIFIER_DATA)
        return value if isinstance(value, dict) else self.raw

    @property
    def name(self) -> Any:
        return self.data.get("name")

    @property
    def price_amount(self) -> Any:
        return fields.probe(self.data, fields.MODIFIER_PRICE_AMOUNT)


@dataclass(frozen=True)
class CatalogModifierList:
    raw: dict[str, Any]
    type: Literal["MODIFIER_LIST"] = "MODIFIER_LIST"

    @property
    def id(self) -> Optional[str]:
        return _object_id(self.raw)

    @property
    def name(self) -> Any:
        return fields.probe(self.raw, fields.MODIFIER_LIST_NAME)

    @property
    def selection_type(self) -> str:
        value = fields.probe(self.raw, fields.MODIFIER_LIST_SELECTION_TYPE)
        return value if value in ("SINGLE", "MULTIPLE") else "SINGLE"

    @property
    def modifier_entries(self) -> list:
        value = fields.probe(self.raw, fields.MODIFIER_LIST_MODIFIERS)
        return value if isinstance(value, list) else []


CatalogObject = Union[
    CatalogItem,
    CatalogCategory,
    CatalogItemVariation,
    CatalogImage,
    CatalogModifier,
    CatalogModifierList,
]


@dataclass(frozen=True)
class PartitionedCatalog:
    items: list[CatalogItem] = field(default_factory=list)
    categories: list[CatalogCategory] = field(default_factory=list)
    item_variations: list[CatalogItemVariation] = field(default_factory=list)
    images: list[CatalogImage] = field(default_factory=list)
    modifiers: list[CatalogModifier] = field(default_factory=list)
    modifier_lists: list[CatalogModifierList] = field(default_factory=list)


class NormalizedItem(BaseModel):
    """
    Projection of one ITEM. `id` is None only for an item with no id at
    all, which is also the one case that gets the name "Unknown".
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: Optional[str]
    name: str
    category_ids: tuple[str, ...] = ()
    category_names: tuple[str, ...] = ()


class Modifier(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    price: float = 0.0
    square_id: str


class ModifierList(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    selection_type: Literal["SINGLE", "MULTIPLE"] = "SINGLE"
    modifiers: tuple[Modifier, ...] = ()
    square_id: str
    required: bool = False


class MenuItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: Optional[str]
    name: str
    description: Optional[str] = None
    price: float = 0.0
    category: str = "Uncategorized"
    category_id: Optional[str] = None
    image_url: Optional[str] = None
    available: bool = True
    square_id: Optional[str] = None
    item_type: Literal["food", "drinks"] = "food"
    modifier_lists: tuple[ModifierList, ...] = ()
