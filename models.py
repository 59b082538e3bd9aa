# models.py
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, List, Optional


class Category(str, Enum):
    CPU = "CPU"
    MB = "Motherboard"
    GPU = "GPU"
    RAM = "RAM"
    SSD = "SSD"
    CASE = "Case"
    PSU = "PSU"
    COOLER = "Liquid Cooler"
    AIR_COOLER = "Air Cooler"
    MONITOR = "Monitor"
    SOFTWARE = "Software"
    OTHERS = "Other"

    @classmethod
    def parse(cls, value: Any) -> "Category":
        """Accept an enum member, its value ('Air Cooler') or its name ('AIR_COOLER')."""
        if isinstance(value, cls):
            return value
        text = str(value or "").strip()
        for member in cls:
            if text == member.value or text.upper() == member.name:
                return member
        raise ValueError(f"unknown category: {value!r}")


# Sentinel accepted by the filter engine meaning "every category".
ALL_CATEGORIES = "All"


class ProductSpecs(dict):
    """
    Open spec bag (spec key -> string value) with typed accessors for the keys
    the compatibility and power rules read. Unknown keys are kept as-is.
    Empty strings read as "not declared".
    """

    def _text(self, key: str) -> Optional[str]:
        value = self.get(key)
        if value is None:
            return None
        value = str(value)
        return value if value.strip() else None

    @property
    def brand(self) -> Optional[str]:
        return self._text("brand")

    @property
    def socket(self) -> Optional[str]:
        return self._text("socket")

    @property
    def ram_type(self) -> Optional[str]:
        # RAM modules (and SSD/case form factors) declare their kind under "type"
        return self._text("type")

    @property
    def memory_type(self) -> Optional[str]:
        return self._text("memoryType")

    @property
    def tdp(self) -> Optional[str]:
        return self._text("tdp")

    @property
    def wattage(self) -> Optional[str]:
        return self._text("wattage")

    @property
    def gpu_length(self) -> Optional[str]:
        return self._text("gpuLength")

    @property
    def cooler_height(self) -> Optional[str]:
        return self._text("coolerHeight")

    def values_for(self, key: str) -> List[str]:
        """Split a multi-value spec ("LGA1700, AM5") into trimmed parts."""
        raw = self._text(key)
        if raw is None:
            return []
        return [v.strip() for v in raw.split(",")]


@dataclass(frozen=True)
class Product:
    id: str
    name: str
    price: int
    category: Category
    description: str = ""
    image: Optional[str] = None
    specs: ProductSpecs = field(default_factory=ProductSpecs)
    last_updated: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        d = {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "category": self.category.value,
            "description": self.description,
            "specDetails": dict(self.specs),
        }
        if self.image:
            d["image"] = self.image
        if self.last_updated is not None:
            d["lastUpdated"] = self.last_updated
        return d

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Product":
        if not isinstance(d, dict):
            raise ValueError("product record must be an object")
        price = d["price"]
        if isinstance(price, bool) or not isinstance(price, (int, float)):
            raise ValueError(f"price must be a number, got {price!r}")
        specs = d.get("specDetails") or {}
        if not isinstance(specs, dict):
            raise ValueError("specDetails must be an object")
        return cls(
            id=str(d["id"]),
            name=str(d["name"]),
            price=int(price),
            category=Category.parse(d["category"]),
            description=str(d.get("description") or ""),
            image=d.get("image") or None,
            specs=ProductSpecs({str(k): str(v) for k, v in specs.items() if v is not None}),
            last_updated=d.get("lastUpdated"),
        )

    def stamped(self, timestamp: int) -> "Product":
        return replace(self, last_updated=timestamp)


@dataclass(frozen=True)
class CartItem:
    product: Product
    quantity: int = 1

    @property
    def id(self) -> str:
        return self.product.id

    @property
    def name(self) -> str:
        return self.product.name

    @property
    def category(self) -> Category:
        return self.product.category

    @property
    def price(self) -> int:
        return self.product.price

    @property
    def specs(self) -> ProductSpecs:
        return self.product.specs

    @property
    def line_total(self) -> int:
        return self.product.price * self.quantity

    def with_quantity(self, quantity: int) -> "CartItem":
        return replace(self, quantity=quantity)

    def to_dict(self) -> Dict[str, Any]:
        # persisted shape: the product record flattened with its quantity
        d = self.product.to_dict()
        d["quantity"] = self.quantity
        return d

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "CartItem":
        if not isinstance(d, dict):
            raise ValueError("cart item must be an object")
        quantity = d.get("quantity", 1)
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise ValueError(f"invalid quantity: {quantity!r}")
        return cls(product=Product.from_dict(d), quantity=quantity)


@dataclass(frozen=True)
class TemplateEntry:
    product_id: str
    quantity: int


@dataclass(frozen=True)
class BuildTemplate:
    id: str
    name: str
    timestamp: int
    items: List[TemplateEntry] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "timestamp": self.timestamp,
            "items": [{"productId": e.product_id, "quantity": e.quantity} for e in self.items],
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "BuildTemplate":
        return cls(
            id=str(d["id"]),
            name=str(d["name"]),
            timestamp=int(d["timestamp"]),
            items=[TemplateEntry(str(e["productId"]), int(e["quantity"])) for e in d.get("items") or []],
        )
