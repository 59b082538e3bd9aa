# search_helpers.py
import re
from typing import Dict, Iterable, List, Optional

from models import ALL_CATEGORIES, Category, Product

# Facets shown for each category: (spec key, label)
CATEGORY_FILTERS = {
    Category.CPU: [("brand", "Brand"), ("socket", "CPU socket"), ("chipset", "Chipset"), ("tdp", "TDP")],
    Category.MB: [("brand", "Brand"), ("socket", "CPU socket"), ("chipset", "Chipset"),
                  ("memoryType", "Memory support"), ("type", "Form factor")],
    Category.GPU: [("brand", "Chip vendor"), ("series", "Series"), ("vram", "VRAM"),
                   ("gpuLength", "Card length"), ("tdp", "TDP")],
    Category.RAM: [("type", "Memory type"), ("capacity", "Capacity")],
    Category.SSD: [("capacity", "Capacity"), ("type", "Interface")],
    Category.CASE: [("brand", "Brand"), ("type", "Form factor"), ("radiatorSupport", "Radiator support"),
                    ("coolerHeight", "Max cooler height"), ("gpuLength", "Max GPU length")],
    Category.PSU: [("wattage", "Wattage"), ("efficiency", "Efficiency"), ("brand", "Brand")],
    Category.COOLER: [("type", "Cooling type"), ("size", "Size"), ("brand", "Brand")],
    Category.AIR_COOLER: [("brand", "Brand"), ("coolerHeight", "Height"), ("socket", "Supported sockets")],
    Category.MONITOR: [("brand", "Brand"), ("resolution", "Resolution"), ("panelType", "Panel"),
                       ("size", "Size"), ("refreshRate", "Refresh rate")],
    Category.SOFTWARE: [("brand", "Publisher"), ("licenseType", "License")],
    Category.OTHERS: [],
}

SORT_MODES = ("default", "price-asc", "price-desc", "name-asc")


def product_search_text(p: Product) -> str:
    """Everything a free-text query can hit, lower-cased."""
    parts = [p.name, p.id, p.description, p.category.value]
    parts.extend(str(v) for v in p.specs.values())
    return " ".join(parts).lower()


def _split_values(raw: str) -> List[str]:
    return [v.strip() for v in raw.split(",")]


def _matches_query(text: str, query: str) -> bool:
    # '|' separates OR groups, whitespace separates AND terms inside a group
    for group in query.lower().split("|"):
        terms = [t for t in re.split(r"\s+", group.strip()) if t]
        if terms and all(t in text for t in terms):
            return True
    return False


def _selected_values(selected) -> List[str]:
    # a bare string is one value, not a sequence of characters
    if isinstance(selected, str):
        return [selected]
    return list(selected or ())


def _matches_filters(p: Product, active_filters: Dict[str, Iterable[str]]) -> bool:
    for key, selected in active_filters.items():
        selected = set(_selected_values(selected))
        if not selected:
            continue
        raw = p.specs.get(key)
        if not raw:
            return False
        if not selected.intersection(_split_values(raw)):
            return False
    return True


def filter_products(products: List[Product], query: str = "", category=ALL_CATEGORIES,
                    active_filters: Optional[Dict[str, Iterable[str]]] = None) -> List[Product]:
    """
    Filter by category, free-text query and spec facets. Input order is kept.

    category may be the "All" sentinel / None (no constraint), a Category, or a
    category value string.
    """
    wanted = None
    if category is not None and category != ALL_CATEGORIES:
        wanted = Category.parse(category)
    active_filters = active_filters or {}
    q = (query or "").strip()

    out = []
    for p in products:
        if wanted is not None and p.category != wanted:
            continue
        if q and not _matches_query(product_search_text(p), q):
            continue
        if active_filters and not _matches_filters(p, active_filters):
            continue
        out.append(p)
    return out


def sort_products(products: List[Product], mode: str = "default") -> List[Product]:
    if mode == "price-asc":
        return sorted(products, key=lambda p: p.price)
    if mode == "price-desc":
        return sorted(products, key=lambda p: p.price, reverse=True)
    if mode == "name-asc":
        return sorted(products, key=lambda p: p.name.lower())
    return list(products)


def get_smart_options(products: List[Product], category, target_key: str, query: str = "",
                      active_filters: Optional[Dict[str, Iterable[str]]] = None) -> List[str]:
    """
    Facet values still reachable for target_key.

    Every other active filter narrows the candidates; the target key's own
    selection does not, so picking a value never hides its siblings.
    """
    others = {k: v for k, v in (active_filters or {}).items() if k != target_key}
    values = set()
    for p in filter_products(products, query, category, others):
        raw = p.specs.get(target_key)
        if raw:
            values.update(_split_values(raw))
    return sorted(values)


def facet_panel(products: List[Product], category, query: str = "",
                active_filters: Optional[Dict[str, Iterable[str]]] = None) -> List[Dict]:
    cat = Category.parse(category)
    active_filters = active_filters or {}
    panel = []
    for key, label in CATEGORY_FILTERS.get(cat, []):
        panel.append({
            "key": key,
            "label": label,
            "options": get_smart_options(products, cat, key, query, active_filters),
            "selected": sorted(_selected_values(active_filters.get(key))),
        })
    return panel


def toggle_filter(active_filters: Dict[str, List[str]], key: str, value: str) -> Dict[str, List[str]]:
    """Return a new filter mapping with value switched on or off for key."""
    current = _selected_values(active_filters.get(key))
    updated = dict(active_filters)
    if value in current:
        current.remove(value)
        if current:
            updated[key] = current
        else:
            updated.pop(key, None)
    else:
        updated[key] = current + [value]
    return updated
