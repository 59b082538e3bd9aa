# catalog.py
import csv
import io
import logging
import re
import threading
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from components_data import data as default_data
from models import Category, Product
from storage import load_json, save_json

logger = logging.getLogger("pcbuilder.catalog")

CORE_FIELDS = ("id", "name", "price", "category", "description", "image")
REQUIRED_HEADERS = ("name", "price", "category")


def now_ms() -> int:
    return int(time.time() * 1000)


def default_products() -> List[Product]:
    """Flatten the bundled catalog (category -> id -> record) into Products."""
    products = []
    for comps in default_data.values():
        for pid, rec in comps.items():
            products.append(Product.from_dict({"id": pid, **rec}))
    return products


# ==========================================
# ============== VALIDATION ================
# ==========================================


def validate_product_record(record: Dict[str, Any]) -> Optional[str]:
    """Return the reason a raw product record is unusable, or None when it is fine."""
    if not isinstance(record, dict):
        return "record must be an object"
    if not str(record.get("name") or "").strip():
        return "missing name"
    price = record.get("price")
    if isinstance(price, bool) or not isinstance(price, (int, float)):
        return f"invalid price: {price!r}"
    if price < 0 or price != int(price):
        return f"price must be a whole non-negative number: {price!r}"
    try:
        Category.parse(record.get("category"))
    except ValueError:
        return f"invalid category: {record.get('category')!r}"
    specs = record.get("specDetails")
    if specs is not None and not isinstance(specs, dict):
        return "specDetails must be an object"
    return None


# ==========================================
# ============== CSV IMPORT ================
# ==========================================


@dataclass
class ImportRow:
    """One parsed CSV row with its import status: new, update or error."""
    record: Dict[str, Any]
    status: str
    error: str = ""
    original_price: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.status != "error"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "record": self.record,
            "status": self.status,
            "error": self.error,
            "originalPrice": self.original_price,
        }


def _parse_price_cell(value: Optional[str]):
    # "$12,000" -> 12000; anything without digits is left for validation to reject
    text = re.sub(r"[^0-9.\-]+", "", value or "")
    if not text:
        return value
    try:
        num = float(text)
    except ValueError:
        return value
    return int(num) if num == int(num) else num


def parse_products_csv(text: str, existing: List[Product], match_by_name: bool = False) -> List[ImportRow]:
    """
    Parse catalog CSV text into per-row import previews.

    The header must contain at least name, price and category. Columns other
    than the core fields become spec entries (empty cells are skipped). Lines
    starting with '#' or '//' are comments. A bad row is reported with a
    reason and does not stop the rest of the batch.
    """
    lines = [ln for ln in (text or "").strip().splitlines()
             if not ln.strip().startswith("#") and not ln.strip().startswith("//")]
    if len(lines) < 2:
        raise ValueError("CSV is empty or has no header row")

    reader = csv.reader(io.StringIO("\n".join(lines)), skipinitialspace=True)
    rows = list(reader)
    headers = [h.strip() for h in rows[0]]
    missing = [h for h in REQUIRED_HEADERS if h not in headers]
    if missing:
        raise ValueError(f"CSV header must include: {', '.join(REQUIRED_HEADERS)} (missing {', '.join(missing)})")

    by_id = {p.id: p for p in existing}
    by_name = {p.name.strip().lower(): p for p in existing}
    stamp = now_ms()
    out = []

    for index, values in enumerate(rows[1:]):
        if not any(v.strip() for v in values):
            continue
        record = {"specDetails": {}}
        for i, header in enumerate(headers):
            value = values[i].strip() if i < len(values) else ""
            if header in CORE_FIELDS:
                record[header] = _parse_price_cell(value) if header == "price" else value
            elif value:
                record["specDetails"][header] = value

        found = by_id.get(record.get("id") or "")
        if found is None and match_by_name and record.get("name"):
            found = by_name.get(record["name"].strip().lower())
            if found is not None:
                record["id"] = found.id
        if not str(record.get("id") or "").strip():
            record["id"] = f"{stamp}-{index}"

        reason = validate_product_record(record)
        if reason:
            out.append(ImportRow(record, "error", reason))
            continue
        record["category"] = Category.parse(record["category"]).value
        out.append(ImportRow(record, "update" if found else "new",
                             original_price=found.price if found else None))
    return out


def rows_to_products(rows: List[ImportRow]) -> List[Product]:
    return [Product.from_dict(r.record) for r in rows if r.ok]


# ==========================================
# ============= CATALOG STORE ==============
# ==========================================


class CatalogStore:
    """
    Product catalog persisted as a JSON list. Writes go to disk first and only
    then replace the in-memory list, so a failed write leaves the catalog as it
    was and is reported as (False, reason).
    """

    def __init__(self, path: str, seed: Optional[List[Product]] = None):
        self.path = path
        self._lock = threading.RLock()
        raw = load_json(path, None)
        if raw is None or not isinstance(raw, list):
            self._products = list(seed) if seed is not None else default_products()
        else:
            self._products = []
            for rec in raw:
                reason = validate_product_record(rec)
                if not reason and not str(rec.get("id") or "").strip():
                    reason = "missing id"
                if reason:
                    logger.warning("Skipping stored product %r: %s",
                                   rec.get("id") if isinstance(rec, dict) else rec, reason)
                    continue
                self._products.append(Product.from_dict(rec))

    def list(self) -> List[Product]:
        with self._lock:
            return list(self._products)

    def get(self, product_id: str) -> Optional[Product]:
        with self._lock:
            for p in self._products:
                if p.id == product_id:
                    return p
        return None

    def _commit(self, products: List[Product]) -> Tuple[bool, str]:
        try:
            save_json(self.path, [p.to_dict() for p in products])
        except OSError as e:
            logger.error("Catalog write failed: %s", e)
            return False, f"catalog write failed: {e}"
        self._products = products
        return True, "ok"

    def upsert(self, product: Product) -> Tuple[bool, str]:
        return self.bulk_upsert([product])

    def bulk_upsert(self, products: List[Product]) -> Tuple[bool, str]:
        stamp = now_ms()
        with self._lock:
            updated = list(self._products)
            index = {p.id: i for i, p in enumerate(updated)}
            for product in products:
                stamped = product.stamped(stamp)
                if product.id in index:
                    updated[index[product.id]] = stamped
                else:
                    index[product.id] = len(updated)
                    updated.append(stamped)
            ok, msg = self._commit(updated)
        if ok:
            logger.info("Upserted %d product(s)", len(products))
        return ok, msg

    def delete(self, product_id: str) -> Tuple[bool, str]:
        with self._lock:
            remaining = [p for p in self._products if p.id != product_id]
            if len(remaining) == len(self._products):
                return False, f"product not found: {product_id}"
            return self._commit(remaining)

    def reset_to_default(self) -> Tuple[bool, str]:
        stamp = now_ms()
        with self._lock:
            return self._commit([p.stamped(stamp) for p in default_products()])
