# build_templates.py
import json
import logging
import time
from typing import List, Optional, Tuple

from cart import add_item
from models import BuildTemplate, CartItem, Product, TemplateEntry
from storage import KeyValueStore

logger = logging.getLogger("pcbuilder.templates")


def make_template(name: str, cart: List[CartItem], timestamp: Optional[int] = None) -> BuildTemplate:
    """Snapshot the cart as product references (ids + quantities), not copies."""
    name = (name or "").strip()
    if not name:
        raise ValueError("template name is required")
    if not cart:
        raise ValueError("cannot save an empty build")
    ts = timestamp if timestamp is not None else int(time.time() * 1000)
    return BuildTemplate(
        id=str(ts),
        name=name,
        timestamp=ts,
        items=[TemplateEntry(item.id, item.quantity) for item in cart],
    )


def resolve_template(template: BuildTemplate, catalog: List[Product]) -> Tuple[List[CartItem], int]:
    """
    Re-resolve a template against the live catalog.
    Returns (cart, dropped) where dropped counts entries whose product is gone.
    """
    by_id = {p.id: p for p in catalog}
    cart = []
    dropped = 0
    for entry in template.items:
        product = by_id.get(entry.product_id)
        if product is None or entry.quantity < 1:
            dropped += 1
            continue
        cart = add_item(cart, product, entry.quantity)
    if dropped:
        logger.warning("Template %r: %d product(s) no longer available, skipped",
                       template.name, dropped)
    return cart, dropped


class TemplateStore:
    """Templates kept newest-first as one JSON blob under a key."""

    def __init__(self, kv: KeyValueStore, key: str):
        self.kv = kv
        self.key = key

    def list(self) -> List[BuildTemplate]:
        blob = self.kv.get(self.key)
        if not blob:
            return []
        try:
            return [BuildTemplate.from_dict(d) for d in json.loads(blob)]
        except (ValueError, KeyError, TypeError) as e:
            logger.warning("Discarding unreadable templates: %s", e)
            return []

    def get(self, template_id: str) -> Optional[BuildTemplate]:
        return next((t for t in self.list() if t.id == template_id), None)

    def _write(self, templates: List[BuildTemplate]):
        self.kv.set(self.key, json.dumps([t.to_dict() for t in templates], ensure_ascii=False))

    def save(self, name: str, cart: List[CartItem]) -> BuildTemplate:
        template = make_template(name, cart)
        self._write([template] + self.list())
        return template

    def delete(self, template_id: str) -> bool:
        templates = self.list()
        remaining = [t for t in templates if t.id != template_id]
        if len(remaining) == len(templates):
            return False
        self._write(remaining)
        return True
