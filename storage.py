# storage.py
import json
import logging
import threading
from pathlib import Path
from typing import List, Optional

from models import CartItem

logger = logging.getLogger("pcbuilder.storage")

_lock = threading.RLock()


def _ensure_dir(path: Path):
    if not path.parent.exists():
        path.parent.mkdir(parents=True, exist_ok=True)


def load_json(path: str, default=None):
    """Read a JSON file; a missing or corrupt file yields `default`."""
    default = {} if default is None else default
    p = Path(path)
    with _lock:
        if not p.exists():
            return default
        try:
            return json.loads(p.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Could not read %s, using default: %s", p, e)
            return default


def save_json(path: str, data):
    p = Path(path)
    with _lock:
        _ensure_dir(p)
        tmp = p.with_suffix(p.suffix + ".tmp")
        tmp.write_text(json.dumps(data, indent=2,
                       ensure_ascii=False), encoding="utf-8")
        tmp.replace(p)


class KeyValueStore:
    """String key -> string value store kept in a single JSON file."""

    def __init__(self, path: str):
        self.path = path

    def get(self, key: str) -> Optional[str]:
        data = load_json(self.path, {})
        if not isinstance(data, dict):
            return None
        value = data.get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str):
        with _lock:
            data = load_json(self.path, {})
            if not isinstance(data, dict):
                data = {}
            data[key] = value
            save_json(self.path, data)

    def delete(self, key: str):
        with _lock:
            data = load_json(self.path, {})
            if isinstance(data, dict) and key in data:
                del data[key]
                save_json(self.path, data)


class MemoryStore(KeyValueStore):
    """In-process store with the same interface; nothing touches disk."""

    def __init__(self):
        super().__init__(path="")
        self._data = {}

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str):
        self._data[key] = value

    def delete(self, key: str):
        self._data.pop(key, None)


def dump_cart(cart: List[CartItem]) -> str:
    return json.dumps([item.to_dict() for item in cart], ensure_ascii=False)


def parse_cart(blob: Optional[str]) -> List[CartItem]:
    """Decode a persisted cart. Anything malformed means "no saved build"."""
    if not blob:
        return []
    try:
        raw = json.loads(blob)
        if not isinstance(raw, list):
            raise ValueError("cart blob is not a list")
        cart = []
        index = {}
        for d in raw:
            item = CartItem.from_dict(d)
            # repeated ids collapse into one entry
            if item.id in index:
                i = index[item.id]
                cart[i] = cart[i].with_quantity(cart[i].quantity + item.quantity)
            else:
                index[item.id] = len(cart)
                cart.append(item)
        return cart
    except (ValueError, KeyError, TypeError) as e:
        logger.warning("Discarding unreadable saved build: %s", e)
        return []


class CartStore:
    """Loads and saves the flat cart list under one key of a KeyValueStore."""

    def __init__(self, kv: KeyValueStore, key: str):
        self.kv = kv
        self.key = key

    def load(self) -> List[CartItem]:
        return parse_cart(self.kv.get(self.key))

    def save(self, cart: List[CartItem]):
        self.kv.set(self.key, dump_cart(cart))
