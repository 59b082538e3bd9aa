# advisor_ai.py
import json
import logging
import re
from typing import Any, Callable, Dict, List, Optional, Tuple

import google.generativeai as genai

import config
from cart import add_item
from models import CartItem, Product

logger = logging.getLogger("pcbuilder.advisor")

# -------------------------- GEMINI SETUP --------------------------

if config.GEMINI_API_KEY:
    genai.configure(api_key=config.GEMINI_API_KEY)
    logger.info("Gemini client initialized | GEMINI_MODEL=%s", config.GEMINI_MODEL)


class AdvisorError(Exception):
    """The suggestion service could not produce a usable answer."""


def simplify_inventory(products: List[Product]) -> List[Dict[str, Any]]:
    """Trim the catalog to what the model needs to pick compatible parts."""
    return [{
        "id": p.id,
        "name": p.name,
        "price": p.price,
        "category": p.category.value,
        "specs": dict(p.specs),
    } for p in products]


def parse_budget(raw: Any) -> Optional[int]:
    """'$45,000' -> 45000; None when there are no digits or the value is not positive."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        return int(raw) if raw > 0 else None
    digits = re.sub(r"[^0-9]", "", str(raw or ""))
    if not digits:
        return None
    value = int(digits)
    return value if value > 0 else None


def build_prompt(inventory: List[Dict[str, Any]], budget: int, usage: str) -> str:
    return f"""
You are a professional PC build assistant. Pick one complete set of parts for the
customer from the INVENTORY below.

CUSTOMER
1. Total budget: {budget}
2. Main usage: {usage}

INVENTORY
{json.dumps(inventory, ensure_ascii=False)}

RULES
1. Compatibility first:
   - CPU and motherboard sockets must match.
   - RAM type (DDR4/DDR5) must be supported by the motherboard.
   - The PSU wattage must cover the CPU and GPU.
2. Keep the total price <= {budget}; if a full build does not fit, get as close as possible.
3. Always include CPU, motherboard, RAM, SSD, PSU and case. Include a GPU when the
   usage needs one (games, content creation) or the CPU has no integrated graphics.
   Include a cooler for high-end CPUs or CPUs without a stock cooler.
4. Only return product ids that appear in the inventory.
5. Answer in JSON only, shaped like:
{{"productIds": ["cpu-1", "mb-2", "ram-1"], "explanation": "Why this build fits the budget and usage"}}
"""


def _gemini_generate(prompt: str) -> str:
    if not config.GEMINI_API_KEY:
        raise AdvisorError("GEMINI_API_KEY is not set")
    try:
        model = genai.GenerativeModel(config.GEMINI_MODEL)
        response = model.generate_content(
            prompt,
            generation_config={"response_mime_type": "application/json"},
        )
        return (getattr(response, "text", None) or "").strip()
    except Exception as e:
        logger.warning("Gemini call failed: %s", e)
        raise AdvisorError(f"AI request failed: {e}") from e


def parse_suggestion(text: str) -> Dict[str, Any]:
    """Decode the model's JSON answer, tolerating a ```json fence around it."""
    cleaned = re.sub(r"^```(?:json)?\s*", "", (text or "").strip())
    cleaned = re.sub(r"\s*```$", "", cleaned)
    try:
        payload = json.loads(cleaned or "{}")
    except ValueError as e:
        raise AdvisorError(f"AI returned invalid JSON: {e}") from e
    if not isinstance(payload, dict):
        raise AdvisorError("AI returned an unexpected payload")
    ids = payload.get("productIds") or []
    if not isinstance(ids, list):
        raise AdvisorError("productIds must be a list")
    return {
        "productIds": [str(i) for i in ids],
        "explanation": str(payload.get("explanation") or ""),
    }


def generate_smart_build(products: List[Product], budget: int, usage: str,
                         generate: Optional[Callable[[str], str]] = None) -> Dict[str, Any]:
    """
    Ask the model for a build. Returns {"productIds": [...], "explanation": str}.
    Raises AdvisorError on any failure; nothing is retried.
    """
    if not budget or budget <= 0:
        raise ValueError("budget must be a positive number")
    if not (usage or "").strip():
        raise ValueError("usage is required")
    prompt = build_prompt(simplify_inventory(products), budget, usage.strip())
    logger.info("Smart build request: budget=%s usage=%s inventory=%d", budget, usage, len(products))
    text = (generate or _gemini_generate)(prompt)
    return parse_suggestion(text)


def apply_suggestion(suggestion: Dict[str, Any], products: List[Product]) -> Tuple[List[CartItem], List[str]]:
    """
    Turn suggested ids into a fresh cart (quantity 1 each, repeats merge).
    Ids missing from the catalog are ignored and returned separately.
    """
    by_id = {p.id: p for p in products}
    cart = []
    ignored = []
    for pid in suggestion.get("productIds") or []:
        product = by_id.get(pid)
        if product is None:
            ignored.append(pid)
            continue
        cart = add_item(cart, product, 1)
    if ignored:
        logger.info("Ignored %d unknown product id(s) from AI: %s", len(ignored), ignored)
    return cart, ignored
