# quotation.py
import math
from typing import Dict, List

import config
from models import CartItem
from power_budget import total_price

# (periods, multiplier when the card fee cap applies, multiplier otherwise)
CREDIT_PLANS = [
    (3, 1.03, 1.0549),
    (6, 1.035, 1.0599),
    (12, 1.06, 1.0849),
    (24, 1.06, 1.0849),
]
CREDIT_FEE_RATE = 0.0249
CREDIT_FEE_CAP = 498

# (periods, financing factor)
CARDLESS_PLANS = [
    (6, 0.9551),
    (9, 0.9391),
    (12, 0.92218),
    (15, 0.905),
    (18, 0.885),
    (21, 0.8735),
    (24, 0.8624),
    (30, 0.83333),
]


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _money(value: int, currency: str) -> str:
    return f"{currency}{value:,}"


def format_share_text(cart: List[CartItem], currency: str = None, title: str = "PC Build Quote") -> str:
    """Plain-text build list for copy/paste sharing."""
    currency = config.CURRENCY if currency is None else currency
    lines = [
        f"[{title}]",
        f"Total: {_money(total_price(cart), currency)}",
        "----------",
    ]
    for item in cart:
        lines.append(f"{item.category.value}: {item.name} x{item.quantity} - {_money(item.line_total, currency)}")
    lines.append("----------")
    return "\n".join(lines)


def credit_card_plan(price: int, periods: int, rate_capped: float, rate_plain: float) -> Dict[str, int]:
    if price * CREDIT_FEE_RATE > CREDIT_FEE_CAP:
        total = price * rate_capped + CREDIT_FEE_CAP
    else:
        total = price * rate_plain
    total = _round_half_up(total)
    return {"periods": periods, "total": total, "monthly": _round_half_up(total / periods)}


def cardless_plan(price: int, periods: int, factor: float) -> Dict[str, int]:
    principal = math.ceil(price / factor)
    monthly = math.ceil(principal / periods)
    return {"periods": periods, "total": monthly * periods, "monthly": monthly}


def installment_plans(price: int) -> Dict[str, List[Dict[str, int]]]:
    """Monthly payment tables for a quote total; empty when there is nothing to pay."""
    if price <= 0:
        return {"credit": [], "cardless": []}
    return {
        "credit": [credit_card_plan(price, *plan) for plan in CREDIT_PLANS],
        "cardless": [cardless_plan(price, *plan) for plan in CARDLESS_PLANS],
    }
