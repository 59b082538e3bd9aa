# power_budget.py
from typing import Any, Dict, List, Optional

import config
from builder_logic import compute_diagnostics, parse_wattage, primary, project_build_state
from models import CartItem, Category

MAJOR_CATEGORIES = (Category.CPU, Category.GPU)


def _estimate_table(estimates: Optional[Dict[str, int]]) -> Dict[Category, int]:
    table = estimates if estimates is not None else config.POWER_ESTIMATES
    return {Category.parse(k): int(v) for k, v in table.items()}


def is_dual_kit(name: str) -> bool:
    n = (name or "").lower()
    return any(marker in n for marker in config.DUAL_KIT_MARKERS)


def compute_total_draw(cart: List[CartItem], estimates: Optional[Dict[str, int]] = None) -> int:
    """
    Estimated peak draw in watts.

    CPU/GPU use their declared TDP, RAM counts per module (a dual kit counts
    twice), other listed categories use fixed per-unit estimates, and a flat
    overhead is added once any CPU or GPU is present.
    """
    table = _estimate_table(estimates)
    total = 0
    has_major = False
    for item in cart:
        if item.category in MAJOR_CATEGORIES:
            total += parse_wattage(item.specs.tdp) * item.quantity
            has_major = True
        elif item.category == Category.RAM:
            modules = 2 if is_dual_kit(item.name) else 1
            total += config.RAM_MODULE_WATTS * item.quantity * modules
        else:
            total += table.get(item.category, 0) * item.quantity
    if has_major:
        total += config.MAJOR_COMPONENT_OVERHEAD_WATTS
    return total


def recommended_psu_wattage(total_draw: int, headroom_percent: Optional[int] = None,
                            step: Optional[int] = None) -> int:
    """Draw plus headroom, rounded up to the next PSU step. 0 when nothing draws power."""
    if total_draw <= 0:
        return 0
    headroom = config.PSU_HEADROOM_PERCENT if headroom_percent is None else headroom_percent
    step = step or config.PSU_STEP_WATTS
    # integer ceil(total * (1 + headroom%) / step) * step
    scaled = total_draw * (100 + headroom)
    return -(-scaled // (100 * step)) * step


def total_price(cart: List[CartItem]) -> int:
    return sum(item.price * item.quantity for item in cart)


def psu_load(total_draw: int, cart: List[CartItem]) -> Dict[str, Any]:
    """Load on the selected PSU (or on the recommended size when none is picked)."""
    psu = primary(project_build_state(cart), Category.PSU)
    installed = parse_wattage(psu.specs.wattage) if psu else 0
    recommended = recommended_psu_wattage(total_draw)
    capacity = installed or recommended
    percent = round(total_draw * 100.0 / capacity, 1) if capacity else 0.0
    if percent > config.PSU_CRITICAL_PERCENT:
        level = "critical"
    elif percent > config.PSU_WARNING_PERCENT:
        level = "warning"
    else:
        level = "ok"
    return {
        "installed_wattage": installed,
        "recommended_wattage": recommended,
        "load_percent": percent,
        "level": level,
    }


def summarize_build(cart: List[CartItem]) -> Dict[str, Any]:
    """Every derived value the UI needs, recomputed from the cart in one pass."""
    build = project_build_state(cart)
    draw = compute_total_draw(cart)
    return {
        "items": [item.to_dict() for item in cart],
        "build": {cat.value: [item.id for item in items] for cat, items in build.items()},
        "diagnostics": compute_diagnostics(cart),
        "total_draw": draw,
        "recommended_psu": recommended_psu_wattage(draw),
        "total_price": total_price(cart),
        "psu": psu_load(draw, cart),
    }
