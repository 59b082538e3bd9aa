# builder_logic.py
import re
from typing import Callable, Dict, List, Optional

from models import CartItem, Category

BuildState = Dict[Category, List[CartItem]]


# ==========================================
# =========== HELPER FUNCTIONS =============
# ==========================================


def parse_wattage(val: Optional[str]) -> int:
    """First run of digits in '125W' / '~200 W'; 0 when there is none."""
    if not val:
        return 0
    m = re.search(r"(\d+)", str(val))
    return int(m.group(1)) if m else 0


def parse_dimension(val: Optional[str]) -> Optional[int]:
    """
    First run of digits in '358mm' / '165 mm'.

    None means "unknown": an unknown limit is unbounded and an unknown
    measurement cannot exceed anything, so dimension rules never fire on it.
    """
    if not val:
        return None
    m = re.search(r"(\d+)", str(val))
    return int(m.group(1)) if m else None


def _shown(value: Optional[str]) -> str:
    return value or "unspecified"


def _exceeds(measured: Optional[int], limit: Optional[int]) -> bool:
    if measured is None or limit is None:
        return False
    return measured > limit


def project_build_state(cart: List[CartItem]) -> BuildState:
    """Group cart items by category; every category key is always present."""
    state = {cat: [] for cat in Category}
    for item in cart:
        state[item.category].append(item)
    return state


def primary(build: BuildState, category: Category) -> Optional[CartItem]:
    """The first item of a category is the one cross-category rules look at."""
    items = build.get(category) or []
    return items[0] if items else None


# ==========================================
# ============ COMPATIBILITY ===============
# ==========================================
# Each rule: (item, build) -> message or None. Only rules whose category
# matches the item do anything; RULES order is the tie-break order.


def mb_vs_cpu_socket(item: CartItem, build: BuildState) -> Optional[str]:
    if item.category != Category.MB:
        return None
    cpu = primary(build, Category.CPU)
    if cpu and cpu.specs.socket and item.specs.socket != cpu.specs.socket:
        return f"Socket mismatch: CPU {cpu.specs.socket} vs motherboard {_shown(item.specs.socket)}"
    return None


def mb_vs_ram_type(item: CartItem, build: BuildState) -> Optional[str]:
    if item.category != Category.MB or not item.specs.memory_type:
        return None
    ram = primary(build, Category.RAM)
    if ram and ram.specs.ram_type and ram.specs.ram_type != item.specs.memory_type:
        return f"Memory type mismatch: RAM {ram.specs.ram_type} vs motherboard supports {item.specs.memory_type}"
    return None


def cpu_vs_mb_socket(item: CartItem, build: BuildState) -> Optional[str]:
    if item.category != Category.CPU:
        return None
    mb = primary(build, Category.MB)
    if mb and mb.specs.socket and item.specs.socket != mb.specs.socket:
        return f"Socket mismatch: motherboard {mb.specs.socket} vs CPU {_shown(item.specs.socket)}"
    return None


def ram_vs_mb_type(item: CartItem, build: BuildState) -> Optional[str]:
    if item.category != Category.RAM:
        return None
    mb = primary(build, Category.MB)
    if mb and mb.specs.memory_type and item.specs.ram_type != mb.specs.memory_type:
        return f"Memory type mismatch: motherboard supports {mb.specs.memory_type} vs RAM {_shown(item.specs.ram_type)}"
    return None


def ram_mixing(item: CartItem, build: BuildState) -> Optional[str]:
    if item.category != Category.RAM:
        return None
    other = next((r for r in build.get(Category.RAM) or [] if r.id != item.id), None)
    if other and other.specs.ram_type != item.specs.ram_type:
        return f"Mixed RAM warning: {_shown(other.specs.ram_type)} with {_shown(item.specs.ram_type)}"
    return None


def gpu_vs_case_length(item: CartItem, build: BuildState) -> Optional[str]:
    if item.category != Category.GPU:
        return None
    case = primary(build, Category.CASE)
    if not case or not case.specs.gpu_length:
        return None
    limit = parse_dimension(case.specs.gpu_length)
    length = parse_dimension(item.specs.gpu_length)
    if _exceeds(length, limit):
        return f"GPU too long: card {length}mm > case limit {limit}mm"
    return None


def case_vs_gpu_length(item: CartItem, build: BuildState) -> Optional[str]:
    if item.category != Category.CASE:
        return None
    gpu = primary(build, Category.GPU)
    if not gpu or not gpu.specs.gpu_length:
        return None
    limit = parse_dimension(item.specs.gpu_length)
    length = parse_dimension(gpu.specs.gpu_length)
    if _exceeds(length, limit):
        return f"Case too small: GPU limit {limit}mm < card {length}mm"
    return None


def cooler_vs_case_height(item: CartItem, build: BuildState) -> Optional[str]:
    if item.category != Category.AIR_COOLER:
        return None
    case = primary(build, Category.CASE)
    if not case or not case.specs.cooler_height:
        return None
    limit = parse_dimension(case.specs.cooler_height)
    height = parse_dimension(item.specs.cooler_height)
    if _exceeds(height, limit):
        return f"Cooler too tall: {height}mm > case limit {limit}mm"
    return None


def case_vs_cooler_height(item: CartItem, build: BuildState) -> Optional[str]:
    if item.category != Category.CASE:
        return None
    cooler = primary(build, Category.AIR_COOLER)
    if not cooler or not cooler.specs.cooler_height:
        return None
    limit = parse_dimension(item.specs.cooler_height)
    height = parse_dimension(cooler.specs.cooler_height)
    if _exceeds(height, limit):
        return f"Case too narrow: cooler limit {limit}mm < cooler {height}mm"
    return None


Rule = Callable[[CartItem, BuildState], Optional[str]]

RULES: List[Rule] = [
    mb_vs_cpu_socket,
    mb_vs_ram_type,
    cpu_vs_mb_socket,
    ram_vs_mb_type,
    ram_mixing,
    gpu_vs_case_length,
    case_vs_gpu_length,
    cooler_vs_case_height,
    case_vs_cooler_height,
]


def check_compatibility(item: CartItem, build: BuildState, rules: Optional[List[Rule]] = None) -> Optional[str]:
    """First matching rule's message for this item, or None when nothing conflicts."""
    for rule in rules or RULES:
        message = rule(item, build)
        if message:
            return message
    return None


def compute_diagnostics(cart: List[CartItem]) -> Dict[str, Optional[str]]:
    """Per-item messages, recomputed from scratch against the whole cart."""
    build = project_build_state(cart)
    return {item.id: check_compatibility(item, build) for item in cart}
