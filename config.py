# config.py
import os

from dotenv import load_dotenv

# ----------------------------
# Load .env and compute paths
# ----------------------------
load_dotenv()

BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# ----------------------------
# Environment / config
# ----------------------------
HOST = os.getenv("PCB_HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", os.getenv("PCB_PORT", "5000")))
DEBUG_MODE = os.getenv("DEBUG", "False").lower() in ("1", "true", "yes")

GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")

PERSIST_DIR = os.getenv("PCB_PERSIST_DIR", os.path.join(BASE_DIR, ".pcbuilder_data"))
CATALOG_FILE = os.path.join(PERSIST_DIR, "catalog.json")
STATE_FILE = os.path.join(PERSIST_DIR, "state.json")

CART_KEY = "pcbuilder_quote"
TEMPLATES_KEY = "pcbuilder_templates"

CURRENCY = os.getenv("PCB_CURRENCY", "$")

# ----------------------------
# Power budget constants
# ----------------------------
# Per-unit watt estimates for parts that do not declare a TDP.
# Keys are Category values (see models.Category).
POWER_ESTIMATES = {
    "Motherboard": 50,
    "SSD": 10,
    "Liquid Cooler": 35,
    "Air Cooler": 10,
    "Case": 10,
}
RAM_MODULE_WATTS = 15
DUAL_KIT_MARKERS = ("*2", "x2")
MAJOR_COMPONENT_OVERHEAD_WATTS = 30
PSU_HEADROOM_PERCENT = 30
PSU_STEP_WATTS = 50
PSU_WARNING_PERCENT = 70
PSU_CRITICAL_PERCENT = 90
