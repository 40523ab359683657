import os
from pathlib import Path
from dotenv import load_dotenv

# --- Base Directory ---
BASE_DIR = Path(__file__).resolve().parent.parent

# --- Load Environment Variables ---
load_dotenv(BASE_DIR / ".env")

# --- Data Source ---
# "memory" starts from the built-in demo data, "csv" loads the files in INPUT_DIR.
DATA_SOURCE = os.getenv("DATA_SOURCE", "memory").lower()

# --- Path Configuration ---
INPUT_DIR = BASE_DIR / os.getenv("INPUT_DIR", "input")
OUTPUT_DIR = BASE_DIR / os.getenv("OUTPUT_DIR", "output")
LOG_DIR = BASE_DIR / os.getenv("LOG_DIR", "logs")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# --- Filename Configuration ---
PRODUCTS_FILENAME = os.getenv("PRODUCTS_FILENAME", "products.csv")
INVENTORY_FILENAME = os.getenv("INVENTORY_FILENAME", "inventory.csv")
CUSTOMERS_FILENAME = os.getenv("CUSTOMERS_FILENAME", "customers.csv")
ORDERS_FILENAME = os.getenv("ORDERS_FILENAME", "orders.csv")

# --- Webhook ---
WEBHOOK_URL = os.getenv("WEBHOOK_URL")
WEBHOOK_TIMEOUT = int(os.getenv("WEBHOOK_TIMEOUT", "15"))

# --- Order Line Items ---
# orders.csv encodes each line item as "<product id>x<quantity>", e.g. "3x12".
LINE_ITEM_SEPARATOR = "x"
