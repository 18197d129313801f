import os
from dotenv import load_dotenv

load_dotenv()

# --- Clock ---
# IANA zone name (e.g. "Europe/Oslo"). Empty = system local time.
TIMEZONE = os.getenv("DAGMAAL_TIMEZONE") or None

LOG_DIR = os.getenv("DAGMAAL_LOG_DIR", "logs")
# DEBUG shows each filter step of the deal list
LOG_LEVEL = os.getenv("DAGMAAL_LOG_LEVEL", "INFO").upper()

# --- Popularity ---
# Product tuning values, not derived.
POPULARITY_DISCOUNT_WEIGHT = float(os.getenv("POPULARITY_DISCOUNT_WEIGHT", "2"))
POPULARITY_CLAIMS_WEIGHT = float(os.getenv("POPULARITY_CLAIMS_WEIGHT", "1.5"))
POPULARITY_AVAILABILITY_BONUS = float(os.getenv("POPULARITY_AVAILABILITY_BONUS", "50"))
POPULAR_DEALS_COUNT = int(os.getenv("POPULAR_DEALS_COUNT", "3"))

# Days ahead searched when scheduling a pickup
CLAIM_LOOKAHEAD_DAYS = 30
