import os

from . import db_config_from_env

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# None => demo mode (in-memory store).
DB_CONFIG = db_config_from_env()

DEBUG = True

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed the demo roster on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))

# Multiplier for the simulated round-trip of the demo store.
DEMO_LATENCY_SCALE = float(os.getenv("DEMO_LATENCY_SCALE", "1.0"))
