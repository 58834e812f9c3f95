SECRET_KEY = "test-secret"

# Tests always run against the in-memory store.
DB_CONFIG = None

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
AUTO_SEED_DB = False

DEMO_LATENCY_SCALE = 0.0
