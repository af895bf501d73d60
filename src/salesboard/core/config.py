import os

# In a real deployment these come from the environment or a .env file
DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite://./salesboard.sqlite3")

# Month windows are pinned to the years covered by the seed catalog,
# not to the current calendar year.
REPORT_ANCHOR_START_YEAR: int = int(os.getenv("REPORT_ANCHOR_START_YEAR", "2021"))
REPORT_ANCHOR_END_YEAR: int = int(os.getenv("REPORT_ANCHOR_END_YEAR", "2022"))

DEFAULT_PER_PAGE: int = int(os.getenv("DEFAULT_PER_PAGE", "10"))
MAX_PER_PAGE: int = int(os.getenv("MAX_PER_PAGE", "100"))

SEED_DATA_URL: str = os.getenv(
    "SEED_DATA_URL", "https://s3.amazonaws.com/roxiler.com/product_transaction.json"
)
SEED_REQUEST_TIMEOUT: float = float(os.getenv("SEED_REQUEST_TIMEOUT", "30"))

# Comma separated list, e.g. "salesboard.features.reports,salesboard.main"
LOG_NAMESPACES: list[str] = [
    ns.strip() for ns in os.getenv("LOG_NAMESPACES", "").split(",") if ns.strip()
]
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

MODEL_MODULES = [
    "salesboard.features.transactions.models",
    "aerich.models",  # For Aerich migrations
]

TORTOISE_ORM_CONFIG = {
    "connections": {"default": DATABASE_URL},
    "apps": {
        "models": {
            "models": MODEL_MODULES,
            "default_connection": "default",
        }
    },
    "use_tz": False,
    "timezone": "UTC",
}
