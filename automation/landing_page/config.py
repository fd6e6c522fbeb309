import logging
from pathlib import Path

# Deployed address of the landing page API
API_URL = "https://landing-page-api-cftl.onrender.com/api/productos"

# automation/dist/index.html
OUTPUT_DIR = Path(__file__).resolve().parent.parent / "dist"
OUTPUT_FILENAME = "index.html"


def configure_logging() -> None:
    log_formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(log_formatter)
    root_logger.addHandler(console_handler)
