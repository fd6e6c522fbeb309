import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from landing_api.api.routes import products
from landing_api.core.config import Settings, load_settings_or_exit
from landing_api.services.product_service import ProductService
from landing_api.services.record_source import AirtableRecordSource, RecordSource

# Logs live under backend/logs
LOG_DIR = os.path.normpath(os.path.join(os.path.dirname(os.path.dirname(__file__)), "logs"))

LIVENESS_MESSAGE = "Servidor de Landing Page API está funcionando."

logger = logging.getLogger(__name__)


def configure_logging(log_dir: str = LOG_DIR) -> None:
    os.makedirs(log_dir, exist_ok=True)

    # Root logger with timestamped format, console and rotating file handlers
    log_formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(log_formatter)
    root_logger.addHandler(console_handler)

    log_file_path = os.path.join(log_dir, "app.log")
    file_handler = RotatingFileHandler(log_file_path, maxBytes=5 * 1024 * 1024, backupCount=5, encoding="utf-8")
    file_handler.setFormatter(log_formatter)
    root_logger.addHandler(file_handler)


def create_app(settings: Settings, record_source: Optional[RecordSource] = None) -> FastAPI:
    """Build the API around an explicit configuration and record source."""
    if record_source is None:
        record_source = AirtableRecordSource.from_settings(settings)

    app = FastAPI(
        title=settings.app_name,
        version=settings.version,
        debug=settings.debug
    )
    app.state.settings = settings
    app.state.product_service = ProductService(record_source, view=settings.airtable_view)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(products.router, prefix="/api/productos", tags=["products"])

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return LIVENESS_MESSAGE

    return app


def run() -> None:
    configure_logging()
    settings = load_settings_or_exit()
    app = create_app(settings)

    import uvicorn
    logger.info(f"Servidor escuchando en http://localhost:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
