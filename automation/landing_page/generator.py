import logging
import os
import stat
import sys
import tempfile
from pathlib import Path
from typing import Callable, List, Optional

from .client import fetch_products
from .config import API_URL, OUTPUT_DIR, OUTPUT_FILENAME, configure_logging
from .models import Product
from .template import render_page

logger = logging.getLogger(__name__)


def _page_mode(output_path: Path) -> int:
    """Mode for the written page: keep the existing file's, otherwise what a plain open() would give."""
    try:
        return stat.S_IMODE(os.stat(output_path).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_page(html: str, output_path: Path) -> Path:
    """Write ``html`` to ``output_path`` through a temporary file so the target is replaced in one step."""
    fd, tmp_name = tempfile.mkstemp(dir=output_path.parent, prefix=f".{output_path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(html)
        os.chmod(tmp_name, _page_mode(output_path))
        os.replace(tmp_name, output_path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise
    return output_path


def generate_landing_page(
    api_url: str = API_URL,
    output_dir: Optional[Path] = None,
    fetch: Optional[Callable[[str], List[Product]]] = None,
) -> Path:
    """
    Fetch the products and write the landing page.

    Fetch failures are not raised: the page is still written, showing the
    error in place of the product cards. Only a failure to write the file
    propagates.

    Returns:
        Path of the written page
    """
    logger.info("Iniciando la generación de la landing page...")
    products: List[Product] = []
    error_message: Optional[str] = None

    fetch = fetch or fetch_products

    # The directory must exist even when the API is down so the deploy step always finds it
    output_dir = Path(output_dir or OUTPUT_DIR)
    output_dir.mkdir(parents=True, exist_ok=True)

    try:
        logger.info("Obteniendo datos de productos desde la API...")
        products = fetch(api_url)
    except Exception as exc:
        error_message = f"🚨 Error al obtener datos de la API: {exc}"
        logger.error(error_message)

    html = render_page(products, error_message)
    output_path = write_page(html, output_dir / OUTPUT_FILENAME)

    logger.info(f"🎉 ¡Página de destino generada con éxito en {output_path}!")
    return output_path


def main() -> int:
    configure_logging()
    generate_landing_page()
    return 0


if __name__ == "__main__":
    sys.exit(main())
