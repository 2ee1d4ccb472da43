"""Early-boot side effects: dotenv and logging.

Imported by ``main`` before the routers so that ``WFSAPI_*`` variables from a
``.env`` file are visible to the configuration helpers.
"""

import logging

from dotenv import load_dotenv

from wfsapi.config import catalog_path, cors_origins, load_service_config

load_dotenv()

wfs_logger = logging.getLogger("wfsapi")
wfs_logger.setLevel(logging.INFO)
if not wfs_logger.handlers:
    handler = logging.StreamHandler()
    handler.setLevel(logging.INFO)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s - %(message)s"))
    wfs_logger.addHandler(handler)
wfs_logger.propagate = False

logging.getLogger("pygeoapi.l10n").setLevel(logging.ERROR)


def log_startup_configuration() -> None:
    config = load_service_config()
    cors = cors_origins()
    logger = logging.getLogger("wfsapi.startup")
    logger.info(
        "Startup config: title=%r maxPageSize=%s",
        config.title,
        config.max_page_size,
    )
    logger.info(
        "Startup config: catalog=%s cors=%s",
        catalog_path(),
        "*" if cors == ["*"] else f"{len(cors)} origins",
    )
