import logging

from ..domain.errors import CatalogLoadError
from ..domain.repositories import CatalogService
from ..state import AppState
from ..utils.audit_log import emit_audit_log

logger = logging.getLogger(__name__)

LOAD_ERROR_MESSAGE = "Could not load activities from server."


async def fetch_catalog(state: AppState, catalog_service: CatalogService) -> bool:
    """Replace the cached catalog with the server's. Failures leave a sticky ``load_error``."""
    state.loading = True
    state.load_error = ""
    try:
        items = await catalog_service.fetch_all()
    except CatalogLoadError as exc:
        logger.error("catalog fetch failed: %s", exc)
        emit_audit_log(action="catalog.load_failed", initiator="system", level="warning", message=str(exc))
        state.load_error = LOAD_ERROR_MESSAGE
        return False
    finally:
        state.loading = False
    state.catalog.set_catalog(items)
    return True
