"""
Note Store Factory.

Selects the note store backend named in database.yaml (`store.backend`).
Called once by create_app(); the instance lives on `app.state`.
"""

from notesapp.backend.core.config import AppConfig, Settings, get_app_config, get_settings
from notesapp.backend.core.logging import get_logger
from notesapp.backend.stores.base import NoteStore

logger = get_logger(__name__)


def build_note_store(
    app_config: AppConfig | None = None,
    settings: Settings | None = None,
) -> NoteStore:
    """
    Build the configured note store.

    Args:
        app_config: Loaded YAML configuration (defaults to the cached config)
        settings: Secrets (defaults to the cached settings; only the rest
            backend reads them)

    Returns:
        A ready-to-use NoteStore
    """
    app_config = app_config or get_app_config()
    store_config = app_config.database.store
    backend = store_config.backend

    if backend == "memory":
        from notesapp.backend.stores.memory import InMemoryNoteStore

        store: NoteStore = InMemoryNoteStore()
    elif backend == "sql":
        from notesapp.backend.core.database import get_engine, get_session_factory
        from notesapp.backend.stores.sql import SqlNoteStore

        store = SqlNoteStore(get_session_factory(), engine=get_engine())
    elif backend == "rest":
        from notesapp.backend.stores.rest import RestNoteStore

        settings = settings or get_settings()
        store = RestNoteStore(
            base_url=store_config.rest.url,
            api_key=settings.store_api_key,
            table=store_config.rest.table,
            timeout=float(store_config.rest.timeout),
        )
    else:
        raise ValueError(f"Unknown note store backend: {backend}")

    logger.info("Note store ready", extra={"backend": backend})
    return store
