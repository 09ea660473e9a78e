"""
Tests del ciclo de vida de la aplicacion (startup / shutdown via lifespan).
"""
from unittest.mock import AsyncMock, Mock

import pytest

from app.core import events
from app.core.config import settings
from app.shared.utils.audit_logger import AuditLogger


@pytest.fixture
def patched_resources(monkeypatch, tmp_path):
    """Reemplaza DB y bitacora para que el ciclo de vida no toque recursos reales."""
    resources = {
        "init_db": AsyncMock(),
        "close_db": AsyncMock(),
        "audit_init": Mock(),
        "audit_shutdown": Mock(),
    }
    monkeypatch.setattr(events, "init_db", resources["init_db"])
    monkeypatch.setattr(events, "close_db", resources["close_db"])
    monkeypatch.setattr(AuditLogger, "initialize", resources["audit_init"])
    monkeypatch.setattr(AuditLogger, "shutdown", resources["audit_shutdown"])
    monkeypatch.setattr(settings, "LOG_FILE", str(tmp_path / "app.log"))
    return resources


def test_create_application_builds_without_event_handlers() -> None:
    """La app se construye y registra el lifespan propio."""
    from main import create_application
    application = create_application()

    assert application.router.lifespan_context is not None
    assert any(getattr(route, "path", None) == "/health" for route in application.routes)


@pytest.mark.asyncio
async def test_lifespan_runs_startup_then_shutdown(patched_resources) -> None:
    """Startup inicializa DB y bitacora; shutdown las cierra al salir."""
    from main import create_application
    application = create_application()

    async with application.router.lifespan_context(application):
        patched_resources["init_db"].assert_awaited_once()
        patched_resources["audit_init"].assert_called_once()
        patched_resources["close_db"].assert_not_awaited()
        assert application.state.log_sink_id is not None

    patched_resources["close_db"].assert_awaited_once()
    patched_resources["audit_shutdown"].assert_called_once()
    assert application.state.log_sink_id is None


@pytest.mark.asyncio
async def test_lifespan_propagates_startup_failure(patched_resources) -> None:
    """Si la DB no arranca, la app no queda sirviendo."""
    patched_resources["init_db"].side_effect = RuntimeError("db down")
    from main import create_application
    application = create_application()

    with pytest.raises(RuntimeError, match="db down"):
        async with application.router.lifespan_context(application):
            pass

    patched_resources["close_db"].assert_not_awaited()
