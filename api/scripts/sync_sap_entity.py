"""
CLI: SAP OData -> almacen local (one-way sync).

Uso recomendado:
  - Ejecutar como job (cron/systemd timer) para refrescar el dashboard sin
    depender de la UI.

Variables de entorno requeridas:
  - SAP_ODATA_USERNAME
  - SAP_ODATA_PASSWORD
  - DATABASE_URL (o DATABASE_* por componentes)

Ejecución:
  python scripts/sync_sap_entity.py --list
  python scripts/sync_sap_entity.py --entity SalesInvoice
  python scripts/sync_sap_entity.py --entity Inventory --clear-existing
  python scripts/sync_sap_entity.py --all --clear-existing
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from loguru import logger
from dotenv import load_dotenv

# Permite ejecutar este script desde cualquier cwd sin configurar PYTHONPATH.
# La carpeta "api" contiene el paquete raíz `app/`.
_API_ROOT = Path(__file__).resolve().parents[1]
if str(_API_ROOT) not in sys.path:
    sys.path.insert(0, str(_API_ROOT))

# Cargar variables desde .env si existe (api/.env o raiz del repo).
_REPO_ROOT = _API_ROOT.parent
load_dotenv(_API_ROOT / ".env", override=False)
load_dotenv(_REPO_ROOT / ".env", override=False)

from app.application.use_cases.erp_sync_use_cases import ErpSyncUseCases
from app.core.config import settings
from app.domain.entities.sync import SyncRequest
from app.infrastructure.database.session import close_db, init_db, session_scope
from app.infrastructure.external.sap_odata.entity_mappings import build_default_registry
from app.infrastructure.external.sap_odata.odata_client import SapODataClient
from app.infrastructure.repositories.entity_store_repository import SqlEntityStore
from app.shared.exceptions.sync import SyncException
from app.shared.utils.audit_logger import AuditLogger


async def _sync_entities(entity_names: list[str], clear_existing: bool) -> int:
    """Sincroniza las entidades en serie. Retorna la cantidad de fallos."""
    registry = build_default_registry()
    client = SapODataClient(base_url=settings.SAP_ODATA_BASE_URL)
    failures = 0

    await init_db()
    try:
        for name in entity_names:
            # Una sesion por entidad: un fallo no arrastra a las siguientes
            try:
                async with session_scope() as session:
                    use_cases = ErpSyncUseCases(
                        store=SqlEntityStore(session),
                        registry=registry,
                        client=client,
                    )
                    result = await use_cases.sync_entity(
                        SyncRequest(entity_name=name, purge_existing=clear_existing)
                    )
                logger.info(f"{name}: {result.message}")
            except SyncException as e:
                failures += 1
                logger.error(f"{name}: {e.message}")
    finally:
        client.close()
        await close_db()

    return failures


def main() -> int:
    parser = argparse.ArgumentParser(description="Sincroniza entidades SAP con el almacen local")
    target = parser.add_mutually_exclusive_group(required=True)
    target.add_argument("--entity", help="Nombre logico de la entidad (ej. SalesInvoice)")
    target.add_argument("--all", action="store_true", help="Sincroniza todas las entidades registradas")
    target.add_argument("--list", action="store_true", help="Solo lista las entidades disponibles")
    parser.add_argument(
        "--clear-existing",
        action="store_true",
        help="Borra los registros locales antes de insertar (purga no atomica).",
    )
    args = parser.parse_args()

    registry = build_default_registry()
    if args.list:
        for name in registry.list_names():
            print(name)
        return 0

    entity_names = registry.list_names() if args.all else [args.entity]

    AuditLogger.initialize()
    logger.info(f"Iniciando SAP -> almacen local para: {', '.join(entity_names)}")
    failures = asyncio.run(_sync_entities(entity_names, args.clear_existing))

    if failures:
        logger.warning(f"Sync terminado con {failures} entidad(es) fallida(s)")
        return 1
    logger.success("Sync terminado sin errores")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
