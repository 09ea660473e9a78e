"""
Dependencias para inyección de repositorios y clientes externos.
"""
from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.domain.entities.entity_mapping import EntityMappingRegistry
from app.infrastructure.database.session import get_db
from app.infrastructure.external.sap_odata.entity_mappings import build_default_registry
from app.infrastructure.external.sap_odata.odata_client import SapODataClient
from app.infrastructure.repositories.entity_store_repository import SqlEntityStore


async def get_entity_store(
    session: AsyncSession = Depends(get_db)
) -> SqlEntityStore:
    """
    Dependencia para obtener el almacen local de entidades.

    Args:
        session: Sesión de base de datos

    Returns:
        SqlEntityStore: Almacen ligado a la sesion del request
    """
    return SqlEntityStore(session)


@lru_cache
def get_entity_registry() -> EntityMappingRegistry:
    """Registro de entidades: se construye una sola vez por proceso."""
    return build_default_registry()


@lru_cache
def get_sap_client() -> SapODataClient:
    """Cliente OData compartido (una requests.Session por proceso)."""
    return SapODataClient(base_url=settings.SAP_ODATA_BASE_URL)
