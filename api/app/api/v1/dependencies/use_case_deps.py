"""
Dependencias para inyeccion de casos de uso.
"""
from fastapi import Depends

from app.application.use_cases.erp_sync_use_cases import ErpSyncUseCases
from app.api.v1.dependencies.repository_deps import (
    get_entity_registry,
    get_entity_store,
    get_sap_client,
)
from app.domain.entities.entity_mapping import EntityMappingRegistry
from app.domain.repositories.entity_store import IEntityStore
from app.infrastructure.external.sap_odata.odata_client import SapODataClient


async def get_erp_sync_use_cases(
    store: IEntityStore = Depends(get_entity_store),
    registry: EntityMappingRegistry = Depends(get_entity_registry),
    client: SapODataClient = Depends(get_sap_client),
) -> ErpSyncUseCases:
    """
    Dependencia para obtener los casos de uso de sincronizacion.

    Args:
        store: Almacen local de entidades
        registry: Registro de entidades sincronizables
        client: Cliente OData de SAP

    Returns:
        ErpSyncUseCases: Orquestador ligado al request
    """
    return ErpSyncUseCases(store=store, registry=registry, client=client)
