"""
Endpoints para sincronizacion de datos SAP.
Permite sincronizar una entidad de SAP con el almacen local desde la UI.
"""
from fastapi import APIRouter, Depends, status
from loguru import logger

from app.application.dto.sync_dto import EntityListDTO, SyncRequestDTO, SyncResponseDTO
from app.application.use_cases.erp_sync_use_cases import ErpSyncUseCases
from app.api.v1.dependencies.repository_deps import get_entity_registry
from app.api.v1.dependencies.use_case_deps import get_erp_sync_use_cases
from app.domain.entities.entity_mapping import EntityMappingRegistry
from app.domain.entities.sync import SyncRequest


router = APIRouter(prefix="/sync", tags=["Sync"])


@router.post(
    "/sap",
    response_model=SyncResponseDTO,
    status_code=status.HTTP_200_OK,
    summary="Sincronizar una entidad de SAP con el almacen local"
)
async def sync_sap_entity(
    dto: SyncRequestDTO,
    use_cases: ErpSyncUseCases = Depends(get_erp_sync_use_cases)
) -> SyncResponseDTO:
    """
    Ejecuta la sincronizacion de una entidad.

    - clearExisting=False: agrega los registros de SAP a los existentes
    - clearExisting=True: borra los existentes (uno a uno) y luego inserta

    Errores:
    - 400 con availableEntities si falta la entidad o no existe
    - 500 si faltan credenciales de SAP o falla el almacen local
    - status de SAP (con details) si la consulta OData falla
    """
    logger.info(f"Sync solicitado desde API: entity={dto.entity}, clearExisting={dto.clear_existing}")

    result = await use_cases.sync_entity(
        SyncRequest(entity_name=dto.entity, purge_existing=dto.clear_existing)
    )

    return SyncResponseDTO(
        success=result.succeeded,
        entity=result.entity_name,
        synced=result.record_count,
        message=result.message,
    )


@router.get(
    "/entities",
    response_model=EntityListDTO,
    summary="Listar entidades sincronizables"
)
async def list_sync_entities(
    registry: EntityMappingRegistry = Depends(get_entity_registry)
) -> EntityListDTO:
    """Entidades registradas, en el orden en que se muestran en la UI (sin tocar la DB)."""
    return EntityListDTO(entities=registry.list_names())
