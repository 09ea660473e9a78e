"""
Lectura ad-hoc de SAP OData (sin persistir).
"""
from fastapi import APIRouter, Depends

from app.application.dto.sync_dto import SapFetchRequestDTO, SapFetchResponseDTO
from app.application.use_cases.erp_sync_use_cases import ErpSyncUseCases
from app.api.v1.dependencies.use_case_deps import get_erp_sync_use_cases
from app.infrastructure.external.sap_odata.odata_client import ODataQuery

router = APIRouter(prefix="/sap", tags=["SAP"])


@router.post("/fetch", response_model=SapFetchResponseDTO)
async def fetch_sap_entity(
    dto: SapFetchRequestDTO,
    use_cases: ErpSyncUseCases = Depends(get_erp_sync_use_cases)
):
    """
    Consulta un entity set de SAP con $filter / $top / $skip opcionales.
    Devuelve los registros crudos; no toca el almacen local.
    """
    query = ODataQuery(top=dto.top, skip=dto.skip, filter=dto.filters)
    records = await use_cases.fetch_raw(dto.entity, query)
    return SapFetchResponseDTO(
        entity=dto.entity.strip(),
        count=len(records),
        data=records,
    )
