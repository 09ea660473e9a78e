"""
Lectura del almacen local (pass-through, sin transformacion).
"""
from fastapi import APIRouter, Depends

from app.application.dto.sync_dto import RecordListResponseDTO
from app.application.use_cases.erp_sync_use_cases import ErpSyncUseCases
from app.api.v1.dependencies.use_case_deps import get_erp_sync_use_cases

router = APIRouter(tags=["Records"])


async def _list_records(use_cases: ErpSyncUseCases, entity: str) -> RecordListResponseDTO:
    records = await use_cases.list_local_records(entity)
    return RecordListResponseDTO(
        count=len(records),
        data=[r.to_dict() for r in records],
    )


@router.get("/records/{entity}", response_model=RecordListResponseDTO)
async def list_entity_records(
    entity: str,
    use_cases: ErpSyncUseCases = Depends(get_erp_sync_use_cases)
):
    """
    Obtener todos los registros locales de una entidad.
    """
    return await _list_records(use_cases, entity)


@router.get("/sales-invoices", response_model=RecordListResponseDTO)
async def list_sales_invoices(
    use_cases: ErpSyncUseCases = Depends(get_erp_sync_use_cases)
):
    """
    Obtener todas las facturas de venta sincronizadas.
    """
    return await _list_records(use_cases, "SalesInvoice")
