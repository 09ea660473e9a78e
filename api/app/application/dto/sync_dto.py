"""
DTOs de sincronizacion y lectura de datos SAP.

Los nombres de campo en JSON (entity, clearExisting, synced, ...) son los
que consume el frontend del dashboard.
"""
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field


class SyncRequestDTO(BaseModel):
    """Request de sincronizacion de una entidad."""
    # Sin tipo estricto: un valor no string se responde como 400 con availableEntities
    entity: Any = Field(None, description="Nombre logico de la entidad (ej. SalesInvoice)")
    clear_existing: bool = Field(
        False,
        alias="clearExisting",
        description="Si True, borra los registros locales antes de insertar los nuevos"
    )

    class Config:
        populate_by_name = True


class SyncResponseDTO(BaseModel):
    """Resultado exitoso de una sincronizacion."""
    success: bool = True
    entity: str
    synced: int = Field(..., description="Registros insertados en el almacen local")
    message: str


class EntityListDTO(BaseModel):
    """Entidades sincronizables."""
    entities: List[str]


class SapFetchRequestDTO(BaseModel):
    """Lectura ad-hoc de SAP (no guarda nada)."""
    entity: Any = Field(None, description="Nombre logico de la entidad")
    filters: Optional[str] = Field(None, description="Expresion $filter de OData")
    top: Optional[int] = Field(None, ge=1, description="$top")
    skip: Optional[int] = Field(None, ge=0, description="$skip")


class SapFetchResponseDTO(BaseModel):
    """Registros crudos tal como los devuelve SAP."""
    success: bool = True
    entity: str
    count: int
    data: List[Dict[str, Any]]


class RecordListResponseDTO(BaseModel):
    """Registros del almacen local, sin transformar."""
    success: bool = True
    count: int
    data: List[Dict[str, Any]]
