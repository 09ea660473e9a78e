"""
Entidades del dominio.
"""
from app.domain.entities.entity_mapping import EntityMapping, EntityMappingRegistry, FieldMap
from app.domain.entities.sync import (
    StoredRecord,
    SyncRequest,
    SyncResult,
    UpstreamCredentials,
)

__all__ = [
    "FieldMap",
    "EntityMapping",
    "EntityMappingRegistry",
    "StoredRecord",
    "SyncRequest",
    "SyncResult",
    "UpstreamCredentials",
]
