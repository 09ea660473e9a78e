"""
Data Transfer Objects (DTOs) para la capa de aplicacion.
"""
from .sync_dto import (
    SyncRequestDTO,
    SyncResponseDTO,
    EntityListDTO,
    SapFetchRequestDTO,
    SapFetchResponseDTO,
    RecordListResponseDTO,
)

__all__ = [
    "SyncRequestDTO",
    "SyncResponseDTO",
    "EntityListDTO",
    "SapFetchRequestDTO",
    "SapFetchResponseDTO",
    "RecordListResponseDTO",
]
