"""
Entidades de dominio del flujo de sincronizacion.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional

# Registro crudo tal como lo devuelve SAP (incluye p.ej. "__metadata")
RawUpstreamRecord = Dict[str, Any]

# Registro restringido a los campos locales declarados en el FieldMap
LocalRecord = Dict[str, Any]


@dataclass(frozen=True)
class SyncRequest:
    """Una invocacion de sincronizacion."""

    entity_name: Optional[str]
    purge_existing: bool = False


@dataclass(frozen=True)
class SyncResult:
    """Resumen de una sincronizacion exitosa."""

    entity_name: str
    record_count: int
    succeeded: bool
    message: str
    purged_count: int = 0


@dataclass(frozen=True)
class UpstreamCredentials:
    """Credenciales Basic auth para SAP. El password nunca aparece en repr."""

    username: str
    password: str = field(repr=False)


@dataclass
class StoredRecord:
    """Registro persistido en el almacen local."""

    id: str
    entity_name: str
    data: LocalRecord
    synced_at: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        """Representacion plana, como la consume el frontend."""
        payload: Dict[str, Any] = {"id": self.id}
        payload.update(self.data)
        payload["synced_at"] = self.synced_at.isoformat() if self.synced_at else None
        return payload
