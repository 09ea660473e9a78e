"""
Dobles de prueba para el flujo de sincronizacion.
"""
from typing import List, Optional

from app.domain.entities.sync import LocalRecord, StoredRecord, UpstreamCredentials
from app.domain.repositories.entity_store import IEntityStore
from app.infrastructure.external.sap_odata.odata_client import ODataQuery


class FakeEntityStore(IEntityStore):
    """
    Almacen en memoria que registra cada llamada en orden.

    fail_delete_at: indice (0-based) del delete que debe fallar
    fail_insert: si True, bulk_insert lanza
    """

    def __init__(
        self,
        existing: Optional[dict] = None,
        fail_delete_at: Optional[int] = None,
        fail_insert: bool = False,
    ):
        self.records: dict = {name: list(rows) for name, rows in (existing or {}).items()}
        self.calls: List[tuple] = []
        self.fail_delete_at = fail_delete_at
        self.fail_insert = fail_insert
        self._next_id = 1000

    async def list(self, entity_name: str) -> List[StoredRecord]:
        self.calls.append(("list", entity_name))
        return list(self.records.get(entity_name, []))

    async def delete(self, entity_name: str, record_id: str) -> None:
        deletes_so_far = sum(1 for c in self.calls if c[0] == "delete")
        self.calls.append(("delete", entity_name, record_id))
        if self.fail_delete_at is not None and deletes_so_far == self.fail_delete_at:
            raise RuntimeError("store unavailable")
        self.records[entity_name] = [r for r in self.records.get(entity_name, []) if r.id != record_id]

    async def bulk_insert(self, entity_name: str, records: List[LocalRecord]) -> int:
        self.calls.append(("bulk_insert", entity_name, len(records)))
        if self.fail_insert:
            raise RuntimeError("disk full")
        for data in records:
            self._next_id += 1
            self.records.setdefault(entity_name, []).append(
                StoredRecord(id=str(self._next_id), entity_name=entity_name, data=dict(data))
            )
        return len(records)

    def call_names(self) -> List[str]:
        return [c[0] for c in self.calls]


class FakeSapClient:
    """Cliente OData falso: devuelve records o lanza error, y registra las llamadas."""

    def __init__(self, records=None, error: Optional[Exception] = None):
        self.records = records if records is not None else []
        self.error = error
        self.calls: List[tuple] = []

    def fetch(
        self,
        service_namespace: str,
        resource_collection: str,
        credentials: UpstreamCredentials,
        query: Optional[ODataQuery] = None,
    ):
        self.calls.append((service_namespace, resource_collection, credentials, query))
        if self.error is not None:
            raise self.error
        return list(self.records)


def stored(entity_name: str, record_id: str, **data) -> StoredRecord:
    return StoredRecord(id=record_id, entity_name=entity_name, data=data)


