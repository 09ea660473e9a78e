"""
Interfaz del almacen local de entidades.
Define el contrato que consume el orquestador de sincronizacion.
"""
from abc import ABC, abstractmethod
from typing import List

from app.domain.entities.sync import LocalRecord, StoredRecord


class IEntityStore(ABC):
    """
    Operaciones minimas sobre el almacen local, parametrizadas por entidad.

    No hay garantia transaccional entre llamadas: cada delete es independiente.
    """

    @abstractmethod
    async def list(self, entity_name: str) -> List[StoredRecord]:
        """
        Lista todos los registros locales de una entidad.

        Args:
            entity_name: Nombre logico de la entidad

        Returns:
            List[StoredRecord]: Registros existentes
        """
        pass

    @abstractmethod
    async def delete(self, entity_name: str, record_id: str) -> None:
        """
        Borra un registro por ID.

        Args:
            entity_name: Nombre logico de la entidad
            record_id: ID del registro local
        """
        pass

    @abstractmethod
    async def bulk_insert(self, entity_name: str, records: List[LocalRecord]) -> int:
        """
        Inserta todos los registros en una sola llamada.
        El almacen decide como agruparlos internamente.

        Args:
            entity_name: Nombre logico de la entidad
            records: Registros ya transformados al esquema local

        Returns:
            int: Cantidad de registros insertados
        """
        pass
