"""
Implementación del almacen local de entidades usando SQLAlchemy.
"""
from typing import List

from loguru import logger
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.domain.entities.sync import LocalRecord, StoredRecord
from app.domain.repositories.entity_store import IEntityStore
from app.infrastructure.database.models import ErpRecordModel
from app.shared.exceptions.domain import EntityNotFoundException


class SqlEntityStore(IEntityStore):
    """
    Almacen local con SQLAlchemy (tabla unica erp_records).

    Cada llamada es su propia unidad de trabajo (commit al terminar), igual
    que un almacen remoto: un fallo a mitad de una purga deja confirmados los
    borrados anteriores.
    """

    def __init__(self, session: AsyncSession, batch_size: int = None):
        """
        Inicializa el repositorio con una sesión de base de datos.

        Args:
            session: Sesión de SQLAlchemy
            batch_size: Registros por flush en bulk_insert
        """
        self.session = session
        self.batch_size = batch_size or settings.ENTITY_STORE_BATCH_SIZE

    async def list(self, entity_name: str) -> List[StoredRecord]:
        """Lista los registros de una entidad en orden de insercion."""
        result = await self.session.execute(
            select(ErpRecordModel)
            .where(ErpRecordModel.entity_name == entity_name)
            .order_by(ErpRecordModel.synced_at, ErpRecordModel.id)
        )
        return [self._to_entity(row) for row in result.scalars().all()]

    async def delete(self, entity_name: str, record_id: str) -> None:
        """Borra un registro; falla si no existe para esa entidad."""
        result = await self.session.execute(
            select(ErpRecordModel).where(
                ErpRecordModel.id == record_id,
                ErpRecordModel.entity_name == entity_name,
            )
        )
        db_record = result.scalar_one_or_none()

        if db_record is None:
            raise EntityNotFoundException(entity_name, record_id)

        await self.session.delete(db_record)
        await self.session.commit()

    async def bulk_insert(self, entity_name: str, records: List[LocalRecord]) -> int:
        """Inserta en lotes de batch_size y confirma al final."""
        if not records:
            return 0

        for start in range(0, len(records), self.batch_size):
            batch = records[start:start + self.batch_size]
            self.session.add_all(
                [ErpRecordModel(entity_name=entity_name, data=dict(data)) for data in batch]
            )
            await self.session.flush()

        await self.session.commit()
        logger.debug(f"{len(records)} registro(s) de {entity_name} insertados")
        return len(records)

    def _to_entity(self, db_record: ErpRecordModel) -> StoredRecord:
        return StoredRecord(
            id=db_record.id,
            entity_name=db_record.entity_name,
            data=dict(db_record.data or {}),
            synced_at=db_record.synced_at,
        )
