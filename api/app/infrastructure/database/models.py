"""
Modelos de base de datos (ORM).
"""
import uuid

from sqlalchemy import Column, String, DateTime, JSON
from sqlalchemy.sql import func

from app.infrastructure.database.session import Base


def _new_record_id() -> str:
    return str(uuid.uuid4())


class ErpRecordModel(Base):
    """
    Registro local de una entidad sincronizada desde SAP.

    Todas las entidades comparten tabla: entity_name discrimina y data guarda
    el registro ya proyectado a los campos locales declarados.
    """

    __tablename__ = "erp_records"

    id = Column(String(36), primary_key=True, default=_new_record_id)
    entity_name = Column(String(100), nullable=False, index=True)
    data = Column(JSON, nullable=False, default=dict)
    synced_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<ErpRecord(id={self.id}, entity={self.entity_name})>"
