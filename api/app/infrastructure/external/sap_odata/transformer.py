"""
Transformacion pura de registros SAP al esquema local.

Se mantiene libre de I/O para poder testearla facilmente.
"""

from __future__ import annotations

from typing import Iterable

from app.domain.entities.entity_mapping import FieldMap
from app.domain.entities.sync import LocalRecord, RawUpstreamRecord


def transform_record(record: RawUpstreamRecord, field_map: FieldMap) -> LocalRecord:
    """
    Proyecta un registro SAP a un registro local.

    Reglas:
    - Solo se copian campos SAP con mapeo; el resto (incluido "__metadata")
      se descarta sin aviso.
    - El valor se copia tal cual: sin cast ni default para None.
    - Un campo mapeado ausente en SAP queda ausente en la salida.
    """
    row: LocalRecord = {}
    for upstream_field, value in record.items():
        local_field = field_map.to_local(upstream_field)
        if local_field is not None:
            row[local_field] = value
    return row


def transform_records(
    records: Iterable[RawUpstreamRecord],
    field_map: FieldMap,
) -> list[LocalRecord]:
    """Transforma una lista de registros conservando el orden de entrada."""
    return [transform_record(record, field_map) for record in records]
