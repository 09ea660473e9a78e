"""
Mapeo de entidades logicas a recursos OData de SAP.

Contiene:
- FieldMap: mapeo bidireccional campo local <-> campo SAP
- EntityMapping: una entidad logica ligada a servicio + entity set
- EntityMappingRegistry: registro inmutable de entidades sincronizables

Sin I/O: solo estructuras y busquedas puras.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from app.shared.exceptions.sync import InvalidSyncRequestException, UnknownEntityException


class FieldMap:
    """
    Mapeo bidireccional y ordenado de campos.

    Se construye una sola vez por entidad (al armar el registro) y valida
    que ningun campo local ni ningun campo SAP aparezca dos veces.
    """

    def __init__(self, pairs: Iterable[Tuple[str, str]]):
        self._local_to_upstream: Dict[str, str] = {}
        self._upstream_to_local: Dict[str, str] = {}

        for local_field, upstream_field in pairs:
            if not local_field or not upstream_field:
                raise ValueError("Los nombres de campo no pueden estar vacios")
            if local_field in self._local_to_upstream:
                raise ValueError(f"Campo local duplicado: '{local_field}'")
            if upstream_field in self._upstream_to_local:
                raise ValueError(
                    f"El campo SAP '{upstream_field}' ya esta mapeado a "
                    f"'{self._upstream_to_local[upstream_field]}'"
                )
            self._local_to_upstream[local_field] = upstream_field
            self._upstream_to_local[upstream_field] = local_field

    @classmethod
    def from_dict(cls, mapping: Dict[str, str]) -> "FieldMap":
        """Construye el mapeo desde un dict {campo_local: campo_sap}."""
        return cls(mapping.items())

    @property
    def local_fields(self) -> List[str]:
        return list(self._local_to_upstream)

    @property
    def upstream_fields(self) -> List[str]:
        return list(self._upstream_to_local)

    def to_local(self, upstream_field: str) -> Optional[str]:
        return self._upstream_to_local.get(upstream_field)

    def to_upstream(self, local_field: str) -> Optional[str]:
        return self._local_to_upstream.get(local_field)

    def items(self) -> List[Tuple[str, str]]:
        """Pares (local, sap) en el orden declarado."""
        return list(self._local_to_upstream.items())

    def __len__(self) -> int:
        return len(self._local_to_upstream)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldMap):
            return NotImplemented
        return self.items() == other.items()

    def __repr__(self) -> str:
        return f"<FieldMap(fields={len(self)})>"


@dataclass(frozen=True)
class EntityMapping:
    """
    Una entidad logica sincronizable desde SAP.

    - logical_name: nombre de la entidad en el almacen local (ej. SalesInvoice)
    - service_namespace: servicio OData (ej. ZGW_SALES_SRV)
    - resource_collection: entity set dentro del servicio (ej. SalesInvoicesSet)
    - field_map: mapeo campo local -> campo SAP
    """

    logical_name: str
    service_namespace: str
    resource_collection: str
    field_map: FieldMap = field(compare=False)

    def __post_init__(self):
        if not self.logical_name:
            raise ValueError("El nombre logico de la entidad no puede estar vacio")
        if not self.service_namespace or not self.resource_collection:
            raise ValueError(
                f"La entidad '{self.logical_name}' requiere servicio y entity set"
            )


class EntityMappingRegistry:
    """
    Registro inmutable de entidades sincronizables.

    Se construye una vez al inicio del proceso y se inyecta en el orquestador;
    los tests pueden armar uno con un subconjunto minimo de entidades.
    """

    def __init__(self, mappings: Iterable[EntityMapping]):
        self._mappings: Dict[str, EntityMapping] = {}
        for mapping in mappings:
            if mapping.logical_name in self._mappings:
                raise ValueError(f"Entidad duplicada en el registro: '{mapping.logical_name}'")
            self._mappings[mapping.logical_name] = mapping

    def resolve(self, entity_name: str) -> EntityMapping:
        """
        Busca la entidad por nombre logico.

        Raises:
            InvalidSyncRequestException: si el nombre viene vacio
            UnknownEntityException: si la entidad no esta registrada
        """
        if not entity_name:
            raise InvalidSyncRequestException(self.list_names())
        mapping = self._mappings.get(entity_name)
        if mapping is None:
            raise UnknownEntityException(entity_name, self.list_names())
        return mapping

    def list_names(self) -> List[str]:
        """Nombres registrados, en orden de registro."""
        return list(self._mappings)

    def __contains__(self, entity_name: object) -> bool:
        return entity_name in self._mappings

    def __iter__(self) -> Iterator[EntityMapping]:
        return iter(list(self._mappings.values()))

    def __len__(self) -> int:
        return len(self._mappings)
