"""
Cliente minimo de SAP Gateway OData v2 (sin SDKs externos).

Cubre:
- requests + HTTP Basic auth
- URL fija: <base>/<servicio>/<entity set>?$format=json
- opciones de consulta $top / $skip / $filter (solo para lecturas ad-hoc)
- normalizacion del sobre de respuesta OData a una lista plana

Sin reintentos ni timeout propio: una sola lectura por
invocacion, con los defaults de requests.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional
from urllib.parse import quote

import requests
from loguru import logger

from app.domain.entities.sync import RawUpstreamRecord, UpstreamCredentials
from app.shared.exceptions.sync import UpstreamRequestException


@dataclass(frozen=True)
class ODataQuery:
    """Opciones de consulta OData opcionales."""

    top: Optional[int] = None
    skip: Optional[int] = None
    filter: Optional[str] = None

    def to_query_string(self) -> str:
        parts: list[str] = []
        if self.top:
            parts.append(f"$top={self.top}")
        if self.skip:
            parts.append(f"$skip={self.skip}")
        if self.filter:
            parts.append(f"$filter={quote(self.filter, safe='')}")
        return "&".join(parts)


def normalize_odata_payload(payload: Any) -> list[RawUpstreamRecord]:
    """
    Aplana las tres formas en que llegan colecciones:

    - {"d": {"results": [...]}}  (OData v2 con __count / __next)
    - {"d": [...]}               (OData v2 "verbose" antiguo)
    - [...]                      (lista directa)

    Cualquier otra cosa (None, {}, {"d": null}, {"d": {}}) es una coleccion
    vacia valida, no un error.
    """
    if isinstance(payload, list):
        return payload
    if not isinstance(payload, dict):
        return []

    envelope = payload.get("d")
    if isinstance(envelope, dict):
        envelope = envelope.get("results")
    if isinstance(envelope, list):
        return envelope
    return []


class SapODataClient:
    """
    Cliente HTTP de SAP Gateway. Retorna registros crudos.

    Importante:
    - No hace cast de tipos: eso lo decide el transformador / el almacen.
    - Las credenciales se reciben por llamada y no se guardan en la instancia.
    """

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._session = session or requests.Session()

    def close(self) -> None:
        self._session.close()

    def build_url(
        self,
        service_namespace: str,
        resource_collection: str,
        query: Optional[ODataQuery] = None,
    ) -> str:
        url = f"{self._base_url}/{service_namespace}/{resource_collection}?$format=json"
        extra = query.to_query_string() if query else ""
        if extra:
            url = f"{url}&{extra}"
        return url

    def fetch(
        self,
        service_namespace: str,
        resource_collection: str,
        credentials: UpstreamCredentials,
        query: Optional[ODataQuery] = None,
    ) -> list[RawUpstreamRecord]:
        """
        Lee un entity set completo (o la pagina pedida via query).

        Raises:
            UpstreamRequestException: status no 2xx (con status y cuerpo originales)
                o, como 502: cuerpo 2xx que no es JSON, registros que no son
                objetos JSON, SAP inalcanzable.
        """
        url = self.build_url(service_namespace, resource_collection, query)
        logger.debug(f"GET SAP OData {service_namespace}/{resource_collection}")

        try:
            resp = self._session.get(
                url,
                auth=(credentials.username, credentials.password),
                headers={"Accept": "application/json"},
            )
        except requests.RequestException as e:
            # Sin respuesta HTTP (DNS, conexion rechazada, TLS...)
            logger.error(f"SAP OData inalcanzable: {type(e).__name__}")
            raise UpstreamRequestException(502, str(e), "(SAP no disponible)") from e

        if not 200 <= resp.status_code < 300:
            logger.warning(
                f"SAP OData respondio {resp.status_code} para "
                f"{service_namespace}/{resource_collection}"
            )
            raise UpstreamRequestException(resp.status_code, resp.text, resp.reason or "")

        try:
            payload = resp.json()
        except ValueError as e:
            # 2xx con cuerpo ilegible: se reporta como gateway invalido
            raise UpstreamRequestException(502, resp.text, "(respuesta de SAP no es JSON)") from e

        records = normalize_odata_payload(payload)
        if any(not isinstance(record, dict) for record in records):
            raise UpstreamRequestException(502, resp.text, "(registros OData con formato invalido)")

        logger.debug(f"SAP OData devolvio {len(records)} registro(s)")
        return records
