"""
Credenciales de SAP desde variables de entorno.

Se leen en cada llamada (no se cachean en Settings) para que un cambio de
credenciales no requiera reiniciar el proceso. Nunca se loguean.
"""

from __future__ import annotations

import os
from typing import Optional

from app.domain.entities.sync import UpstreamCredentials

SAP_USERNAME_ENV = "SAP_ODATA_USERNAME"
SAP_PASSWORD_ENV = "SAP_ODATA_PASSWORD"


def load_upstream_credentials() -> Optional[UpstreamCredentials]:
    """
    Retorna las credenciales o None si falta alguna.

    Un valor vacio cuenta como ausente: no hay defaults.
    """
    username = os.getenv(SAP_USERNAME_ENV)
    password = os.getenv(SAP_PASSWORD_ENV)
    if not username or not password:
        return None
    return UpstreamCredentials(username=username, password=password)
