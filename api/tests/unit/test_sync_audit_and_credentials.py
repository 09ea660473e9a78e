"""
Tests de la bitacora de sincronizacion y de la carga de credenciales SAP.
"""
import json

import pytest
from loguru import logger

from app.infrastructure.external.sap_odata.credentials import (
    SAP_PASSWORD_ENV,
    SAP_USERNAME_ENV,
    load_upstream_credentials,
)
from app.shared.utils.audit_logger import AuditLogger


class TestLoadUpstreamCredentials:

    def test_returns_credentials_when_both_set(self, monkeypatch):
        monkeypatch.setenv(SAP_USERNAME_ENV, "sap_user")
        monkeypatch.setenv(SAP_PASSWORD_ENV, "s3cret")

        creds = load_upstream_credentials()

        assert creds is not None
        assert creds.username == "sap_user"
        assert creds.password == "s3cret"

    @pytest.mark.parametrize(
        "username,password",
        [(None, "s3cret"), ("sap_user", None), ("", "s3cret"), ("sap_user", "")],
    )
    def test_missing_or_empty_value_is_none(self, monkeypatch, username, password):
        for name, value in ((SAP_USERNAME_ENV, username), (SAP_PASSWORD_ENV, password)):
            if value is None:
                monkeypatch.delenv(name, raising=False)
            else:
                monkeypatch.setenv(name, value)

        assert load_upstream_credentials() is None

    def test_reads_environment_on_every_call(self, monkeypatch):
        monkeypatch.delenv(SAP_USERNAME_ENV, raising=False)
        monkeypatch.delenv(SAP_PASSWORD_ENV, raising=False)
        assert load_upstream_credentials() is None

        monkeypatch.setenv(SAP_USERNAME_ENV, "late_user")
        monkeypatch.setenv(SAP_PASSWORD_ENV, "late_pass")
        assert load_upstream_credentials().username == "late_user"


class TestAuditLogger:

    def test_success_entry(self):
        entry = AuditLogger.build_entry("SalesInvoice", succeeded=True, synced=12, purged=3)

        assert entry["entity"] == "SalesInvoice"
        assert entry["result"] == "success"
        assert entry["synced"] == 12
        assert entry["purged"] == 3
        assert "error_code" not in entry

    def test_error_entry_carries_code_and_status(self):
        entry = AuditLogger.build_entry(
            "SalesInvoice", succeeded=False, error_code="UPSTREAM_REQUEST_FAILED", status_code=503
        )

        assert entry["result"] == "error"
        assert entry["error_code"] == "UPSTREAM_REQUEST_FAILED"
        assert entry["status_code"] == 503

    def test_log_sync_writes_json_line_with_audit_context(self):
        captured = []
        sink_id = logger.add(
            lambda message: captured.append(message.record),
            filter=lambda record: record["extra"].get("context") == AuditLogger.CONTEXT,
        )
        try:
            AuditLogger.log_sync("Supplier", succeeded=True, synced=4)
        finally:
            logger.remove(sink_id)

        assert len(captured) == 1
        payload = json.loads(captured[0]["message"])
        assert payload["entity"] == "Supplier"
        assert payload["synced"] == 4

    def test_initialize_creates_daily_file(self, tmp_path, monkeypatch):
        monkeypatch.setattr(AuditLogger, "SYNC_LOG_DIR", tmp_path / "sync_logs")
        try:
            AuditLogger.initialize()
            AuditLogger.log_sync("Inventory", succeeded=True, synced=1)
        finally:
            AuditLogger.shutdown()

        files = list((tmp_path / "sync_logs").glob("sync_*.log"))
        assert len(files) == 1
        assert '"entity": "Inventory"' in files[0].read_text()
