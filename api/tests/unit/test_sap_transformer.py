"""
Tests de la transformacion SAP -> esquema local.
"""
from app.domain.entities.entity_mapping import FieldMap
from app.infrastructure.external.sap_odata.entity_mappings import default_entity_mappings
from app.infrastructure.external.sap_odata.transformer import transform_record, transform_records


def test_sales_invoice_scenario(registry) -> None:
    mapping = registry.resolve("SalesInvoice")
    result = transform_records([{"InvoiceNumber": "INV1", "GrossAmount": 100}], mapping.field_map)
    assert result == [{"invoice_number": "INV1", "gross_amount": 100}]


def test_unmapped_fields_are_dropped(registry) -> None:
    mapping = registry.resolve("SalesInvoice")
    raw = {
        "__metadata": {"uri": "SalesInvoicesSet('INV1')", "type": "ZGW_SALES_SRV.SalesInvoice"},
        "InvoiceNumber": "INV1",
        "InternalFlag": "X",
        "invoice_number": "shadow",
    }
    assert transform_record(raw, mapping.field_map) == {"invoice_number": "INV1"}


def test_values_are_copied_verbatim() -> None:
    field_map = FieldMap.from_dict({"amount": "Amount", "notes": "Notes", "posted": "Posted"})
    nested = {"results": [1, 2]}
    raw = {"Amount": "100.50", "Notes": None, "Posted": nested}

    row = transform_record(raw, field_map)

    assert row == {"amount": "100.50", "notes": None, "posted": nested}
    assert row["posted"] is nested


def test_missing_mapped_fields_stay_absent() -> None:
    field_map = FieldMap.from_dict({"code": "Code", "name": "Name"})
    assert transform_record({"Code": "A1"}, field_map) == {"code": "A1"}
    assert transform_record({}, field_map) == {}


def test_order_is_preserved() -> None:
    field_map = FieldMap.from_dict({"code": "Code"})
    raw = [{"Code": str(i)} for i in range(5)]
    assert [r["code"] for r in transform_records(raw, field_map)] == ["0", "1", "2", "3", "4"]


def test_every_entity_output_keys_are_declared_local_fields() -> None:
    for mapping in default_entity_mappings():
        field_map = mapping.field_map
        full_sample = {upstream: f"v-{upstream}" for upstream in field_map.upstream_fields}
        full_sample.update({"__metadata": {}, "ZZ_Custom": 1, "Unknown": "x"})

        row = transform_record(full_sample, field_map)
        assert list(row) == field_map.local_fields, mapping.logical_name

        # Solo la mitad de los campos presentes: la salida es ese subconjunto
        half = field_map.upstream_fields[::2]
        partial = {upstream: 1 for upstream in half}
        partial["Unknown"] = 2
        row = transform_record(partial, field_map)
        assert set(row) == {field_map.to_local(u) for u in half}, mapping.logical_name


def test_transform_does_not_mutate_input() -> None:
    field_map = FieldMap.from_dict({"code": "Code"})
    raw = [{"Code": "A", "Extra": 1}]
    transform_records(raw, field_map)
    assert raw == [{"Code": "A", "Extra": 1}]
