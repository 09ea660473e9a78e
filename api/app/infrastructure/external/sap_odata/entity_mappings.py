"""
Mapeos SAP OData -> almacen local por entidad.

Este es el unico lugar donde se declara:
- que entidades se pueden sincronizar
- de que servicio / entity set sale cada una
- que campos SAP se copian y con que nombre local

Cada dict es {campo_local: campo_sap}. Los campos SAP no listados se
descartan al transformar.

Este modulo no realiza I/O: solo define configuracion.
"""

from __future__ import annotations

from app.domain.entities.entity_mapping import EntityMapping, EntityMappingRegistry, FieldMap


def _mapping(logical_name: str, service: str, entity_set: str, fields: dict[str, str]) -> EntityMapping:
    return EntityMapping(
        logical_name=logical_name,
        service_namespace=service,
        resource_collection=entity_set,
        field_map=FieldMap.from_dict(fields),
    )


def default_entity_mappings() -> list[EntityMapping]:
    """Las diez entidades sincronizables, en orden de registro."""
    return [
        _mapping(
            "SalesOrder",
            "ZGW_SALES_SRV",
            "SalesOrdersSet",
            {
                "order_number": "OrderNumber",
                "customer_name": "CustomerName",
                "customer_code": "CustomerCode",
                "order_date": "OrderDate",
                "delivery_date": "DeliveryDate",
                "net_value": "NetValue",
                "currency": "Currency",
                "status": "Status",
                "sales_org": "SalesOrg",
                "material_group": "MaterialGroup",
                "salesperson_name": "SalespersonName",
                "salesperson_code": "SalespersonCode",
                "region": "Region",
                "city": "City",
            },
        ),
        _mapping(
            "SalesInvoice",
            "ZGW_SALES_SRV",
            "SalesInvoicesSet",
            {
                "invoice_number": "InvoiceNumber",
                "order_number": "OrderNumber",
                "customer_name": "CustomerName",
                "customer_code": "CustomerCode",
                "invoice_date": "InvoiceDate",
                "due_date": "DueDate",
                "gross_amount": "GrossAmount",
                "tax_amount": "TaxAmount",
                "net_amount": "NetAmount",
                "currency": "Currency",
                "status": "Status",
                "salesperson_name": "SalespersonName",
                "region": "Region",
                "payment_terms": "PaymentTerms",
            },
        ),
        _mapping(
            "PurchaseOrder",
            "ZGW_PURCHASE_SRV",
            "PurchaseOrdersSet",
            {
                "po_number": "PONumber",
                "vendor_name": "VendorName",
                "vendor_code": "VendorCode",
                "po_date": "PODate",
                "delivery_date": "DeliveryDate",
                "net_value": "NetValue",
                "currency": "Currency",
                "status": "Status",
                "purchasing_org": "PurchasingOrg",
                "material_group": "MaterialGroup",
            },
        ),
        _mapping(
            "VendorInvoice",
            "ZGW_PURCHASE_SRV",
            "VendorInvoicesSet",
            {
                "invoice_number": "InvoiceNumber",
                "vendor_name": "VendorName",
                "vendor_code": "VendorCode",
                "invoice_date": "InvoiceDate",
                "due_date": "DueDate",
                "gross_amount": "GrossAmount",
                "tax_amount": "TaxAmount",
                "net_amount": "NetAmount",
                "currency": "Currency",
                "status": "Status",
                "po_reference": "POReference",
            },
        ),
        _mapping(
            "Inventory",
            "ZGW_INVENTORY_SRV",
            "InventorySet",
            {
                "material_number": "MaterialNumber",
                "material_description": "MaterialDescription",
                "plant": "Plant",
                "storage_location": "StorageLocation",
                "quantity_on_hand": "QuantityOnHand",
                "unit_of_measure": "UnitOfMeasure",
                "value": "Value",
                "currency": "Currency",
                "material_group": "MaterialGroup",
                "reorder_point": "ReorderPoint",
                "safety_stock": "SafetyStock",
            },
        ),
        _mapping(
            "FinancialEntry",
            "ZGW_FINANCE_SRV",
            "FinancialEntriesSet",
            {
                "document_number": "DocumentNumber",
                "company_code": "CompanyCode",
                "fiscal_year": "FiscalYear",
                "posting_date": "PostingDate",
                "document_type": "DocumentType",
                "gl_account": "GLAccount",
                "gl_account_name": "GLAccountName",
                "debit_amount": "DebitAmount",
                "credit_amount": "CreditAmount",
                "currency": "Currency",
                "cost_center": "CostCenter",
                "profit_center": "ProfitCenter",
            },
        ),
        _mapping(
            "ProductionOrder",
            "ZGW_PRODUCTION_SRV",
            "ProductionOrdersSet",
            {
                "order_number": "OrderNumber",
                "material_number": "MaterialNumber",
                "material_description": "MaterialDescription",
                "plant": "Plant",
                "order_type": "OrderType",
                "planned_quantity": "PlannedQuantity",
                "confirmed_quantity": "ConfirmedQuantity",
                "unit_of_measure": "UnitOfMeasure",
                "start_date": "StartDate",
                "end_date": "EndDate",
                "status": "Status",
                "work_center": "WorkCenter",
            },
        ),
        _mapping(
            "Shipment",
            "ZGW_LOGISTICS_SRV",
            "ShipmentsSet",
            {
                "shipment_number": "ShipmentNumber",
                "type": "Type",
                "origin": "Origin",
                "destination": "Destination",
                "carrier": "Carrier",
                "ship_date": "ShipDate",
                "expected_delivery": "ExpectedDelivery",
                "actual_delivery": "ActualDelivery",
                "status": "Status",
                "reference_type": "ReferenceType",
                "reference_number": "ReferenceNumber",
                "weight": "Weight",
                "volume": "Volume",
                "freight_cost": "FreightCost",
                "currency": "Currency",
            },
        ),
        _mapping(
            "Supplier",
            "ZGW_LOGISTICS_SRV",
            "SuppliersSet",
            {
                "supplier_code": "SupplierCode",
                "name": "Name",
                "category": "Category",
                "country": "Country",
                "city": "City",
                "contact_person": "ContactPerson",
                "email": "Email",
                "phone": "Phone",
                "lead_time_days": "LeadTimeDays",
                "rating": "Rating",
                "status": "Status",
                "payment_terms": "PaymentTerms",
                "total_spend": "TotalSpend",
            },
        ),
        # Entregas salientes (cabecera LIKP en SAP)
        _mapping(
            "Delivery",
            "ZGW_LOGISTICS_SRV",
            "DeliveriesSet",
            {
                "delivery_number": "DeliveryNumber",
                "order_number": "OrderNumber",
                "customer_name": "CustomerName",
                "customer_code": "CustomerCode",
                "delivery_type": "DeliveryType",
                "shipping_point": "ShippingPoint",
                "plant": "Plant",
                "planned_gi_date": "PlannedGIDate",
                "actual_gi_date": "ActualGIDate",
                "delivery_date": "DeliveryDate",
                "carrier": "Carrier",
                "status": "Status",
                "total_weight": "TotalWeight",
                "weight_unit": "WeightUnit",
            },
        ),
    ]


def build_default_registry() -> EntityMappingRegistry:
    """Registro por defecto del proceso (se construye una vez, ver dependencias)."""
    return EntityMappingRegistry(default_entity_mappings())
