"""Table-backed resources exposed under /api."""
from datetime import date, datetime

from .. import models
from .resource_service import Resource

INDENT_ALIASES = {
    "Id": "id",
    "Requisition_No": "requisition_no",
    "DescriptionOfMaterial": "descriptionofmaterial",
    "ReqQty": "reqqty",
    "PendingQty": "pendingqty",
    "UOM": "uom",
    "PresentStock": "presentstock",
    "AVMC_Last3Months": "avmc_last3months",
    "MaxCons_Last1Year": "maxcons_last1year",
    "RequiredDate": "requireddate",
    "RemarksOrDrawingNo": "remarksordrawingno",
    "RequiredBy": "requiredby",
    "StoreManager": "storemanager",
    "ReviewedBy": "reviewedby",
}

INDENTS = Resource(
    name="indents",
    label="Indent",
    table_name="indents",
    key="id",
    model=models.Indent,
    # requisition_no is server-generated and never written from the body
    fields=tuple(c for c in INDENT_ALIASES.values() if c not in ("id", "requisition_no")),
    aliases=INDENT_ALIASES,
    partial_update=True,
    body_key=True,
)

ASSET_DETAILS = Resource(
    name="asset-details",
    label="Asset",
    table_name="asset_details",
    key="sn",
    descending=False,
    partial_update=True,
    body_key=True,
)

_HARDWARE_FIELDS = (
    "department", "asset_number", "user_name", "make_model", "serial_number",
    "processor", "hdd", "ram", "status", "dop_date",
)

SCRAP_ITEMS = Resource(
    name="scrap-items",
    label="Scrap item",
    table_name="scrap_items",
    key="sn",
    model=models.ScrapItem,
    fields=("location",) + _HARDWARE_FIELDS,
    defaults={"status": "Scrap", "scrap_date": datetime.utcnow},
    body_key=True,
)

STOCK_ITEMS = Resource(
    name="stock-items",
    label="Stock item",
    table_name="stock_items",
    key="sn",
    model=models.StockItem,
    fields=("item_type",) + _HARDWARE_FIELDS,
    descending=False,
    body_key=True,
)

INVOICES = Resource(
    name="invoices",
    label="Invoice",
    table_name="invoice_details",
    key="sn",
    model=models.InvoiceDetail,
    fields=(
        "indent_date", "material", "particular", "quantity", "uom", "vendor_name",
        "purchase_order_number", "purchase_order_date", "invoice_number", "invoice_date",
        "invoice_value", "taxable_value", "igst", "cgst", "sgst", "bill_handed_over_to",
        "allocation_date", "fixed_asset_number", "user_name", "use_from", "use_to", "remarks",
    ),
    search_columns=("material", "particular", "vendor_name", "invoice_number"),
    page_size=100,
)

EMAIL_IDS = Resource(
    name="emailids",
    label="Email ID",
    table_name="email_id_details",
    key="sn",
    model=models.EmailIdDetail,
    fields=("first_name", "last_name", "email_address", "location", "particular", "remarks"),
    search_columns=("first_name", "last_name", "email_address", "location", "particular", "remarks"),
    page_size=500,
    blank_to_null=True,
)

COST_DETAILS = Resource(
    name="cost-details",
    label="Cost entry",
    table_name="cost_details",
    key="sn",
    model=models.CostDetail,
    fields=("date", "location", "cost_account", "cost_details", "amount", "payment_date"),
    blank_to_null=True,
)

RENEWALS = Resource(
    name="renewals",
    label="Renewal",
    table_name="renewals",
    key="id",
    model=models.Renewal,
    fields=(
        "sn", "compliance_particulars", "last_year_details", "authority_provider",
        "auth_address", "law_statute", "last_due_date", "actual_date_of_compliences",
        "actual_cost", "frequency", "next_due_date", "notification_status",
    ),
    order_by="sn",
    defaults={"notification_status": "pending"},
)

ALLOTMENTS = Resource(
    name="asset-allotment",
    label="Asset allotment",
    table_name="asset_allotment",
    key="allotment_id",
    model=models.AssetAllotment,
    fields=(
        "asset_sn", "user_name", "department", "location", "item_name", "item_make",
        "item_serial_no", "quantity", "allotment_date", "return_date", "status", "remarks",
    ),
    defaults={"quantity": 1, "allotment_date": date.today, "status": "Allotted"},
)

# Served by the generic router; allotments have their own router.
GENERIC_RESOURCES = (
    ASSET_DETAILS,
    SCRAP_ITEMS,
    STOCK_ITEMS,
    INVOICES,
    EMAIL_IDS,
    COST_DETAILS,
    RENEWALS,
)
