import pytest

from faker import Faker

fake = Faker()


@pytest.fixture
def scrap_data():
    return {
        "location": "Pune",
        "department": "Accounts",
        "asset_number": "AST-0012",
        "user_name": fake.name(),
        "make_model": "HP Compaq Desktop",
        "serial_number": "SGH123",
        "processor": "Core i3",
        "hdd": "500GB",
        "ram": "4GB",
        "dop_date": "15/03/2016",
    }


# ---------------------------------------------------------------- scrap items

def test_create_scrap_item_defaults(client, scrap_data):
    response = client.post("/api/scrap-items", json=scrap_data)

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["status"] == "Scrap"
    assert data["dop_date"] == "2016-03-15"
    assert data["scrap_date"] is not None


def test_scrap_date_is_not_client_writable(client, scrap_data):
    data = client.post("/api/scrap-items", json={**scrap_data, "scrap_date": "2001-01-01"}).json()["data"]
    assert not data["scrap_date"].startswith("2001")


def test_update_scrap_item_is_full_row(client, scrap_data):
    sn = client.post("/api/scrap-items", json=scrap_data).json()["data"]["sn"]

    response = client.put("/api/scrap-items", json={"sn": sn, "status": "Disposed", "dop_date": "2016-03-15"})

    data = response.json()["data"]
    assert data["status"] == "Disposed"
    assert data["dop_date"] == "2016-03-15"
    assert data["make_model"] is None


def test_list_scrap_items_newest_first(client, scrap_data):
    client.post("/api/scrap-items", json=scrap_data)
    client.post("/api/scrap-items", json=scrap_data)

    assert [r["sn"] for r in client.get("/api/scrap-items").json()] == [2, 1]


# ---------------------------------------------------------------- stock items

def test_stock_item_crud(client):
    created = client.post("/api/stock-items", json={
        "item_type": "Monitor",
        "make_model": "Dell P2219H",
        "status": "In Stock",
        "dop_date": "01/07/2023",
    })
    assert created.status_code == 201
    sn = created.json()["data"]["sn"]

    updated = client.put(f"/api/stock-items/{sn}", json={"item_type": "Monitor", "status": "Issued"})
    assert updated.json()["data"]["status"] == "Issued"
    assert updated.json()["data"]["dop_date"] is None

    assert client.delete(f"/api/stock-items/{sn}").json()["deleted"] == 1


def test_stock_items_ascending(client):
    for item_type in ("Mouse", "Keyboard"):
        client.post("/api/stock-items", json={"item_type": item_type})

    assert [r["item_type"] for r in client.get("/api/stock-items").json()] == ["Mouse", "Keyboard"]


def test_stock_update_without_sn_in_body_is_rejected(client):
    assert client.put("/api/stock-items", json={"status": "Issued"}).status_code == 400


# ---------------------------------------------------------------- invoices

@pytest.fixture
def seeded_invoices(client):
    vendors = ["Acme Computers", "Bright IT", "Acme Peripherals"]
    for i, vendor in enumerate(vendors, start=1):
        client.post("/api/invoices", json={
            "material": "Laptop" if i == 2 else "Printer",
            "vendor_name": vendor,
            "invoice_number": f"INV-{i:03d}",
            "invoice_date": "05/01/2024",
            "invoice_value": "1180.00",
            "taxable_value": "1000",
            "igst": "180",
        })
    return vendors


def test_invoice_list_is_paginated(client, seeded_invoices):
    body = client.get("/api/invoices", params={"page": 1, "pageSize": 2}).json()

    assert body["total"] == 3
    assert body["page"] == 1
    assert body["pageSize"] == 2
    assert [r["invoice_number"] for r in body["data"]] == ["INV-003", "INV-002"]

    second = client.get("/api/invoices", params={"page": 2, "pageSize": 2}).json()
    assert [r["invoice_number"] for r in second["data"]] == ["INV-001"]


def test_invoice_default_page_size(client, seeded_invoices):
    assert client.get("/api/invoices").json()["pageSize"] == 100


def test_invoice_zero_page_values_fall_back_to_defaults(client, seeded_invoices):
    response = client.get("/api/invoices", params={"page": 0, "pageSize": 0})

    assert response.status_code == 200
    body = response.json()
    assert body["page"] == 1
    assert body["pageSize"] == 100
    assert body["total"] == 3


def test_invoice_search_is_case_insensitive(client, seeded_invoices):
    body = client.get("/api/invoices", params={"search": "  acme "}).json()

    assert body["total"] == 2
    assert {r["vendor_name"] for r in body["data"]} == {"Acme Computers", "Acme Peripherals"}


def test_invoice_values_and_dates(client, seeded_invoices):
    row = client.get("/api/invoices/1").json()

    assert row["invoice_date"] == "2024-01-05"
    assert row["invoice_value"] == 1180.0


def test_missing_invoice_returns_404(client):
    response = client.get("/api/invoices/77")

    assert response.status_code == 404
    assert response.json()["detail"] == "Invoice not found"


def test_update_missing_invoice_returns_404(client):
    assert client.put("/api/invoices/77", json={"material": "Toner"}).status_code == 404


# ---------------------------------------------------------------- email ids

def test_email_blank_fields_are_stored_as_null(client):
    data = client.post("/api/emailids", json={
        "first_name": "Asha",
        "last_name": "",
        "email_address": "asha@example.com",
        "location": "Pune",
        "particular": "Personal",
        "remarks": "",
    }).json()["data"]

    assert data["last_name"] is None
    assert data["remarks"] is None


def test_email_search_and_default_page_size(client):
    client.post("/api/emailids", json={"first_name": "Asha", "email_address": "asha@example.com"})
    client.post("/api/emailids", json={"first_name": "Ravi", "email_address": "ravi@example.com"})

    body = client.get("/api/emailids", params={"search": "RAVI"}).json()

    assert body["pageSize"] == 500
    assert body["total"] == 1
    assert body["data"][0]["first_name"] == "Ravi"


def test_email_update_by_path(client):
    sn = client.post("/api/emailids", json={"first_name": "Asha"}).json()["data"]["sn"]

    data = client.put(f"/api/emailids/{sn}", json={"first_name": "Asha", "location": ""}).json()["data"]

    assert data["location"] is None


# ---------------------------------------------------------------- cost details

def test_cost_entry_dates_and_blank_amount(client):
    data = client.post("/api/cost-details", json={
        "date": "2024-01-05",
        "location": "Pune",
        "cost_account": "Internet",
        "amount": "",
        "payment_date": "10/01/2024",
    }).json()["data"]

    assert data["date"] == "2024-01-05"
    assert data["payment_date"] == "2024-01-10"
    assert data["amount"] is None


def test_cost_entry_bad_date_is_stored_as_null(client):
    data = client.post("/api/cost-details", json={"date": "sometime", "amount": 10}).json()["data"]
    assert data["date"] is None
    assert data["amount"] == 10


# ---------------------------------------------------------------- renewals

def test_renewal_defaults_and_ordering(client):
    first = client.post("/api/renewals", json={
        "sn": 2,
        "compliance_particulars": "Trade licence",
        "next_due_date": "31/03/2025",
    }).json()["data"]
    client.post("/api/renewals", json={"sn": 5, "compliance_particulars": "Antivirus"})

    assert first["notification_status"] == "pending"
    assert first["next_due_date"] == "2025-03-31"
    assert [r["sn"] for r in client.get("/api/renewals").json()] == [5, 2]


def test_renewal_fractional_sn_is_rejected(client):
    response = client.post("/api/renewals", json={"sn": "2.5", "compliance_particulars": "AMC"})

    assert response.status_code == 400
    assert client.get("/api/renewals").json() == []


def test_renewal_update_uses_id(client):
    renewal = client.post("/api/renewals", json={"sn": 1, "compliance_particulars": "AMC"}).json()["data"]

    response = client.put(f"/api/renewals/{renewal['id']}", json={
        "sn": 1,
        "compliance_particulars": "AMC",
        "notification_status": "sent",
    })

    assert response.status_code == 200
    assert response.json()["data"]["notification_status"] == "sent"


def test_delete_missing_renewal_is_not_an_error(client):
    response = client.delete("/api/renewals/999")

    assert response.status_code == 200
    assert response.json() == {"message": "Renewal deleted", "deleted": 0}
