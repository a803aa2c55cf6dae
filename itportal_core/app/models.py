from datetime import date, datetime
from sqlalchemy import Column, Integer, String, Date, DateTime, Text, Numeric
from .db import Base


class Indent(Base):
    __tablename__ = "indents"
    id = Column(Integer, primary_key=True, index=True)
    requisition_no = Column(String, nullable=True, index=True)  # IT/<seq>/<fiscal-year>
    descriptionofmaterial = Column(Text, nullable=True)
    reqqty = Column(Numeric(12, 2), nullable=True)
    pendingqty = Column(Numeric(12, 2), nullable=True)
    uom = Column(String, nullable=True)
    presentstock = Column(Numeric(12, 2), nullable=True)
    avmc_last3months = Column(Numeric(12, 2), nullable=True)
    maxcons_last1year = Column(Numeric(12, 2), nullable=True)
    requireddate = Column(Date, nullable=True)
    remarksordrawingno = Column(Text, nullable=True)
    requiredby = Column(String, nullable=True)
    storemanager = Column(String, nullable=True)
    reviewedby = Column(String, nullable=True)


class AssetDetail(Base):
    """Asset master. Columns added directly in the database are picked up by reflection."""
    __tablename__ = "asset_details"
    sn = Column(Integer, primary_key=True, index=True)
    location = Column(String, nullable=True, index=True)
    department = Column(String, nullable=True)
    asset_number = Column(String, nullable=True)
    user_name = Column(String, nullable=True)
    make_model = Column(String, nullable=True)
    serial_number = Column(String, nullable=True)
    processor = Column(String, nullable=True)
    hdd = Column(String, nullable=True)
    ram = Column(String, nullable=True)
    os = Column(String, nullable=True)
    printer = Column(String, nullable=True)
    ups = Column(String, nullable=True)
    ip_address = Column(String, nullable=True)
    cost = Column(Numeric(12, 2), nullable=True)
    purchase_date = Column(Date, nullable=True)
    remarks = Column(Text, nullable=True)


class ScrapItem(Base):
    __tablename__ = "scrap_items"
    sn = Column(Integer, primary_key=True, index=True)
    location = Column(String, nullable=True)
    department = Column(String, nullable=True)
    asset_number = Column(String, nullable=True)
    user_name = Column(String, nullable=True)
    make_model = Column(String, nullable=True)
    serial_number = Column(String, nullable=True)
    processor = Column(String, nullable=True)
    hdd = Column(String, nullable=True)
    ram = Column(String, nullable=True)
    status = Column(String, nullable=True, default="Scrap")
    dop_date = Column(Date, nullable=True)  # date of purchase
    scrap_date = Column(DateTime, default=datetime.utcnow)


class StockItem(Base):
    __tablename__ = "stock_items"
    sn = Column(Integer, primary_key=True, index=True)
    department = Column(String, nullable=True)
    asset_number = Column(String, nullable=True)
    user_name = Column(String, nullable=True)
    item_type = Column(String, nullable=True, index=True)
    make_model = Column(String, nullable=True)
    serial_number = Column(String, nullable=True)
    processor = Column(String, nullable=True)
    hdd = Column(String, nullable=True)
    ram = Column(String, nullable=True)
    status = Column(String, nullable=True)
    dop_date = Column(Date, nullable=True)


class InvoiceDetail(Base):
    __tablename__ = "invoice_details"
    sn = Column(Integer, primary_key=True, index=True)
    indent_date = Column(Date, nullable=True)
    material = Column(String, nullable=True)
    particular = Column(String, nullable=True)
    quantity = Column(Numeric(12, 2), nullable=True)
    uom = Column(String, nullable=True)
    vendor_name = Column(String, nullable=True)
    purchase_order_number = Column(String, nullable=True)
    purchase_order_date = Column(Date, nullable=True)
    invoice_number = Column(String, nullable=True)
    invoice_date = Column(Date, nullable=True)
    invoice_value = Column(Numeric(14, 2), nullable=True)
    taxable_value = Column(Numeric(14, 2), nullable=True)
    igst = Column(Numeric(14, 2), nullable=True)
    cgst = Column(Numeric(14, 2), nullable=True)
    sgst = Column(Numeric(14, 2), nullable=True)
    bill_handed_over_to = Column(String, nullable=True)
    allocation_date = Column(Date, nullable=True)
    fixed_asset_number = Column(String, nullable=True)
    user_name = Column(String, nullable=True)
    use_from = Column(Date, nullable=True)
    use_to = Column(Date, nullable=True)
    remarks = Column(Text, nullable=True)


class EmailIdDetail(Base):
    __tablename__ = "email_id_details"
    sn = Column(Integer, primary_key=True, index=True)
    first_name = Column(String, nullable=True)
    last_name = Column(String, nullable=True)
    email_address = Column(String, nullable=True, index=True)
    location = Column(String, nullable=True)
    particular = Column(String, nullable=True)  # mailbox type, e.g. "Personal", "Shared"
    remarks = Column(Text, nullable=True)


class CostDetail(Base):
    __tablename__ = "cost_details"
    sn = Column(Integer, primary_key=True, index=True)
    date = Column(Date, nullable=True)
    location = Column(String, nullable=True)
    cost_account = Column(String, nullable=True)
    cost_details = Column(Text, nullable=True)
    amount = Column(Numeric(14, 2), nullable=True)
    payment_date = Column(Date, nullable=True)


class Renewal(Base):
    """Recurring compliance renewal (licences, AMC contracts, statutory filings)"""
    __tablename__ = "renewals"
    id = Column(Integer, primary_key=True, index=True)
    sn = Column(Integer, nullable=True)  # display order, entered by the user
    compliance_particulars = Column(Text, nullable=True)
    last_year_details = Column(Text, nullable=True)
    authority_provider = Column(String, nullable=True)
    auth_address = Column(Text, nullable=True)
    law_statute = Column(String, nullable=True)
    last_due_date = Column(Date, nullable=True)
    actual_date_of_compliences = Column(Date, nullable=True)
    actual_cost = Column(Numeric(14, 2), nullable=True)
    frequency = Column(String, nullable=True)
    next_due_date = Column(Date, nullable=True)
    notification_status = Column(String, nullable=True, default="pending")


class AssetAllotment(Base):
    """An asset handed to a user; status moves Allotted -> Returned"""
    __tablename__ = "asset_allotment"
    allotment_id = Column(Integer, primary_key=True, index=True)
    # Plain reference, no FK: history must survive deletion of the asset.
    asset_sn = Column(Integer, nullable=True, index=True)
    user_name = Column(String, nullable=True, index=True)
    department = Column(String, nullable=True)
    location = Column(String, nullable=True)
    item_name = Column(String, nullable=True)
    item_make = Column(String, nullable=True)
    item_serial_no = Column(String, nullable=True)
    quantity = Column(Integer, nullable=True, default=1)
    allotment_date = Column(Date, nullable=True, default=date.today)
    return_date = Column(Date, nullable=True)
    status = Column(String, nullable=True, default="Allotted")
    remarks = Column(Text, nullable=True)
