from typing import Optional, List, Any, Dict
from datetime import date
from pydantic import BaseModel, Field, validator

from .services.introspection import normalize_date


class MessageOut(BaseModel):
    message: str
    data: Optional[Dict[str, Any]] = None


class DeletedOut(BaseModel):
    message: str
    deleted: int


class PageOut(BaseModel):
    data: List[Dict[str, Any]]
    total: int
    page: int
    pageSize: int


class AllotmentIn(BaseModel):
    """Body for creating or fully updating an allotment."""
    asset_sn: Optional[int] = None
    user_name: Optional[str] = None
    department: Optional[str] = None
    location: Optional[str] = None
    item_name: Optional[str] = None
    item_make: Optional[str] = None
    item_serial_no: Optional[str] = None
    quantity: Optional[int] = None
    allotment_date: Optional[date] = None
    return_date: Optional[date] = None
    status: Optional[str] = None
    remarks: Optional[str] = None

    @validator("asset_sn", "quantity", "item_make", "item_serial_no", "remarks", pre=True)
    def blank_as_unset(cls, v):
        return None if v == "" else v

    @validator("allotment_date", "return_date", pre=True)
    def normalize_dates(cls, v):
        return normalize_date(v)


class AllotmentOut(BaseModel):
    allotment_id: int
    asset_sn: Optional[int] = None
    user_name: Optional[str] = None
    department: Optional[str] = None
    location: Optional[str] = None
    item_name: Optional[str] = None
    item_make: Optional[str] = None
    item_serial_no: Optional[str] = None
    quantity: Optional[int] = None
    allotment_date: Optional[date] = None
    return_date: Optional[date] = None
    status: Optional[str] = None
    remarks: Optional[str] = None

    class Config:
        from_attributes = True


class AllotmentMessageOut(BaseModel):
    message: str
    data: AllotmentOut


class CurrentAllotmentOut(BaseModel):
    allotment_id: int
    asset_sn: Optional[int] = None
    user_name: Optional[str] = None
    department: Optional[str] = None
    location: Optional[str] = None
    item_name: Optional[str] = None
    item_make: Optional[str] = None
    item_serial_no: Optional[str] = None
    quantity: Optional[int] = None
    allotment_date: Optional[date] = None
    status: Optional[str] = None
    asset_number: Optional[str] = None
    make_model: Optional[str] = None
    serial_number: Optional[str] = None


class UserAllotmentOut(BaseModel):
    allotment_id: int
    asset_sn: Optional[int] = None
    item_name: Optional[str] = None
    quantity: Optional[int] = None
    allotment_date: Optional[date] = None
    return_date: Optional[date] = None
    status: Optional[str] = None
    remarks: Optional[str] = None
    asset_number: Optional[str] = None
    make_model: Optional[str] = None
    serial_number: Optional[str] = None


class AssetSummaryOut(BaseModel):
    department: Optional[str] = None
    DesktopLaptop: int
    Laptop: int
    Printer: int


class StockSummaryOut(BaseModel):
    stock_at: str = Field(..., alias="Stock At")
    item_type: Optional[str] = None
    Total: int

    class Config:
        populate_by_name = True


class EmailSummaryOut(BaseModel):
    location: Optional[str] = None
    particular: Optional[str] = None
    totalcount: int


class CostSummaryOut(BaseModel):
    month: Optional[str] = None
    location: Optional[str] = None
    cost_account: Optional[str] = Field(None, alias="Cost Account")
    totalcost: Optional[float] = None

    class Config:
        populate_by_name = True
