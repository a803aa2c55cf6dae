from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from .. import schemas
from ..deps import get_db
from ..services.summary_service import SummaryService

router = APIRouter(prefix="/api", tags=["reports"])


@router.get("/asset-summary", response_model=List[schemas.AssetSummaryOut])
def asset_summary(location: Optional[str] = Query(None), db: Session = Depends(get_db)):
    """Desktop/laptop and printer counts per department, optionally for one location"""
    return SummaryService(db).asset_summary(location=location)


@router.get("/locations", response_model=List[str])
def list_locations(db: Session = Depends(get_db)):
    return SummaryService(db).locations()


@router.get("/stock-summary", response_model=List[schemas.StockSummaryOut])
def stock_summary(db: Session = Depends(get_db)):
    return SummaryService(db).stock_summary()


@router.get("/email-summary", response_model=List[schemas.EmailSummaryOut])
def email_summary(db: Session = Depends(get_db)):
    return SummaryService(db).email_summary()


@router.get("/cost-summary", response_model=List[schemas.CostSummaryOut])
def cost_summary(db: Session = Depends(get_db)):
    """Monthly spend per location and cost account, newest month first"""
    return SummaryService(db).cost_summary()
