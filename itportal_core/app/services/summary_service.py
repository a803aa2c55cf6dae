"""
Dashboard summaries. Read-only grouped aggregates; groups with no rows are
simply absent from the result.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy import and_, case, func, literal, literal_column, or_, select
from sqlalchemy.orm import Session

from ..models import AssetDetail, CostDetail, EmailIdDetail, StockItem

STOCK_AT = "IT Department"
COMPUTER_KEYWORDS = ("Desktop", "Laptop", "Computer")


def month_of(db: Session, column):
    """Truncate a date column to a 'YYYY-MM' string for the bound dialect."""
    dialect = db.get_bind().dialect.name
    if dialect == "sqlite":
        return func.strftime(literal_column("'%Y-%m'"), column)
    return func.to_char(column, literal_column("'YYYY-MM'"))


def _rows(result) -> List[Dict[str, Any]]:
    return [dict(row._mapping) for row in result]


class SummaryService:

    def __init__(self, db: Session):
        self.db = db

    def asset_summary(self, location: Optional[str] = None) -> List[Dict[str, Any]]:
        make_model = AssetDetail.make_model
        is_computer = or_(*[make_model.ilike(f"%{word}%") for word in COMPUTER_KEYWORDS])
        has_printer = and_(AssetDetail.printer.isnot(None), AssetDetail.printer != "")

        stmt = select(
            AssetDetail.department,
            func.sum(case((is_computer, 1), else_=0)).label("DesktopLaptop"),
            func.sum(case((make_model.ilike("%Laptop%"), 1), else_=0)).label("Laptop"),
            func.sum(case((has_printer, 1), else_=0)).label("Printer"),
        )
        if location:
            stmt = stmt.where(AssetDetail.location == location)
        stmt = stmt.group_by(AssetDetail.department).order_by(AssetDetail.department)
        return _rows(self.db.execute(stmt))

    def locations(self) -> List[str]:
        stmt = (
            select(AssetDetail.location)
            .where(AssetDetail.location.isnot(None), AssetDetail.location != "")
            .distinct()
            .order_by(AssetDetail.location)
        )
        return list(self.db.execute(stmt).scalars())

    def stock_summary(self) -> List[Dict[str, Any]]:
        stmt = (
            select(
                literal(STOCK_AT).label("Stock At"),
                StockItem.item_type,
                func.count().label("Total"),
            )
            .group_by(StockItem.item_type)
            .order_by(StockItem.item_type)
        )
        return _rows(self.db.execute(stmt))

    def email_summary(self) -> List[Dict[str, Any]]:
        stmt = (
            select(
                EmailIdDetail.location,
                EmailIdDetail.particular,
                func.count(EmailIdDetail.sn).label("totalcount"),
            )
            .group_by(EmailIdDetail.location, EmailIdDetail.particular)
            .order_by(EmailIdDetail.location, EmailIdDetail.particular)
        )
        return _rows(self.db.execute(stmt))

    def cost_summary(self) -> List[Dict[str, Any]]:
        month = month_of(self.db, CostDetail.date)
        stmt = (
            select(
                month.label("month"),
                CostDetail.location,
                CostDetail.cost_account.label("Cost Account"),
                func.sum(CostDetail.amount).label("totalcost"),
            )
            .group_by(month, CostDetail.location, CostDetail.cost_account)
            .order_by(month.desc(), CostDetail.location, CostDetail.cost_account)
        )
        return _rows(self.db.execute(stmt))
