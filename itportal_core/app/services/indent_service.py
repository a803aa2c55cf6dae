"""
Procurement indents and requisition numbering.

Requisition numbers look like ``IT/<seq>/<fiscal-year>``. The fiscal-year
label is fixed configuration, not derived from the clock.
"""
import logging
import os
from typing import Any, Dict

from sqlalchemy import func, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..models import Indent
from .catalog import INDENTS
from .resource_service import ResourceService

logger = logging.getLogger(__name__)

FISCAL_YEAR = os.getenv("FISCAL_YEAR", "25-26")


def format_requisition_no(sequence: int, fiscal_year: str = None) -> str:
    return f"IT/{sequence}/{fiscal_year or FISCAL_YEAR}"


class IndentService(ResourceService):

    def __init__(self, db: Session):
        super().__init__(db, INDENTS)

    def next_requisition_number(self) -> str:
        """
        Preview the next requisition number as MAX(id) + 1.

        Nothing is reserved: two callers reading before either inserts get
        the same answer. `create` does not rely on this value.
        """
        try:
            max_id = self.db.execute(select(func.max(Indent.id))).scalar()
        except SQLAlchemyError:
            logger.exception("Error generating requisition number")
            self.db.rollback()
            return format_requisition_no(0)
        return format_requisition_no((max_id or 0) + 1)

    def create(self, body: Dict[str, Any]) -> Dict[str, Any]:
        """Insert an indent and stamp its requisition number from the generated id.

        Both statements run in one transaction, so concurrent creates cannot
        share a number. Any client-supplied Requisition_No is ignored.
        """
        values = self.prepare_create(body)
        try:
            indent_id = self.db.execute(
                insert(Indent.__table__).values(**values).returning(Indent.id)
            ).scalar_one()
            self.db.execute(
                update(Indent.__table__)
                .where(Indent.id == indent_id)
                .values(requisition_no=format_requisition_no(indent_id))
            )
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        return self.get(indent_id)
