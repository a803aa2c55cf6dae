"""
Asset allotment lifecycle
=========================
An allotment is created "Allotted" and becomes "Returned" through
`return_item`, which stamps today's date. The generic update can still
rewrite any column, status included.
"""

from datetime import date
from typing import Any, Dict, List

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..models import AssetAllotment, AssetDetail
from .catalog import ALLOTMENTS
from .resource_service import ResourceService

ALLOTTED = "Allotted"
RETURNED = "Returned"


class AllotmentService(ResourceService):

    def __init__(self, db: Session):
        super().__init__(db, ALLOTMENTS)

    def list_users(self) -> List[str]:
        stmt = (
            select(AssetAllotment.user_name)
            .where(AssetAllotment.user_name.isnot(None))
            .distinct()
            .order_by(AssetAllotment.user_name)
        )
        return list(self.db.execute(stmt).scalars())

    def return_item(self, allotment_id: int) -> Dict[str, Any]:
        """Mark returned as of today. Repeating the call re-stamps return_date."""
        return self.update_values(allotment_id, {"return_date": date.today(), "status": RETURNED})

    def current(self) -> List[Dict[str, Any]]:
        """Open allotments; rows whose asset no longer exists drop out of the join."""
        stmt = (
            select(
                AssetAllotment.allotment_id,
                AssetAllotment.asset_sn,
                AssetAllotment.user_name,
                AssetAllotment.department,
                AssetAllotment.location,
                AssetAllotment.item_name,
                AssetAllotment.item_make,
                AssetAllotment.item_serial_no,
                AssetAllotment.quantity,
                AssetAllotment.allotment_date,
                AssetAllotment.status,
                AssetDetail.asset_number,
                AssetDetail.make_model,
                AssetDetail.serial_number,
            )
            .select_from(AssetAllotment)
            .join(AssetDetail, AssetDetail.sn == AssetAllotment.asset_sn)
            .where(AssetAllotment.status == ALLOTTED)
            .order_by(AssetAllotment.allotment_date.desc(), AssetAllotment.allotment_id.desc())
        )
        return [dict(row._mapping) for row in self.db.execute(stmt)]

    def by_user(self, user_name: str) -> List[Dict[str, Any]]:
        """Full history for one user, any status; asset columns are null if the asset is gone."""
        stmt = (
            select(
                AssetAllotment.allotment_id,
                AssetAllotment.asset_sn,
                AssetAllotment.item_name,
                AssetAllotment.quantity,
                AssetAllotment.allotment_date,
                AssetAllotment.return_date,
                AssetAllotment.status,
                AssetAllotment.remarks,
                AssetDetail.asset_number,
                AssetDetail.make_model,
                AssetDetail.serial_number,
            )
            .select_from(AssetAllotment)
            .outerjoin(AssetDetail, AssetDetail.sn == AssetAllotment.asset_sn)
            .where(AssetAllotment.user_name == user_name)
            .order_by(AssetAllotment.allotment_date.desc(), AssetAllotment.allotment_id.desc())
        )
        return [dict(row._mapping) for row in self.db.execute(stmt)]
