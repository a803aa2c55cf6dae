from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..deps import get_db
from ..services.indent_service import IndentService

# Mounted ahead of the generic /api/indents router so "/next-number" is not read as an id
router = APIRouter(prefix="/api/indents", tags=["indents"])


@router.get("/next-number")
def preview_requisition_number(db: Session = Depends(get_db)):
    """Next requisition number as of now. Not reserved; the number is fixed at creation."""
    return {"Requisition_No": IndentService(db).next_requisition_number()}
