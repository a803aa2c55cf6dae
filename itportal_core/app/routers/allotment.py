"""
Asset Allotment API Router
==========================
Allot assets to users and take them back. The literal sub-paths
(/users, /current, /by-user, /return) are declared before /{allotment_id}.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ..deps import get_db
from ..schemas import (
    AllotmentIn, AllotmentOut, AllotmentMessageOut, CurrentAllotmentOut,
    UserAllotmentOut, DeletedOut,
)
from ..services.allotment_service import AllotmentService
from ..services.exceptions import InvalidFieldError, RecordNotFoundError

router = APIRouter(prefix="/api/asset-allotment", tags=["asset-allotment"])


def get_service(db: Session = Depends(get_db)) -> AllotmentService:
    return AllotmentService(db)


@router.get("", response_model=List[AllotmentOut])
def list_allotments(service: AllotmentService = Depends(get_service)):
    return service.list_all()


@router.get("/users", response_model=List[str])
def list_allotment_users(service: AllotmentService = Depends(get_service)):
    """Distinct assignees for the allotment dropdown"""
    return service.list_users()


@router.get("/current", response_model=List[CurrentAllotmentOut])
def current_allotments(service: AllotmentService = Depends(get_service)):
    """Assets currently out with users, joined with the asset master"""
    return service.current()


@router.get("/by-user/{username}", response_model=List[UserAllotmentOut])
def allotments_by_user(username: str, service: AllotmentService = Depends(get_service)):
    return service.by_user(username)


@router.post("", response_model=AllotmentMessageOut, status_code=201)
def create_allotment(payload: AllotmentIn, service: AllotmentService = Depends(get_service)):
    try:
        row = service.create(payload.model_dump())
    except InvalidFieldError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"message": "Asset item allotted successfully", "data": row}


@router.put("/return/{allotment_id}", response_model=AllotmentMessageOut)
def return_allotment(allotment_id: int, service: AllotmentService = Depends(get_service)):
    try:
        row = service.return_item(allotment_id)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"message": "Asset item returned successfully", "data": row}


@router.put("/{allotment_id}", response_model=AllotmentMessageOut)
def update_allotment(
    allotment_id: int,
    payload: AllotmentIn,
    service: AllotmentService = Depends(get_service),
):
    """Full-row update. Status is written as given; no lifecycle check here."""
    try:
        row = service.update(allotment_id, payload.model_dump())
    except RecordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidFieldError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"message": "Asset allotment updated", "data": row}


@router.delete("/{allotment_id}", response_model=DeletedOut)
def delete_allotment(allotment_id: int, service: AllotmentService = Depends(get_service)):
    deleted = service.delete(allotment_id)
    return {"message": "Asset allotment deleted", "deleted": deleted}


@router.get("/{allotment_id}", response_model=AllotmentOut)
def get_allotment(allotment_id: int, service: AllotmentService = Depends(get_service)):
    try:
        return service.get(allotment_id)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
