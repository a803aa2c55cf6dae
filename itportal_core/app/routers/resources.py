"""
Generic CRUD routers
====================
One router per table-backed resource, all sharing the same contract:

    GET    /api/<name>          list (bare array, or {data,total,page,pageSize})
    GET    /api/<name>/{key}    single row or 404
    POST   /api/<name>          insert, 201 {message, data}
    PUT    /api/<name>/{key}    update, {message, data} or 404
    PUT    /api/<name>          update with the key taken from the body
    DELETE /api/<name>/{key}    delete, {message, deleted}
"""

from typing import Any, Callable, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from ..deps import get_db
from ..schemas import DeletedOut, MessageOut, PageOut
from ..services.catalog import GENERIC_RESOURCES, INDENTS
from ..services.exceptions import InvalidFieldError, RecordNotFoundError
from ..services.indent_service import IndentService
from ..services.resource_service import Resource, ResourceService


def build_router(
    resource: Resource,
    service_factory: Optional[Callable[[Session], ResourceService]] = None,
) -> APIRouter:
    router = APIRouter(prefix=f"/api/{resource.name}", tags=[resource.name])

    def get_service(db: Session = Depends(get_db)) -> ResourceService:
        if service_factory is not None:
            return service_factory(db)
        return ResourceService(db, resource)

    if resource.paginated:
        @router.get("", response_model=PageOut)
        def list_records(
            search: str = Query(""),
            page: int = Query(1),
            page_size: int = Query(resource.page_size, alias="pageSize"),
            service: ResourceService = Depends(get_service),
        ):
            """Paged listing with case-insensitive search"""
            return service.list_page(search=search, page=page, page_size=page_size)
    else:
        @router.get("", response_model=List[Dict[str, Any]])
        def list_records(service: ResourceService = Depends(get_service)):
            return service.list_all()

    @router.get("/{key}", response_model=Dict[str, Any])
    def get_record(key: int, service: ResourceService = Depends(get_service)):
        try:
            return service.get(key)
        except RecordNotFoundError as e:
            raise HTTPException(status_code=404, detail=str(e))

    @router.post("", response_model=MessageOut, status_code=status.HTTP_201_CREATED)
    def create_record(
        body: Dict[str, Any] = Body(...),
        service: ResourceService = Depends(get_service),
    ):
        try:
            row = service.create(body)
        except InvalidFieldError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return {"message": f"{resource.label} created", "data": row}

    def _update(service: ResourceService, key, body: Dict[str, Any]):
        try:
            row = service.update(key, body)
        except RecordNotFoundError as e:
            raise HTTPException(status_code=404, detail=str(e))
        except InvalidFieldError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return {"message": f"{resource.label} updated", "data": row}

    if resource.body_key:
        @router.put("", response_model=MessageOut)
        def update_record_from_body(
            body: Dict[str, Any] = Body(...),
            service: ResourceService = Depends(get_service),
        ):
            """Update where the key travels in the body, e.g. {"sn": 4, ...}"""
            try:
                key = service.key_from_body(body)
            except InvalidFieldError as e:
                raise HTTPException(status_code=400, detail=str(e))
            return _update(service, key, body)

    @router.put("/{key}", response_model=MessageOut)
    def update_record(
        key: int,
        body: Dict[str, Any] = Body(...),
        service: ResourceService = Depends(get_service),
    ):
        return _update(service, key, body)

    @router.delete("/{key}", response_model=DeletedOut)
    def delete_record(key: int, service: ResourceService = Depends(get_service)):
        deleted = service.delete(key)
        return {"message": f"{resource.label} deleted", "deleted": deleted}

    return router


indents_router = build_router(INDENTS, IndentService)
resource_routers = [build_router(resource) for resource in GENERIC_RESOURCES]
