from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from hospital.database import get_db
from hospital.auth import require_roles
from hospital.exceptions import RecordNotFound
from hospital.services.crud_service import CrudService, ResourceType


def build_resource_router(resource: ResourceType) -> APIRouter:
    """
    List/get/create/update/delete endpoints for one resource. The role gate
    is a router dependency, so it runs before the session dependency.
    """
    router = APIRouter(dependencies=[Depends(require_roles(*resource.allowed_roles))])
    service = CrudService(resource)
    CreateSchema = resource.create_schema
    UpdateSchema = resource.update_schema
    ResponseSchema = resource.response_schema

    @router.get("", response_model=list[ResponseSchema])
    async def list_records(db: AsyncSession = Depends(get_db)):
        return await service.list_records(db)

    @router.get("/{record_id}", response_model=ResponseSchema)
    async def get_record(record_id: str, db: AsyncSession = Depends(get_db)):
        try:
            return await service.get_record(record_id, db)
        except RecordNotFound as e:
            raise HTTPException(status_code=404, detail=str(e))

    @router.post("", response_model=ResponseSchema, status_code=201)
    async def create_record(data: CreateSchema, db: AsyncSession = Depends(get_db)):
        return await service.create_record(data, db)

    @router.put("/{record_id}", response_model=ResponseSchema)
    async def update_record(record_id: str, data: UpdateSchema, db: AsyncSession = Depends(get_db)):
        try:
            return await service.update_record(record_id, data, db)
        except RecordNotFound as e:
            raise HTTPException(status_code=404, detail=str(e))

    @router.delete("/{record_id}")
    async def delete_record(record_id: str, db: AsyncSession = Depends(get_db)):
        try:
            await service.delete_record(record_id, db)
        except RecordNotFound as e:
            raise HTTPException(status_code=404, detail=str(e))
        return {"message": f"{resource.label} deleted successfully", "id": record_id}

    return router
