from dataclasses import dataclass, field
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from hospital.exceptions import RecordNotFound


@dataclass(frozen=True)
class Reference:
    """A stored id resolved into an embedded snapshot on read."""
    attribute: str          # response field receiving the snapshot, e.g. "patient"
    id_field: str           # column holding the id, e.g. "patient_id"
    model: type
    schema: type[BaseModel]


@dataclass(frozen=True)
class ResourceType:
    name: str               # URL segment, e.g. "medical-records"
    label: str              # singular, used in messages
    model: type
    create_schema: type[BaseModel]
    update_schema: type[BaseModel]
    response_schema: type[BaseModel]
    references: tuple[Reference, ...] = ()
    # Empty means any authenticated role
    allowed_roles: tuple[str, ...] = field(default_factory=tuple)


class CrudService:
    """Uniform list/get/create/update/delete against one resource's table."""

    def __init__(self, resource: ResourceType):
        self.resource = resource
        self.model = resource.model

    async def list_records(self, db: AsyncSession) -> list[BaseModel]:
        result = await db.execute(
            select(self.model).order_by(self.model.created_at.desc(), self.model.id.desc())
        )
        return await self._serialize(result.scalars().all(), db)

    async def get_record(self, record_id: str, db: AsyncSession) -> BaseModel:
        record = await self._load(record_id, db)
        return (await self._serialize([record], db))[0]

    async def create_record(self, data: BaseModel, db: AsyncSession) -> BaseModel:
        record = self.model(**data.model_dump())
        db.add(record)
        await db.flush()
        await db.refresh(record)
        return (await self._serialize([record], db))[0]

    async def update_record(self, record_id: str, data: BaseModel, db: AsyncSession) -> BaseModel:
        record = await self._load(record_id, db)
        for key, value in data.model_dump(exclude_unset=True).items():
            setattr(record, key, value)
        await db.flush()
        await db.refresh(record)
        return (await self._serialize([record], db))[0]

    async def delete_record(self, record_id: str, db: AsyncSession) -> None:
        record = await self._load(record_id, db)
        await db.delete(record)
        await db.flush()

    async def _load(self, record_id: str, db: AsyncSession):
        record = await db.get(self.model, record_id)
        if record is None:
            raise RecordNotFound(self.resource.label, record_id)
        return record

    async def _serialize(self, records, db: AsyncSession) -> list[BaseModel]:
        responses = [self.resource.response_schema.model_validate(r) for r in records]
        for ref in self.resource.references:
            ids = {getattr(r, ref.id_field) for r in records if getattr(r, ref.id_field)}
            found = {}
            if ids:
                result = await db.execute(select(ref.model).where(ref.model.id.in_(ids)))
                found = {obj.id: ref.schema.model_validate(obj) for obj in result.scalars().all()}
            for response, record in zip(responses, records):
                setattr(response, ref.attribute, found.get(getattr(record, ref.id_field)))
        return responses
