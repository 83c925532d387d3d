from typing import Optional

from fastapi import APIRouter, Depends, Header, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.http.common import parse_record_id, set_etag
from app.core.auth import require
from app.core.db import get_db
from app.domains.access.policy import Operation
from app.domains.diagrams.schemas import (
    DiagramCreate, DiagramUpdate, DiagramResponse, DiagramEnvelope,
    DiagramMessageEnvelope, DiagramListResponse
)
from app.domains.diagrams.services import DiagramService
from app.domains.identity.entities import Principal
from app.domains.records.query import RecordQuery
from app.domains.records.schemas import MessageResponse
from app.domains.records.validation import parse_expected_version

router = APIRouter(prefix="/diagrams", tags=["diagrams"])


@router.get("", response_model=DiagramListResponse)
async def list_diagrams(
    category: Optional[str] = Query(None),
    tags: Optional[str] = Query(None, description="Comma-separated; matches any"),
    is_template: Optional[str] = Query(None, alias="isTemplate"),
    search: Optional[str] = Query(None),
    principal: Principal = Depends(require(Operation.READ)),
    db: AsyncSession = Depends(get_db)
):
    """Получение списка диаграмм; isTemplate=true - только шаблоны"""
    record_query = RecordQuery.from_params(
        category=category, tags=tags, is_template=is_template, search=search
    )
    diagrams = await DiagramService(db).list_diagrams(record_query)

    return DiagramListResponse(diagrams=[DiagramResponse.from_entity(d) for d in diagrams])


@router.get("/{diagram_id}", response_model=DiagramEnvelope)
async def get_diagram(
    diagram_id: str,
    response: Response,
    principal: Principal = Depends(require(Operation.READ)),
    db: AsyncSession = Depends(get_db)
):
    diagram = await DiagramService(db).get_diagram(parse_record_id(diagram_id, "Diagram"))

    set_etag(response, diagram.version)
    return DiagramEnvelope(diagram=DiagramResponse.from_entity(diagram))


@router.post("", response_model=DiagramMessageEnvelope, status_code=status.HTTP_201_CREATED)
async def create_diagram(
    diagram_data: DiagramCreate,
    principal: Principal = Depends(require(Operation.CREATE)),
    db: AsyncSession = Depends(get_db)
):
    diagram = await DiagramService(db).create_diagram(diagram_data, principal)

    return DiagramMessageEnvelope(
        message="Diagram created successfully",
        diagram=DiagramResponse.from_entity(diagram)
    )


@router.put("/{diagram_id}", response_model=DiagramMessageEnvelope)
async def update_diagram(
    diagram_id: str,
    update_data: DiagramUpdate,
    response: Response,
    if_match: Optional[str] = Header(None),
    principal: Principal = Depends(require(Operation.UPDATE)),
    db: AsyncSession = Depends(get_db)
):
    diagram = await DiagramService(db).update_diagram(
        parse_record_id(diagram_id, "Diagram"),
        update_data,
        principal,
        expected_version=parse_expected_version(if_match)
    )

    set_etag(response, diagram.version)
    return DiagramMessageEnvelope(
        message="Diagram updated successfully",
        diagram=DiagramResponse.from_entity(diagram)
    )


@router.delete("/{diagram_id}", response_model=MessageResponse)
async def delete_diagram(
    diagram_id: str,
    principal: Principal = Depends(require(Operation.DELETE)),
    db: AsyncSession = Depends(get_db)
):
    await DiagramService(db).delete_diagram(parse_record_id(diagram_id, "Diagram"), principal)

    return MessageResponse(message="Diagram deleted successfully")


@router.post("/{diagram_id}/duplicate", response_model=DiagramMessageEnvelope, status_code=status.HTTP_201_CREATED)
async def duplicate_diagram(
    diagram_id: str,
    principal: Principal = Depends(require(Operation.DUPLICATE)),
    db: AsyncSession = Depends(get_db)
):
    """Копия диаграммы (например, новая схема из шаблона)"""
    diagram = await DiagramService(db).duplicate_diagram(parse_record_id(diagram_id, "Diagram"), principal)

    return DiagramMessageEnvelope(
        message="Diagram duplicated successfully",
        diagram=DiagramResponse.from_entity(diagram)
    )
