from typing import Optional

from fastapi import APIRouter, Depends, Header, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.http.common import parse_record_id, set_etag
from app.core.auth import require
from app.core.db import get_db
from app.domains.access.policy import Operation
from app.domains.documents.schemas import (
    DocumentCreate, DocumentUpdate, DocumentResponse, DocumentEnvelope,
    DocumentMessageEnvelope, DocumentListResponse
)
from app.domains.documents.services import DocumentService
from app.domains.identity.entities import Principal
from app.domains.records.query import RecordQuery
from app.domains.records.schemas import MessageResponse
from app.domains.records.validation import parse_expected_version

router = APIRouter(prefix="/documents", tags=["documents"])


@router.get("", response_model=DocumentListResponse)
async def list_documents(
    category: Optional[str] = Query(None),
    tags: Optional[str] = Query(None, description="Comma-separated; matches any"),
    search: Optional[str] = Query(None),
    principal: Principal = Depends(require(Operation.READ)),
    db: AsyncSession = Depends(get_db)
):
    """Получение списка документов с фильтрами"""
    record_query = RecordQuery.from_params(category=category, tags=tags, search=search)
    documents = await DocumentService(db).list_documents(record_query)

    return DocumentListResponse(documents=[DocumentResponse.from_entity(doc) for doc in documents])


@router.get("/{document_id}", response_model=DocumentEnvelope)
async def get_document(
    document_id: str,
    response: Response,
    principal: Principal = Depends(require(Operation.READ)),
    db: AsyncSession = Depends(get_db)
):
    """Получение документа по UUID"""
    document = await DocumentService(db).get_document(parse_record_id(document_id, "Document"))

    set_etag(response, document.version)
    return DocumentEnvelope(document=DocumentResponse.from_entity(document))


@router.post("", response_model=DocumentMessageEnvelope, status_code=status.HTTP_201_CREATED)
async def create_document(
    document_data: DocumentCreate,
    principal: Principal = Depends(require(Operation.CREATE)),
    db: AsyncSession = Depends(get_db)
):
    """Создание нового документа"""
    document = await DocumentService(db).create_document(document_data, principal)

    return DocumentMessageEnvelope(
        message="Document created successfully",
        document=DocumentResponse.from_entity(document)
    )


@router.put("/{document_id}", response_model=DocumentMessageEnvelope)
async def update_document(
    document_id: str,
    update_data: DocumentUpdate,
    response: Response,
    if_match: Optional[str] = Header(None),
    principal: Principal = Depends(require(Operation.UPDATE)),
    db: AsyncSession = Depends(get_db)
):
    """Частичное обновление документа; If-Match включает проверку версии"""
    document = await DocumentService(db).update_document(
        parse_record_id(document_id, "Document"),
        update_data,
        principal,
        expected_version=parse_expected_version(if_match)
    )

    set_etag(response, document.version)
    return DocumentMessageEnvelope(
        message="Document updated successfully",
        document=DocumentResponse.from_entity(document)
    )


@router.delete("/{document_id}", response_model=MessageResponse)
async def delete_document(
    document_id: str,
    principal: Principal = Depends(require(Operation.DELETE)),
    db: AsyncSession = Depends(get_db)
):
    """Удаление документа"""
    await DocumentService(db).delete_document(parse_record_id(document_id, "Document"), principal)

    return MessageResponse(message="Document deleted successfully")
