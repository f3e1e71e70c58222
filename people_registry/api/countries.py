"""국가 라우터 — 국가 등록/조회 엔드포인트.

Country Router — Endpoints for adding, listing, and bulk-uploading countries.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, File, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from people_registry.api.deps import get_country_service
from people_registry.database import get_db
from people_registry.schemas.country import (
    CountryAddRequest,
    CountryResponse,
    CountryUploadResponse,
)
from people_registry.services.country_service import CountryService
from people_registry.utils.exceptions import InvalidArgumentError, NotFoundError

router: APIRouter = APIRouter()


@router.get("", response_model=list[CountryResponse])
async def list_countries(
    service: Annotated[CountryService, Depends(get_country_service)],
) -> list[CountryResponse]:
    """국가 목록을 조회합니다.

    List all countries.
    """
    return await service.get_all_countries()


@router.post("", response_model=CountryResponse, status_code=201)
async def add_country(
    data: CountryAddRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    service: Annotated[CountryService, Depends(get_country_service)],
) -> CountryResponse:
    """새 국가를 등록합니다.

    Add a new country.
    """
    result: CountryResponse = await service.add_country(data)
    await db.commit()
    return result


# === Excel 업로드 (must be registered BEFORE /{country_id}) ===


@router.post("/upload", response_model=CountryUploadResponse)
async def upload_countries(
    db: Annotated[AsyncSession, Depends(get_db)],
    service: Annotated[CountryService, Depends(get_country_service)],
    file: UploadFile = File(...),
) -> CountryUploadResponse:
    """Excel 파일에서 국가를 일괄 등록합니다.

    Bulk-add countries from an uploaded .xlsx file.
    """
    if not file.filename or not file.filename.endswith(".xlsx"):
        raise InvalidArgumentError("Only .xlsx files are supported")

    content: bytes = await file.read()
    inserted: int = await service.upload_countries_from_excel(content)
    await db.commit()
    return CountryUploadResponse(inserted=inserted)


@router.get("/{country_id}", response_model=CountryResponse)
async def get_country(
    country_id: UUID,
    service: Annotated[CountryService, Depends(get_country_service)],
) -> CountryResponse:
    """국가 상세를 조회합니다.

    Retrieve a country by id.
    """
    result: CountryResponse | None = await service.get_country_by_id(country_id)
    if result is None:
        raise NotFoundError("Country not found")
    return result
