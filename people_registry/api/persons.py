"""사람 라우터 — 사람 CRUD, 검색/정렬 엔드포인트.

Person Router — CRUD endpoints plus search/sort listing and Excel export.
"""

from io import BytesIO
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from fastapi.responses import StreamingResponse
from sqlalchemy.ext.asyncio import AsyncSession

from people_registry.api.deps import get_person_service
from people_registry.database import get_db
from people_registry.schemas.person import (
    PersonAddRequest,
    PersonResponse,
    PersonUpdateRequest,
    SortOrderOptions,
)
from people_registry.services.person_service import PersonService
from people_registry.utils.exceptions import InvalidArgumentError, NotFoundError

router: APIRouter = APIRouter()


@router.get("", response_model=list[PersonResponse])
async def list_persons(
    service: Annotated[PersonService, Depends(get_person_service)],
    search_by: Annotated[str, Query()] = "name",
    search_string: Annotated[str | None, Query()] = None,
    sort_by: Annotated[str, Query()] = "name",
    sort_order: Annotated[SortOrderOptions, Query()] = SortOrderOptions.ASC,
) -> list[PersonResponse]:
    """사람 목록을 검색/정렬하여 조회합니다.

    List persons filtered by search_by/search_string, then sorted.
    """
    persons: list[PersonResponse] = await service.get_filtered_persons(search_by, search_string)
    return await service.get_sorted_persons(persons, sort_by, sort_order)


@router.post("", response_model=PersonResponse, status_code=201)
async def add_person(
    data: PersonAddRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    service: Annotated[PersonService, Depends(get_person_service)],
) -> PersonResponse:
    """새 사람을 등록합니다.

    Add a new person.
    """
    result: PersonResponse = await service.add_person(data)
    await db.commit()
    return result


# === Excel 내보내기 (must be registered BEFORE /{person_id}) ===


@router.get("/excel")
async def download_persons_excel(
    service: Annotated[PersonService, Depends(get_person_service)],
) -> StreamingResponse:
    """모든 사람을 Excel 파일로 내려받습니다.

    Download every person as an .xlsx file.
    """
    excel_bytes: bytes = await service.get_persons_excel()
    return StreamingResponse(
        BytesIO(excel_bytes),
        media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        headers={"Content-Disposition": "attachment; filename=persons.xlsx"},
    )


@router.get("/{person_id}", response_model=PersonResponse)
async def get_person(
    person_id: UUID,
    service: Annotated[PersonService, Depends(get_person_service)],
) -> PersonResponse:
    """사람 상세를 조회합니다.

    Retrieve a person by id.
    """
    result: PersonResponse | None = await service.get_person_by_id(person_id)
    if result is None:
        raise NotFoundError("Person not found")
    return result


@router.put("/{person_id}", response_model=PersonResponse)
async def update_person(
    person_id: UUID,
    data: PersonUpdateRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    service: Annotated[PersonService, Depends(get_person_service)],
) -> PersonResponse:
    """사람 정보를 수정합니다.

    Update an existing person. The path id must match the body id.
    """
    if data.id != person_id:
        raise InvalidArgumentError("Path id and body id do not match")

    result: PersonResponse = await service.update_person(data)
    await db.commit()
    return result


@router.delete("/{person_id}", status_code=204)
async def delete_person(
    person_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    service: Annotated[PersonService, Depends(get_person_service)],
) -> None:
    """사람을 삭제합니다.

    Delete a person by id.
    """
    deleted: bool = await service.delete_person(person_id)
    if not deleted:
        raise NotFoundError("Person not found")
    await db.commit()
