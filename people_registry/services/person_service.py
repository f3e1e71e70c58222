"""사람 서비스 — 사람 CRUD, 검색, 정렬 비즈니스 로직.

Person Service — Business logic for person CRUD plus in-memory filtering
and sorting of result sets. Every response is enriched with the country
name resolved through CountryService.
"""

from datetime import date
from io import BytesIO
from typing import Any, Callable
from uuid import UUID

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill

from people_registry.models.person import (
    PERSON_EMAIL_MAX_LENGTH,
    PERSON_NAME_MAX_LENGTH,
    Person,
)
from people_registry.repositories.person_repository import PersonRepository
from people_registry.schemas.country import CountryResponse
from people_registry.schemas.person import (
    PersonAddRequest,
    PersonField,
    PersonResponse,
    PersonUpdateRequest,
    SortOrderOptions,
)
from people_registry.services.country_service import CountryService
from people_registry.utils.exceptions import InvalidArgumentError, NullArgumentError

# 생년월일 검색 표기 — Rendering used when searching by date of birth ("05 June 2002")
DATE_SEARCH_FORMAT: str = "%d %B %Y"

# 검색 가능한 필드 → 문자열 추출기 (Searchable field -> text accessor)
_SEARCH_ACCESSORS: dict[PersonField, Callable[[PersonResponse], str | None]] = {
    PersonField.NAME: lambda p: p.name,
    PersonField.EMAIL: lambda p: p.email,
    PersonField.DATE_OF_BIRTH: lambda p: (
        p.date_of_birth.strftime(DATE_SEARCH_FORMAT) if p.date_of_birth else None
    ),
    PersonField.GENDER: lambda p: p.gender.value if p.gender else None,
    PersonField.COUNTRY: lambda p: p.country,
    PersonField.ADDRESS: lambda p: p.address,
}

# 정렬 가능한 필드 → 정렬 키 추출기 (Sortable field -> sort value accessor)
_SORT_ACCESSORS: dict[PersonField, Callable[[PersonResponse], Any]] = {
    PersonField.NAME: lambda p: p.name,
    PersonField.EMAIL: lambda p: p.email,
    PersonField.DATE_OF_BIRTH: lambda p: p.date_of_birth,
    PersonField.AGE: lambda p: p.age,
    PersonField.GENDER: lambda p: p.gender.value if p.gender else None,
    PersonField.COUNTRY: lambda p: p.country,
    PersonField.ADDRESS: lambda p: p.address,
    PersonField.RECEIVE_NEWSLETTERS: lambda p: p.receive_newsletters,
}

# Excel 내보내기 컬럼 — Columns written by get_persons_excel
_EXCEL_HEADERS: list[str] = [
    "name",
    "email",
    "date_of_birth",
    "age",
    "gender",
    "country",
    "address",
    "receive_newsletters",
]


def calculate_age(date_of_birth: date | None, today: date | None = None) -> float | None:
    """생년월일로부터 나이(년)를 계산합니다.

    Age in whole years as days / 365.25, rounded. None without a birth date.
    """
    if date_of_birth is None:
        return None
    today = today or date.today()
    return float(round((today - date_of_birth).days / 365.25))


class PersonService:
    """사람 관련 비즈니스 로직을 처리하는 서비스.

    Service handling person business logic. Validation always completes
    before the store is mutated.

    Attributes:
        person_repository: 사람 저장소 (Person store)
        country_service: 국가 이름 조회용 서비스 (Country service used for enrichment)
    """

    def __init__(
        self,
        person_repository: PersonRepository,
        country_service: CountryService,
    ) -> None:
        self.person_repository: PersonRepository = person_repository
        self.country_service: CountryService = country_service

    async def _to_response(self, person: Person) -> PersonResponse:
        """사람 모델을 국가 이름이 포함된 응답으로 변환합니다.

        Convert a Person record to a response enriched with the country name.
        An unresolved country id yields country=None.
        """
        country: CountryResponse | None = await self.country_service.get_country_by_id(
            person.country_id
        )
        return PersonResponse(
            id=person.id,
            name=person.name,
            email=person.email,
            date_of_birth=person.date_of_birth,
            age=calculate_age(person.date_of_birth),
            gender=person.gender,
            country_id=person.country_id,
            country=country.name if country is not None else None,
            address=person.address,
            receive_newsletters=person.receive_newsletters,
            tax_identification_number=person.tax_identification_number,
        )

    def _check_lengths(self, request: PersonAddRequest) -> None:
        """컬럼 길이 제한을 검사합니다. (Reject values longer than their columns.)"""
        if request.name is not None and len(request.name) > PERSON_NAME_MAX_LENGTH:
            raise InvalidArgumentError(
                f"Person name must be at most {PERSON_NAME_MAX_LENGTH} characters"
            )
        if request.email is not None and len(request.email) > PERSON_EMAIL_MAX_LENGTH:
            raise InvalidArgumentError(
                f"Email must be at most {PERSON_EMAIL_MAX_LENGTH} characters"
            )

    async def add_person(self, request: PersonAddRequest | None) -> PersonResponse:
        """새 사람을 등록합니다.

        Add a new person.

        Args:
            request: 사람 생성 요청 (Person creation request)

        Returns:
            PersonResponse: 생성된 사람 응답 (Created, enriched person response)

        Raises:
            NullArgumentError: 요청이 None일 때 (Request is None)
            InvalidArgumentError: 이름이 비었거나 값이 너무 길 때
                                  (Name missing or empty, or a value too long)
        """
        if request is None:
            raise NullArgumentError("PersonAddRequest is required")

        if not request.name:
            raise InvalidArgumentError("Person name is required")

        self._check_lengths(request)

        person: Person = await self.person_repository.add(request.to_person_data())
        return await self._to_response(person)

    async def get_person_by_id(self, person_id: UUID | None) -> PersonResponse | None:
        """ID로 사람을 조회합니다. ID가 None이거나 없으면 None.

        Look up a person by id. Returns None for a None or unknown id.
        """
        if person_id is None:
            return None

        person: Person | None = await self.person_repository.get_by_id(person_id)
        if person is None:
            return None
        return await self._to_response(person)

    async def get_all_persons(self) -> list[PersonResponse]:
        """모든 사람을 등록 순서대로 조회합니다. (List all persons in insertion order.)"""
        persons: list[Person] = await self.person_repository.get_all()
        return [await self._to_response(p) for p in persons]

    async def get_filtered_persons(
        self,
        search_by: str | PersonField | None,
        search_string: str | None,
    ) -> list[PersonResponse]:
        """필드 값에 검색어가 포함된 사람을 조회합니다.

        Return persons whose value at search_by contains search_string,
        compared case-insensitively. An empty search string returns the full
        list. Persons with no value for the field are excluded. A field that
        is unknown or not searchable matches nobody.

        Args:
            search_by: 검색 대상 필드 (Field to search, e.g. "name")
            search_string: 검색어 (Substring to look for)

        Returns:
            list[PersonResponse]: 일치하는 사람 목록 (Matching persons)
        """
        all_persons: list[PersonResponse] = await self.get_all_persons()
        if not search_string:
            return all_persons

        field: PersonField | None = PersonField.parse(search_by)
        accessor = _SEARCH_ACCESSORS.get(field) if field is not None else None
        if accessor is None:
            return []

        needle: str = search_string.casefold()
        matched: list[PersonResponse] = []
        for person in all_persons:
            value: str | None = accessor(person)
            if value is not None and needle in value.casefold():
                matched.append(person)
        return matched

    async def get_sorted_persons(
        self,
        persons: list[PersonResponse],
        sort_by: str | PersonField | None,
        sort_order: SortOrderOptions | None = SortOrderOptions.ASC,
    ) -> list[PersonResponse]:
        """주어진 목록을 필드 기준으로 정렬합니다.

        Sort an already-fetched list by the given field. The sort is stable;
        None values come first ascending and last descending. An unknown
        field returns the list in its original order.

        Args:
            persons: 정렬할 사람 목록 (Persons to sort, not re-fetched)
            sort_by: 정렬 기준 필드 (Field to sort by)
            sort_order: 정렬 방향, None이면 ASC (Direction, None means ascending)

        Returns:
            list[PersonResponse]: 정렬된 새 목록 (New sorted list)
        """
        field: PersonField | None = PersonField.parse(sort_by)
        accessor = _SORT_ACCESSORS.get(field) if field is not None else None
        if accessor is None:
            return list(persons)

        descending: bool = sort_order == SortOrderOptions.DESC

        def sort_key(person: PersonResponse) -> tuple[bool, Any]:
            value = accessor(person)
            return (value is not None, value)

        return sorted(persons, key=sort_key, reverse=descending)

    async def update_person(self, request: PersonUpdateRequest | None) -> PersonResponse:
        """사람 정보를 수정합니다.

        Overwrite a stored person's fields in place. The id never changes.

        Args:
            request: 수정 요청 (Update request)

        Returns:
            PersonResponse: 수정된 사람 응답 (Updated, enriched person response)

        Raises:
            NullArgumentError: 요청이 None일 때 (Request is None)
            InvalidArgumentError: ID가 없거나 이름이 비었거나 값이 너무 길 때
                                  (Unknown id, missing/empty name, or a value too long)
        """
        if request is None:
            raise NullArgumentError("PersonUpdateRequest is required")

        existing: Person | None = await self.person_repository.get_by_id(request.id)
        if existing is None:
            raise InvalidArgumentError("Given person id doesn't exist")

        if not request.name:
            raise InvalidArgumentError("Person name is required")

        self._check_lengths(request)

        person: Person | None = await self.person_repository.update(
            request.id, request.to_person_data()
        )
        if person is None:
            raise InvalidArgumentError("Given person id doesn't exist")
        return await self._to_response(person)

    async def delete_person(self, person_id: UUID | None) -> bool:
        """사람을 삭제합니다. 없으면 False.

        Hard-delete a person. Returns False for a None or unknown id.
        """
        if person_id is None:
            return False
        return await self.person_repository.remove(person_id)

    async def get_persons_excel(self) -> bytes:
        """모든 사람을 Excel 파일로 내보냅니다.

        Export every person to an .xlsx workbook with a styled header row.

        Returns:
            bytes: Excel 파일 바이트 (Raw .xlsx bytes)
        """
        persons: list[PersonResponse] = await self.get_all_persons()

        wb = Workbook()
        ws = wb.active
        ws.title = "Persons"

        header_font = Font(bold=True, color="FFFFFF", size=11)
        header_fill = PatternFill(start_color="6C5CE7", end_color="6C5CE7", fill_type="solid")
        for col_idx, header in enumerate(_EXCEL_HEADERS, 1):
            cell = ws.cell(row=1, column=col_idx, value=header)
            cell.font = header_font
            cell.fill = header_fill
            cell.alignment = Alignment(horizontal="center")

        for person in persons:
            ws.append([
                person.name,
                person.email,
                person.date_of_birth,
                person.age,
                person.gender.value if person.gender else None,
                person.country,
                person.address,
                person.receive_newsletters,
            ])

        buffer = BytesIO()
        wb.save(buffer)
        return buffer.getvalue()
