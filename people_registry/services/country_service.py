"""국가 서비스 — 국가 등록/조회 비즈니스 로직.

Country Service — Business logic for adding and looking up countries,
including bulk registration from an Excel workbook.
"""

from io import BytesIO
from uuid import UUID
from zipfile import BadZipFile

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from people_registry.models.country import COUNTRY_NAME_MAX_LENGTH, Country
from people_registry.repositories.country_repository import CountryRepository
from people_registry.schemas.country import CountryAddRequest, CountryResponse
from people_registry.utils.exceptions import InvalidArgumentError, NullArgumentError

# Excel 업로드 시트/컬럼 이름 — Sheet and header used by the Excel upload
COUNTRIES_SHEET: str = "Countries"
NAME_COLUMN: str = "name"


class CountryService:
    """국가 관련 비즈니스 로직을 처리하는 서비스.

    Service handling country business logic. All checks run before the
    store is touched, so a rejected request leaves it unchanged.

    Attributes:
        country_repository: 국가 저장소 (Country store)
    """

    def __init__(self, country_repository: CountryRepository) -> None:
        self.country_repository: CountryRepository = country_repository

    def _to_response(self, country: Country) -> CountryResponse:
        """국가 모델을 응답 스키마로 변환합니다.

        Convert a Country model instance to a CountryResponse schema.
        """
        return CountryResponse(id=country.id, name=country.name)

    async def add_country(self, request: CountryAddRequest | None) -> CountryResponse:
        """새 국가를 등록합니다.

        Add a new country.

        Args:
            request: 국가 생성 요청 (Country creation request)

        Returns:
            CountryResponse: 생성된 국가 응답 (Created country response)

        Raises:
            NullArgumentError: 요청이 None일 때 (Request is None)
            InvalidArgumentError: 이름이 비었거나, 너무 길거나, 이미 존재할 때
                                  (Name missing/empty, too long, or already taken)
        """
        if request is None:
            raise NullArgumentError("CountryAddRequest is required")

        if not request.name:
            raise InvalidArgumentError("Country name is required")

        if len(request.name) > COUNTRY_NAME_MAX_LENGTH:
            raise InvalidArgumentError(
                f"Country name must be at most {COUNTRY_NAME_MAX_LENGTH} characters"
            )

        # 이름 중복 확인 (정확히 일치) — Exact-match uniqueness check
        if await self.country_repository.exists({"name": request.name}):
            raise InvalidArgumentError("Given country name already exists")

        country: Country = await self.country_repository.add(request.to_country_data())
        return self._to_response(country)

    async def get_all_countries(self) -> list[CountryResponse]:
        """모든 국가를 등록 순서대로 조회합니다.

        List all countries in insertion order.

        Returns:
            list[CountryResponse]: 국가 목록 (List of country responses)
        """
        countries: list[Country] = await self.country_repository.get_all()
        return [self._to_response(c) for c in countries]

    async def get_country_by_id(self, country_id: UUID | None) -> CountryResponse | None:
        """ID로 국가를 조회합니다. ID가 None이거나 없으면 None.

        Look up a country by id. Returns None for a None or unknown id.

        Args:
            country_id: 국가 ID (Country UUID)

        Returns:
            CountryResponse | None: 국가 응답 또는 None (Country response or None)
        """
        if country_id is None:
            return None

        country: Country | None = await self.country_repository.get_by_id(country_id)
        if country is None:
            return None
        return self._to_response(country)

    async def upload_countries_from_excel(self, file_content: bytes) -> int:
        """Excel 파일에서 국가를 일괄 등록합니다.

        Bulk-add countries from an .xlsx workbook. Reads the "Countries"
        sheet (or the active sheet), expects a "name" header in row 1, and
        skips non-text cells, blank names, and names that already exist.
        Every row is checked before anything is stored.

        Args:
            file_content: Excel 파일 바이트 (Raw .xlsx bytes)

        Returns:
            int: 새로 등록된 국가 수 (Number of countries inserted)

        Raises:
            InvalidArgumentError: 엑셀 파일이 아니거나, name 컬럼이 없거나, 이름이 너무 길 때
                                  (Unreadable file, no name column, or a name too long)
        """
        try:
            wb = load_workbook(filename=BytesIO(file_content), read_only=True)
        except (BadZipFile, InvalidFileException, KeyError) as e:
            raise InvalidArgumentError("File is not a valid Excel workbook") from e

        try:
            ws = wb[COUNTRIES_SHEET] if COUNTRIES_SHEET in wb.sheetnames else wb.active

            header_row = next(ws.iter_rows(min_row=1, max_row=1, values_only=True), ())
            headers: list[str] = [
                str(value).strip().lower() if value is not None else ""
                for value in header_row
            ]
            if NAME_COLUMN not in headers:
                raise InvalidArgumentError(f"Missing required column: {NAME_COLUMN}")
            name_idx: int = headers.index(NAME_COLUMN)

            names: list[str] = []
            for row_num, row in enumerate(ws.iter_rows(min_row=2, values_only=True), start=2):
                value = row[name_idx] if name_idx < len(row) else None
                # 텍스트 셀만 국가 이름으로 취급 — Only text cells count as names
                if not isinstance(value, str):
                    continue
                name: str = value.strip()
                if len(name) > COUNTRY_NAME_MAX_LENGTH:
                    raise InvalidArgumentError(
                        f"Row {row_num}: country name must be at most "
                        f"{COUNTRY_NAME_MAX_LENGTH} characters"
                    )
                if name and name not in names:
                    names.append(name)
        finally:
            wb.close()

        inserted: int = 0
        for name in names:
            if await self.country_repository.exists({"name": name}):
                continue
            await self.country_repository.add({"name": name})
            inserted += 1
        return inserted
