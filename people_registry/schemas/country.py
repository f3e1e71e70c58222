"""국가 관련 Pydantic 요청/응답 스키마 정의.

Country Pydantic request/response schema definitions.
"""

from typing import Any
from uuid import UUID

from pydantic import BaseModel


class CountryAddRequest(BaseModel):
    """국가 생성 요청 스키마.

    Country creation request schema. name is nullable here so the service,
    not the schema, decides how a missing name is reported.

    Attributes:
        name: 국가 이름 (Country name)
    """

    name: str | None = None  # 국가 이름 (Country name)

    def to_country_data(self) -> dict[str, Any]:
        """저장용 레코드 데이터로 변환합니다. (Map to record fields for the store.)"""
        return {"name": self.name}


class CountryResponse(BaseModel):
    """국가 응답 스키마.

    Country response schema returned from the service.

    Attributes:
        id: 국가 UUID (Country unique identifier)
        name: 국가 이름 (Country name)
    """

    id: UUID  # 국가 UUID (Country identifier)
    name: str  # 국가 이름 (Country name)


class CountryUploadResponse(BaseModel):
    """Excel 일괄 등록 결과 스키마.

    Result of a bulk Excel upload.

    Attributes:
        inserted: 새로 등록된 국가 수 (Number of countries inserted)
    """

    inserted: int
