"""사람 관련 Pydantic 요청/응답 스키마 및 열거형 정의.

Person Pydantic request/response schemas and the enums used to select
genders, query fields, and sort direction.
"""

from datetime import date
from enum import Enum
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field


# === 열거형 (Enums) ===

class GenderOptions(str, Enum):
    """성별 선택지 (Gender options)."""

    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"


class SortOrderOptions(str, Enum):
    """정렬 방향 (Sort direction)."""

    ASC = "ASC"
    DESC = "DESC"


class PersonField(str, Enum):
    """검색/정렬 대상 필드 — PersonResponse 필드 이름과 일치.

    Closed set of fields selectable for filtering and sorting.
    Values match PersonResponse attribute names.
    """

    NAME = "name"
    EMAIL = "email"
    DATE_OF_BIRTH = "date_of_birth"
    AGE = "age"
    GENDER = "gender"
    COUNTRY = "country"
    ADDRESS = "address"
    RECEIVE_NEWSLETTERS = "receive_newsletters"

    @classmethod
    def parse(cls, value: "str | PersonField | None") -> "PersonField | None":
        """문자열을 필드로 변환, 알 수 없으면 None.

        Resolve a field name to a member. Returns None for unknown names.
        """
        if value is None:
            return None
        try:
            return cls(value)
        except ValueError:
            return None


# === 요청 (Request) 스키마 ===

class PersonAddRequest(BaseModel):
    """사람 생성 요청 스키마.

    Person creation request schema. name stays nullable so the service
    reports a missing name as an invalid argument.

    Attributes:
        name: 이름 (Person name)
        email: 이메일 (Email, format not validated)
        date_of_birth: 생년월일 (Date of birth)
        gender: 성별 (Gender)
        country_id: 국가 UUID (Country reference)
        address: 주소 (Address)
        receive_newsletters: 뉴스레터 수신 여부 (Newsletter opt-in)
        tax_identification_number: 납세자 번호 8자리 (Tax id, exactly 8 chars)
    """

    name: str | None = None
    email: str | None = None
    date_of_birth: date | None = None
    gender: GenderOptions | None = None
    country_id: UUID | None = None
    address: str | None = None
    receive_newsletters: bool = False
    tax_identification_number: str | None = Field(None, min_length=8, max_length=8)

    def to_person_data(self) -> dict[str, Any]:
        """저장용 레코드 데이터로 변환합니다.

        Map the request to record fields. Enums are stored by value.
        """
        data: dict[str, Any] = self.model_dump()
        data["gender"] = self.gender.value if self.gender is not None else None
        return data


class PersonUpdateRequest(PersonAddRequest):
    """사람 수정 요청 스키마 (전체 교체).

    Person update request schema. Every field overwrites the stored value;
    id selects the record and is never changed.

    Attributes:
        id: 대상 사람 UUID (Person to update)
    """

    id: UUID

    def to_person_data(self) -> dict[str, Any]:
        data: dict[str, Any] = super().to_person_data()
        data.pop("id", None)
        return data


# === 응답 (Response) 스키마 ===

class PersonResponse(BaseModel):
    """사람 응답 스키마 — 국가 이름과 나이가 포함됨.

    Person response schema, enriched with the resolved country name and
    an age derived from date_of_birth.

    Attributes:
        id: 사람 UUID (Person identifier)
        country: 국가 이름, 미해결 시 None (Resolved country name or None)
        age: 나이(년), 생년월일 없으면 None (Age in years, None without a birth date)
    """

    id: UUID
    name: str
    email: str | None = None
    date_of_birth: date | None = None
    age: float | None = None
    gender: GenderOptions | None = None
    country_id: UUID | None = None
    country: str | None = None
    address: str | None = None
    receive_newsletters: bool = False
    tax_identification_number: str | None = None

    def to_person_update_request(self) -> PersonUpdateRequest:
        """수정 요청으로 변환합니다. (Build an update request from this response.)"""
        return PersonUpdateRequest(
            id=self.id,
            name=self.name,
            email=self.email,
            date_of_birth=self.date_of_birth,
            gender=self.gender,
            country_id=self.country_id,
            address=self.address,
            receive_newsletters=self.receive_newsletters,
            tax_identification_number=self.tax_identification_number,
        )
