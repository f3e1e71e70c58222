"""사람 SQLAlchemy ORM 모델 정의.

Person SQLAlchemy ORM model definition.

Tables:
    - persons: 사람 (Persons with an optional weak country reference)
"""

import uuid
from datetime import date, datetime, timezone

from sqlalchemy import Boolean, CheckConstraint, Date, DateTime, Index, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from people_registry.database import Base

# 컬럼 길이 제한 — Column length limits enforced by PersonService before writes
PERSON_NAME_MAX_LENGTH: int = 40
PERSON_EMAIL_MAX_LENGTH: int = 255


class Person(Base):
    """사람 모델.

    Person model. country_id is a weak reference: it is indexed for lookups
    but carries no foreign key, so an unknown country id is stored as-is.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        name: 이름, 필수 (Person name, required)
        email: 이메일, 형식 미검증 (Email, format not validated)
        date_of_birth: 생년월일 (Date of birth, optional)
        gender: 성별 — "Male"|"Female"|"Other" (Gender, optional)
        country_id: 국가 UUID (Country reference, optional)
        address: 주소 (Address, optional)
        receive_newsletters: 뉴스레터 수신 여부 (Newsletter opt-in flag)
        tax_identification_number: 납세자 번호, 8자리 (Tax id, exactly 8 chars)
        created_at: 생성 일시 UTC (Creation timestamp)
    """

    __tablename__ = "persons"
    __table_args__ = (
        Index("ix_persons_country_id", "country_id"),
        CheckConstraint(
            "tax_identification_number IS NULL OR length(tax_identification_number) = 8",
            name="ck_persons_tin_length",
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(PERSON_NAME_MAX_LENGTH), nullable=False)
    email: Mapped[str | None] = mapped_column(String(PERSON_EMAIL_MAX_LENGTH), nullable=True)
    date_of_birth: Mapped[date | None] = mapped_column(Date, nullable=True)
    gender: Mapped[str | None] = mapped_column(String(10), nullable=True)
    # 약한 참조 — FK 없음 (Weak reference, no foreign key)
    country_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, nullable=True)
    address: Mapped[str | None] = mapped_column(Text, nullable=True)
    receive_newsletters: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    tax_identification_number: Mapped[str | None] = mapped_column(String(8), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
