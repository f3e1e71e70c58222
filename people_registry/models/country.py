"""국가 SQLAlchemy ORM 모델 정의.

Country SQLAlchemy ORM model definition.

Tables:
    - countries: 국가 (Countries referenced by persons)
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from people_registry.database import Base

# 국가 이름 최대 길이 — Enforced by CountryService before writes
COUNTRY_NAME_MAX_LENGTH: int = 100


class Country(Base):
    """국가 모델 — 사람이 참조하는 국가 레코드.

    Country model. Created only through CountryService.add_country
    and never updated or deleted.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        name: 국가 이름, 정확히 일치 기준 유일 (Country name, unique by exact match)
        created_at: 생성 일시 UTC (Creation timestamp in UTC)
    """

    __tablename__ = "countries"

    # 국가 고유 식별자 — Country unique identifier (UUID v4, auto-generated)
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 국가 이름 — Country display name (unique, case-sensitive)
    name: Mapped[str] = mapped_column(String(COUNTRY_NAME_MAX_LENGTH), unique=True, nullable=False)
    # 생성 일시 — Record creation timestamp (UTC)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
