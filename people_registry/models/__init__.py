"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package registers every model with the SQLAlchemy
metadata, which Base.metadata.create_all relies on.

Modules:
    country: 국가 (Country)
    person: 사람 (Person)
"""

from people_registry.models.country import Country
from people_registry.models.person import Person

__all__ = ["Country", "Person"]
