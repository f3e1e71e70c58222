"""FastAPI 의존성 주입 모듈 — 요청 단위 서비스 구성.

FastAPI dependency injection module.
Builds the repositories and services for each request around the
request's AsyncSession, so no store is shared between requests.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from people_registry.database import get_db
from people_registry.repositories.country_repository import CountryRepository
from people_registry.repositories.person_repository import PersonRepository
from people_registry.services.country_service import CountryService
from people_registry.services.person_service import PersonService


def get_country_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> CountryService:
    """요청 세션으로 국가 서비스를 생성합니다. (Country service bound to the request session.)"""
    return CountryService(CountryRepository(db))


def get_person_service(
    db: Annotated[AsyncSession, Depends(get_db)],
    country_service: Annotated[CountryService, Depends(get_country_service)],
) -> PersonService:
    """요청 세션으로 사람 서비스를 생성합니다. (Person service bound to the request session.)"""
    return PersonService(PersonRepository(db), country_service)
