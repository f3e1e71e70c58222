"""API 라우터 패키지 — 모든 엔드포인트 통합.

API Router package — Aggregates the country and person routers into a
single router for inclusion in the FastAPI application.

Included routers:
    - countries: 국가 등록/조회 (Country management)
    - persons: 사람 CRUD 및 검색/정렬 (Person management, search and sort)
"""

from fastapi import APIRouter

from people_registry.api.countries import router as countries_router
from people_registry.api.persons import router as persons_router

api_router: APIRouter = APIRouter()

api_router.include_router(countries_router, prefix="/countries", tags=["Countries"])
api_router.include_router(persons_router, prefix="/persons", tags=["Persons"])
