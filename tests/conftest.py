"""테스트 인프라 — 인메모리 SQLite DB, 세션, 서비스, httpx 클라이언트 픽스처.

Test infrastructure — In-memory SQLite DB, session, service, and httpx client fixtures.
Every test gets a fresh engine, so stores never leak between tests.
"""

import os

# 앱 임포트 전에 설정 — Must be set before the application modules are imported
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["CREATE_TABLES_ON_STARTUP"] = "false"
os.environ["AXIOM_API_TOKEN"] = ""

from collections.abc import AsyncGenerator  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from people_registry.database import get_db, init_models  # noqa: E402
from people_registry.main import app  # noqa: E402
from people_registry.repositories.country_repository import CountryRepository  # noqa: E402
from people_registry.repositories.person_repository import PersonRepository  # noqa: E402
from people_registry.services.country_service import CountryService  # noqa: E402
from people_registry.services.person_service import PersonService  # noqa: E402
from tests.factories import DataFactory  # noqa: E402


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 인메모리 엔진. 스키마를 생성합니다."""
    eng = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await init_models(eng)
    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest.fixture
def country_service(db: AsyncSession) -> CountryService:
    return CountryService(CountryRepository(db))


@pytest.fixture
def person_service(db: AsyncSession, country_service: CountryService) -> PersonService:
    return PersonService(PersonRepository(db), country_service)


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
@pytest.fixture
def factory() -> DataFactory:
    """Faker 기반 테스트 데이터 생성기."""
    return DataFactory()
