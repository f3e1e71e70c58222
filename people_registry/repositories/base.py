"""기본 CRUD 레포지토리 — 모든 레포지토리의 부모 클래스.

Base CRUD Repository — Parent class for all entity stores.
Provides generic add, read, update, and remove operations bound to one
AsyncSession. Repositories only flush; committing belongs to the caller.

Usage:
    class CountryRepository(BaseRepository[Country]):
        def __init__(self, db: AsyncSession) -> None:
            super().__init__(db, Country)
"""

from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from people_registry.database import Base

# 제네릭 타입 변수 — SQLAlchemy 모델을 나타냄
# Generic type variable representing a SQLAlchemy model
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """제네릭 CRUD 레포지토리.

    Generic store over a single table. Instances are created explicitly
    around a session (per request or per test) rather than shared globally.

    Attributes:
        db: 비동기 데이터베이스 세션 (Async database session)
        model: SQLAlchemy 모델 클래스 (The SQLAlchemy model class)
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        """레포지토리를 초기화합니다.

        Initialize the repository with a session and a model class.

        Args:
            db: 이 레포지토리가 사용할 세션 (Session this repository works in)
            model: 이 레포지토리가 관리할 SQLAlchemy 모델 클래스
                   (SQLAlchemy model class this repository manages)
        """
        self.db: AsyncSession = db
        self.model: type[ModelType] = model

    async def get_by_id(self, record_id: UUID) -> ModelType | None:
        """ID로 단일 레코드를 조회합니다.

        Retrieve a single record by its UUID.

        Args:
            record_id: 조회할 레코드의 UUID (UUID of the record to retrieve)

        Returns:
            ModelType | None: 조회된 레코드 또는 None (Found record or None)
        """
        query: Select = select(self.model).where(self.model.id == record_id)
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def get_all(self) -> list[ModelType]:
        """모든 레코드를 생성 순서대로 조회합니다.

        Retrieve every record in creation order (created_at, then id).
        Updates never move a record because created_at is not rewritten.

        Returns:
            list[ModelType]: 레코드 목록 (List of records)
        """
        query: Select = select(self.model).order_by(
            self.model.created_at, self.model.id
        )
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def add(self, obj_data: dict[str, Any]) -> ModelType:
        """새 레코드를 생성합니다.

        Create a new record. The id is generated by the model default
        unless obj_data carries one.

        Args:
            obj_data: 생성할 레코드의 데이터 딕셔너리
                      (Dictionary of data for the new record)

        Returns:
            ModelType: 생성된 레코드 (The created record)
        """
        db_obj: ModelType = self.model(**obj_data)
        self.db.add(db_obj)
        await self.db.flush()
        await self.db.refresh(db_obj)
        return db_obj

    async def update(
        self,
        record_id: UUID,
        update_data: dict[str, Any],
    ) -> ModelType | None:
        """기존 레코드를 제자리에서 업데이트합니다.

        Update an existing record in place. The id column is never touched.

        Args:
            record_id: 업데이트할 레코드의 UUID (UUID of the record to update)
            update_data: 업데이트할 필드와 값의 딕셔너리
                         (Dictionary of fields and values to update)

        Returns:
            ModelType | None: 업데이트된 레코드 또는 None (Updated record or None)
        """
        db_obj: ModelType | None = await self.get_by_id(record_id)
        if db_obj is None:
            return None

        for field, value in update_data.items():
            if field != "id" and hasattr(db_obj, field):
                setattr(db_obj, field, value)

        await self.db.flush()
        await self.db.refresh(db_obj)
        return db_obj

    async def remove(self, record_id: UUID) -> bool:
        """레코드를 삭제합니다.

        Hard-delete a record by its UUID.

        Args:
            record_id: 삭제할 레코드의 UUID (UUID of the record to delete)

        Returns:
            bool: 삭제 성공 여부 (Whether a record was deleted)
        """
        db_obj: ModelType | None = await self.get_by_id(record_id)
        if db_obj is None:
            return False

        await self.db.delete(db_obj)
        await self.db.flush()
        return True

    async def exists(self, filters: dict[str, Any]) -> bool:
        """주어진 조건에 일치하는 레코드가 존재하는지 확인합니다.

        Check if a record matching the given equality filters exists.

        Args:
            filters: 검색 조건 딕셔너리 (Filter criteria dictionary)

        Returns:
            bool: 레코드 존재 여부 (Whether a matching record exists)
        """
        query: Select = select(func.count()).select_from(self.model)
        for column_name, value in filters.items():
            if hasattr(self.model, column_name):
                query = query.where(getattr(self.model, column_name) == value)

        count: int = (await self.db.execute(query)).scalar() or 0
        return count > 0
