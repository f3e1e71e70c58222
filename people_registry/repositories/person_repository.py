"""사람 레포지토리 — 사람 CRUD.

Person Repository — Store for Person records.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from people_registry.models.person import Person
from people_registry.repositories.base import BaseRepository


class PersonRepository(BaseRepository[Person]):
    """persons 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the persons table.
    The generic add/get/update/remove operations cover everything the
    person service needs.
    """

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Person)
