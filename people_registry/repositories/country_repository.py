"""국가 레포지토리 — 국가 CRUD.

Country Repository — Store for Country records.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from people_registry.models.country import Country
from people_registry.repositories.base import BaseRepository


class CountryRepository(BaseRepository[Country]):
    """countries 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the countries table.
    Name uniqueness checks go through BaseRepository.exists.
    """

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Country)
