"""국가 API 테스트.

Country API tests — add, list, lookup, and Excel upload endpoints,
including the status codes service errors map to.
"""

import uuid

from httpx import AsyncClient

from tests.factories import make_countries_excel

URL = "/api/v1/countries"
XLSX = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


class TestCountryCreate:
    """국가 생성 테스트."""

    async def test_create_country(self, client: AsyncClient):
        """국가 생성 성공."""
        res = await client.post(URL, json={"name": "Japan"})
        assert res.status_code == 201
        data = res.json()
        assert data["name"] == "Japan"
        assert uuid.UUID(data["id"])

    async def test_create_country_null_name(self, client: AsyncClient):
        """이름 없이 생성 시 400."""
        res = await client.post(URL, json={"name": None})
        assert res.status_code == 400
        assert res.json()["detail"] == "Country name is required"

    async def test_create_duplicate_country(self, client: AsyncClient):
        """중복 이름 생성 시 400."""
        await client.post(URL, json={"name": "USA"})
        res = await client.post(URL, json={"name": "USA"})
        assert res.status_code == 400


class TestCountryRead:
    """국가 조회 테스트."""

    async def test_list_countries(self, client: AsyncClient):
        """국가 목록 조회 (등록 순서)."""
        await client.post(URL, json={"name": "USA"})
        await client.post(URL, json={"name": "UK"})
        res = await client.get(URL)
        assert res.status_code == 200
        assert [c["name"] for c in res.json()] == ["USA", "UK"]

    async def test_get_country_detail(self, client: AsyncClient):
        """국가 상세 조회."""
        created = (await client.post(URL, json={"name": "China"})).json()
        res = await client.get(f"{URL}/{created['id']}")
        assert res.status_code == 200
        assert res.json() == created

    async def test_get_nonexistent_country(self, client: AsyncClient):
        """존재하지 않는 국가 조회 시 404."""
        res = await client.get(f"{URL}/{uuid.uuid4()}")
        assert res.status_code == 404


class TestCountryUpload:
    """국가 Excel 업로드 테스트."""

    async def test_upload_countries(self, client: AsyncClient):
        """Excel 업로드 후 등록 수 반환."""
        content = make_countries_excel(["USA", "UK", "USA"])
        res = await client.post(
            f"{URL}/upload",
            files={"file": ("countries.xlsx", content, XLSX)},
        )
        assert res.status_code == 200
        assert res.json() == {"inserted": 2}

        listed = (await client.get(URL)).json()
        assert [c["name"] for c in listed] == ["USA", "UK"]

    async def test_upload_rejects_non_xlsx(self, client: AsyncClient):
        """xlsx가 아니면 400."""
        res = await client.post(
            f"{URL}/upload",
            files={"file": ("countries.csv", b"name\nUSA\n", "text/csv")},
        )
        assert res.status_code == 400

    async def test_upload_missing_column(self, client: AsyncClient):
        """name 컬럼이 없으면 400."""
        content = make_countries_excel(["USA"], header="title")
        res = await client.post(
            f"{URL}/upload",
            files={"file": ("countries.xlsx", content, XLSX)},
        )
        assert res.status_code == 400

    async def test_upload_corrupt_xlsx(self, client: AsyncClient):
        """확장자만 xlsx인 손상된 파일은 400."""
        res = await client.post(
            f"{URL}/upload",
            files={"file": ("countries.xlsx", b"not a zip", XLSX)},
        )
        assert res.status_code == 400
        assert res.json()["detail"] == "File is not a valid Excel workbook"
