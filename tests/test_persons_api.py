"""사람 API 테스트.

Person API tests — CRUD endpoints, search/sort query parameters, and the
Excel download.
"""

import uuid

from httpx import AsyncClient

URL = "/api/v1/persons"
COUNTRIES_URL = "/api/v1/countries"


async def create_person(client: AsyncClient, **fields) -> dict:
    """사람을 생성하고 응답 JSON을 반환합니다."""
    payload = {"name": "Smith", "email": "smith@example.com", **fields}
    res = await client.post(URL, json=payload)
    assert res.status_code == 201
    return res.json()


class TestPersonCreate:
    """사람 생성 테스트."""

    async def test_create_person(self, client: AsyncClient):
        """사람 생성 성공 — 국가 이름 포함."""
        country = (await client.post(COUNTRIES_URL, json={"name": "India"})).json()
        res = await client.post(URL, json={
            "name": "Rahman",
            "email": "rahman@example.com",
            "date_of_birth": "1999-03-03",
            "gender": "Male",
            "country_id": country["id"],
            "address": "address of rahman",
            "receive_newsletters": True,
            "tax_identification_number": "12345678",
        })
        assert res.status_code == 201
        data = res.json()
        assert data["name"] == "Rahman"
        assert data["gender"] == "Male"
        assert data["country"] == "India"
        assert data["date_of_birth"] == "1999-03-03"
        assert data["age"] is not None

    async def test_create_person_without_name(self, client: AsyncClient):
        """이름 없이 생성 시 400."""
        res = await client.post(URL, json={"email": "x@example.com"})
        assert res.status_code == 400

    async def test_create_person_invalid_tin(self, client: AsyncClient):
        """납세자 번호가 8자리가 아니면 422."""
        res = await client.post(URL, json={"name": "X", "tax_identification_number": "123"})
        assert res.status_code == 422

    async def test_create_person_name_too_long(self, client: AsyncClient):
        """이름이 40자를 넘으면 400."""
        res = await client.post(URL, json={"name": "x" * 41})
        assert res.status_code == 400


class TestPersonRead:
    """사람 조회 테스트."""

    async def test_get_person_detail(self, client: AsyncClient):
        """사람 상세 조회."""
        created = await create_person(client)
        res = await client.get(f"{URL}/{created['id']}")
        assert res.status_code == 200
        assert res.json() == created

    async def test_get_nonexistent_person(self, client: AsyncClient):
        """존재하지 않는 사람 조회 시 404."""
        res = await client.get(f"{URL}/{uuid.uuid4()}")
        assert res.status_code == 404

    async def test_list_sorted_by_name_by_default(self, client: AsyncClient):
        """기본 목록은 이름 오름차순."""
        for name in ("Smith", "Mary", "Rahman"):
            await create_person(client, name=name)
        res = await client.get(URL)
        assert res.status_code == 200
        assert [p["name"] for p in res.json()] == ["Mary", "Rahman", "Smith"]

    async def test_list_search_and_sort_desc(self, client: AsyncClient):
        """검색 + 내림차순 정렬."""
        for name in ("Smith", "Mary", "Rahman"):
            await create_person(client, name=name)
        res = await client.get(URL, params={
            "search_by": "name",
            "search_string": "ma",
            "sort_by": "name",
            "sort_order": "DESC",
        })
        assert res.status_code == 200
        assert [p["name"] for p in res.json()] == ["Rahman", "Mary"]

    async def test_list_unknown_search_field(self, client: AsyncClient):
        """알 수 없는 검색 필드는 빈 목록."""
        await create_person(client)
        res = await client.get(URL, params={"search_by": "nickname", "search_string": "s"})
        assert res.status_code == 200
        assert res.json() == []

    async def test_download_excel(self, client: AsyncClient):
        """Excel 다운로드."""
        await create_person(client)
        res = await client.get(f"{URL}/excel")
        assert res.status_code == 200
        assert res.headers["content-type"].startswith(
            "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
        )
        assert res.content[:2] == b"PK"


class TestPersonUpdate:
    """사람 수정 테스트."""

    async def test_update_person(self, client: AsyncClient):
        """사람 정보 수정."""
        created = await create_person(client)
        payload = {**created, "name": "William", "email": "william@example.com"}
        res = await client.put(f"{URL}/{created['id']}", json=payload)
        assert res.status_code == 200
        data = res.json()
        assert data["id"] == created["id"]
        assert data["name"] == "William"

    async def test_update_mismatched_id(self, client: AsyncClient):
        """경로 ID와 본문 ID가 다르면 400."""
        created = await create_person(client)
        res = await client.put(
            f"{URL}/{uuid.uuid4()}", json={**created, "name": "William"}
        )
        assert res.status_code == 400

    async def test_update_unknown_person(self, client: AsyncClient):
        """존재하지 않는 사람 수정 시 400."""
        person_id = str(uuid.uuid4())
        res = await client.put(f"{URL}/{person_id}", json={"id": person_id, "name": "X"})
        assert res.status_code == 400

    async def test_update_name_to_null(self, client: AsyncClient):
        """이름을 null로 수정 시 400."""
        created = await create_person(client)
        res = await client.put(f"{URL}/{created['id']}", json={**created, "name": None})
        assert res.status_code == 400


class TestPersonDelete:
    """사람 삭제 테스트."""

    async def test_delete_person(self, client: AsyncClient):
        """사람 삭제 성공."""
        created = await create_person(client)
        res = await client.delete(f"{URL}/{created['id']}")
        assert res.status_code == 204

        # 삭제 후 조회 시 404
        res2 = await client.get(f"{URL}/{created['id']}")
        assert res2.status_code == 404

    async def test_delete_nonexistent_person(self, client: AsyncClient):
        """존재하지 않는 사람 삭제 시 404."""
        res = await client.delete(f"{URL}/{uuid.uuid4()}")
        assert res.status_code == 404


async def test_health(client: AsyncClient):
    res = await client.get("/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok"}
