"""
Test data factory
Builds realistic request objects with Faker; callers pin the fields a test
cares about through keyword overrides.
"""

from io import BytesIO
from typing import Any

from faker import Faker
from openpyxl import Workbook

from people_registry.schemas.country import CountryAddRequest
from people_registry.schemas.person import GenderOptions, PersonAddRequest


class DataFactory:
    """Faker-backed request generator"""

    def __init__(self) -> None:
        self.fake = Faker()

    def country_add_request(self, **overrides: Any) -> CountryAddRequest:
        """Generate a country request with a name unique within this factory"""
        data: dict[str, Any] = {"name": self.fake.unique.country()}
        data.update(overrides)
        return CountryAddRequest(**data)

    def person_add_request(self, **overrides: Any) -> PersonAddRequest:
        """Generate a fully populated person request"""
        data: dict[str, Any] = {
            "name": self.fake.first_name(),
            "email": self.fake.email(),
            "date_of_birth": self.fake.date_of_birth(minimum_age=18, maximum_age=90),
            "gender": self.fake.random_element(list(GenderOptions)),
            "country_id": None,
            "address": self.fake.street_address(),
            "receive_newsletters": self.fake.boolean(),
            "tax_identification_number": self.fake.numerify("########"),
        }
        data.update(overrides)
        return PersonAddRequest(**data)


def make_countries_excel(
    names: list[Any],
    header: str = "name",
    sheet_title: str = "Countries",
) -> bytes:
    """Build a minimal xlsx with one header cell and one name per row"""
    wb = Workbook()
    ws = wb.active
    ws.title = sheet_title
    ws.append([header])
    for name in names:
        ws.append([name])
    buf = BytesIO()
    wb.save(buf)
    return buf.getvalue()
