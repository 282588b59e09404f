import pytest

from pagelinks.services.page_links import PageLinks, new_page_links


@pytest.fixture(scope="function")
def cars_links() -> PageLinks:
    return new_page_links("https://api.example.com/api/v1/cars", "offset=60&limit=15", 100, 15, 60)


@pytest.fixture(scope="function")
def first_page_links() -> PageLinks:
    return new_page_links("http://www.example.com/abc", "limit=10", 35, 10, 0)
