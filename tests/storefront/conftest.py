import asyncio

import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def storefront_bed():
    from storefront.domain import storefront

    bed = DomainFixture(storefront)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(storefront_bed):
    with storefront_bed.domain_context():
        yield


@pytest.fixture()
def api():
    from storefront.gateway import FakeItemsAPI

    return FakeItemsAPI()


@pytest.fixture()
def catalog(api):
    from storefront.catalog.catalog import Catalog

    return Catalog(api)


@pytest.fixture()
def loaded_catalog(catalog):
    asyncio.run(catalog.load())
    return catalog


@pytest.fixture()
def canonical(api):
    """Canonical items "0".."9", each priced equal to its id."""
    from storefront.catalog.items import CatalogItem

    return {raw["id"]: CatalogItem.from_raw(raw) for raw in api.data}
