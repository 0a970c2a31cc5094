"""Tests for webstore, page, category and package lookups."""

import pytest

from factories import make_category, make_package
from tebex_headless.contracts.models import Category, DisplayType, Package, PackageType
from tebex_headless.errors import HeadlessResponseError


@pytest.mark.asyncio
async def test_get_categories_without_options_has_no_query(headless, fake):
    fake.reply({"data": [make_category()]})
    categories = await headless.get_categories()

    assert fake.last.method == "GET"
    assert fake.last.url.path == "/api/accounts/acc1/categories"
    assert fake.last.url.query == b""
    assert str(fake.last.url) == "https://headless.tebex.io/api/accounts/acc1/categories"
    assert len(categories) == 1
    assert isinstance(categories[0], Category)
    assert categories[0].packages == []


@pytest.mark.asyncio
async def test_get_categories_with_packages_and_scope(headless, fake):
    category = make_category(packages=[make_package()], display_type="grid")
    fake.reply({"data": [category]})

    categories = await headless.get_categories(include_packages=True, basket_ident="abc123", ip_address="1.2.3.4")

    assert dict(fake.last.url.params) == {"includePackages": "1", "basketIdent": "abc123", "ipAddress": "1.2.3.4"}
    assert categories[0].display_type is DisplayType.GRID
    assert categories[0].packages[0].id == 42
    assert categories[0].model_dump(exclude_unset=True) == category


@pytest.mark.asyncio
async def test_get_categories_include_packages_false_is_zero(headless, fake):
    fake.reply({"data": []})
    await headless.get_categories(include_packages=False)
    assert fake.last.url.params["includePackages"] == "0"


@pytest.mark.asyncio
async def test_get_category_parses_nested_parent(headless, fake):
    parent = make_category(category_id=1, name="Store")
    fake.reply({"data": make_category(category_id=7, parent=parent)})

    category = await headless.get_category(7)

    assert fake.last.url.path == "/api/accounts/acc1/categories/7"
    assert category.parent is not None
    assert category.parent.id == 1
    assert category.parent.parent is None


@pytest.mark.asyncio
async def test_get_packages_and_package(headless, fake):
    fake.reply({"data": [make_package(1), make_package(2)]}).reply({"data": make_package(2)})

    packages = await headless.get_packages(ip_address="1.2.3.4")
    assert fake.last.url.path == "/api/accounts/acc1/packages"
    assert dict(fake.last.url.params) == {"ipAddress": "1.2.3.4"}
    assert [p.id for p in packages] == [1, 2]

    package = await headless.get_package(2, basket_ident="abc123")
    assert fake.last.url.path == "/api/accounts/acc1/packages/2"
    assert dict(fake.last.url.params) == {"basketIdent": "abc123"}
    assert isinstance(package, Package)
    assert package.type is PackageType.SINGLE
    assert package.category.name == "Ranks"
    assert package.total_price == 12


@pytest.mark.asyncio
async def test_resource_fetch_returns_data_field(headless, fake):
    raw = make_package(5, extra_remote_field="kept")
    fake.reply({"data": raw})
    package = await headless.get_package(5)
    assert package.model_dump(exclude_unset=True) == raw


@pytest.mark.asyncio
async def test_missing_envelope_raises_response_error(headless, fake):
    fake.reply(make_package())
    with pytest.raises(HeadlessResponseError) as exc_info:
        await headless.get_package(42)
    assert exc_info.value.payload["id"] == 42


@pytest.mark.asyncio
async def test_shape_mismatch_raises_response_error(headless, fake):
    fake.reply({"data": {"id": "not-a-number"}})
    with pytest.raises(HeadlessResponseError):
        await headless.get_package(42)


@pytest.mark.asyncio
async def test_get_webstore(headless, fake):
    webstore = {
        "id": 1,
        "name": "Test Store",
        "description": "",
        "webstore_url": "https://store.example",
        "currency": "EUR",
        "lang": "en",
        "logo": "https://store.example/logo.png",
        "platform_type": "Minecraft (Offline/Geyser)",
        "created_at": "2023-05-01T10:00:00+00:00",
    }
    fake.reply({"data": webstore})

    result = await headless.get_webstore()

    assert str(fake.last.url) == "https://headless.tebex.io/api/accounts/acc1"
    assert result.name == "Test Store"
    assert result.platform_type_id is None
    assert result.model_dump(exclude_unset=True) == webstore


@pytest.mark.asyncio
async def test_get_pages(headless, fake):
    page = {
        "id": 3,
        "created_at": "2023-05-01T10:00:00+00:00",
        "updated_at": "2023-05-01T10:00:00+00:00",
        "account_id": 1,
        "title": "Terms",
        "slug": "terms",
        "private": False,
        "hidden": False,
        "disabled": False,
        "sequence": 0,
        "content": "<p>Terms</p>",
    }
    fake.reply({"data": [page]})

    pages = await headless.get_pages()

    assert fake.last.url.path == "/api/accounts/acc1/pages"
    assert len(pages) == 1
    assert pages[0].slug == "terms"
