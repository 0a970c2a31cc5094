"""Sample API payloads shaped like Tebex Headless responses."""


def make_basket(**overrides):
    basket = {
        "ident": "abc123",
        "complete": False,
        "id": 9001,
        "country": "GB",
        "ip": "127.0.0.1",
        "username_id": None,
        "username": None,
        "cancel_url": "https://shop.example/cancel",
        "complete_url": "https://shop.example/ok",
        "complete_auto_redirect": True,
        "base_price": 0,
        "sales_tax": 0,
        "total_price": 0,
        "currency": "EUR",
        "packages": [],
        "coupons": [],
        "giftcards": [],
        "creator_code": "",
        "links": {"checkout": "https://pay.tebex.io/abc123"},
        "custom": {},
    }
    basket.update(overrides)
    return basket


def make_package(package_id=42, **overrides):
    package = {
        "id": package_id,
        "name": "VIP",
        "description": "<p>VIP rank</p>",
        "type": "single",
        "disable_gifting": False,
        "disable_quantity": False,
        "expiration_date": None,
        "currency": "EUR",
        "category": {"id": 7, "name": "Ranks"},
        "base_price": 10,
        "sales_tax": 2,
        "total_price": 12,
        "discount": 0,
        "image": None,
        "created_at": "2024-01-01T00:00:00+00:00",
        "updated_at": "2024-01-02T00:00:00+00:00",
    }
    package.update(overrides)
    return package


def make_category(category_id=7, **overrides):
    category = {
        "id": category_id,
        "name": "Ranks",
        "description": "",
        "parent": None,
        "order": 0,
        "packages": [],
        "display_type": "list",
        "slug": "ranks",
    }
    category.update(overrides)
    return category
