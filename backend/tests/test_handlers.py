# backend/tests/test_handlers.py
from datetime import datetime, timedelta

import pytest

from models import (
    Category, FooterLink, FooterSection, Order, OrderItem, PaymentMethod,
    Product, Review, Webhook,
)


@pytest.fixture
def catalogue(db):
    shoes = Category(name="Shoes", slug="shoes")
    bags = Category(name="Bags", slug="bags")
    db.add_all([shoes, bags])
    db.flush()
    base = datetime(2024, 5, 1, 12, 0, 0)
    boots = Product(name="Leather Boots", description="Brown, size 42", price=60, category_id=shoes.id,
                    image_url="https://img/boots.jpg", images=["https://img/boots.jpg"], created_at=base)
    tote = Product(name="Canvas Tote", description="Printed canvas", price=15, category_id=bags.id,
                   images=[], created_at=base + timedelta(days=1))
    loafers = Product(name="Suede Loafers", description="Navy", price=40, category_id=shoes.id,
                      images=[], is_active=False, created_at=base + timedelta(days=2))
    db.add_all([boots, tote, loafers])
    db.commit()
    return {"shoes": shoes, "bags": bags, "boots": boots, "tote": tote, "loafers": loafers}


class TestProducts:
    def test_list_is_newest_first_with_category_names(self, call, catalogue):
        body = call("products", "list").json()

        assert body["success"] is True
        assert [p["name"] for p in body["data"]] == ["Suede Loafers", "Canvas Tote", "Leather Boots"]
        assert body["data"][2]["categories"] == {"name": "Shoes", "slug": "shoes"}

    def test_list_is_repeatable(self, call, catalogue):
        assert call("products", "list").json() == call("products", "list").json()

    def test_get_returns_row_or_null(self, call, catalogue):
        found = call("products", "get", id=catalogue["tote"].id).json()
        assert found["data"]["name"] == "Canvas Tote"
        assert found["data"]["categories"]["slug"] == "bags"

        missing = call("products", "get", id="does-not-exist").json()
        assert missing == {"success": True, "data": None}

    def test_create_returns_generated_fields(self, call, catalogue):
        response = call("products", "create", data={
            "name": "Wool Scarf",
            "price": 12.5,
            "category_id": catalogue["bags"].id,
            "images": ["https://img/scarf.jpg"],
        })

        data = response.json()["data"]
        assert response.status_code == 200
        assert data["id"]
        assert data["created_at"]
        assert data["stock_quantity"] == 0
        assert data["is_active"] is True
        assert data["images"] == ["https://img/scarf.jpg"]

    def test_update_changes_only_given_fields(self, call, catalogue):
        boots = catalogue["boots"]
        data = call("products", "update", id=boots.id, data={"price": 55, "stock_quantity": 2}).json()["data"]

        assert data["price"] == 55
        assert data["stock_quantity"] == 2
        assert data["name"] == "Leather Boots"

    def test_delete(self, call, catalogue):
        response = call("products", "delete", id=catalogue["tote"].id)
        assert response.json() == {"success": True, "message": "Product deleted"}
        assert call("products", "get", id=catalogue["tote"].id).json()["data"] is None

    def test_delete_of_absent_row_still_succeeds(self, call):
        assert call("products", "delete", id="ghost").json() == {"success": True, "message": "Product deleted"}

    @pytest.mark.parametrize("payload, field", [
        ({"price": 10}, "name"),
        ({"name": "Lamp", "price": -1}, "price"),
        ({"name": "Lamp", "price": 10, "colour": "red"}, "colour"),
        ({"name": "Lamp", "price": "cheap"}, "price"),
    ])
    def test_create_rejects_bad_payloads(self, call, payload, field):
        response = call("products", "create", data=payload)

        assert response.status_code == 400
        error = response.json()["error"]
        assert error.startswith("Invalid product data:")
        assert field in error

    def test_filters(self, call, catalogue):
        active = call("products", "list", filters={"is_active": True}).json()["data"]
        assert {p["name"] for p in active} == {"Leather Boots", "Canvas Tote"}

        shoes = call("products", "list", filters={"category_slug": "shoes"}).json()["data"]
        assert {p["name"] for p in shoes} == {"Leather Boots", "Suede Loafers"}

        found = call("products", "list", filters={"search": "canvas"}).json()["data"]
        assert [p["name"] for p in found] == ["Canvas Tote"]

    def test_unknown_filter(self, call, catalogue):
        response = call("products", "list", filters={"colour": "red"})
        assert response.status_code == 400
        assert response.json()["error"] == "Unknown filter for products: colour"

    @pytest.mark.parametrize("name, value", [("images", ["https://img/boots.jpg"]), ("images", "https://img/boots.jpg")])
    def test_json_columns_are_not_filters(self, call, catalogue, name, value):
        response = call("products", "list", filters={name: value})
        assert response.status_code == 400
        assert response.json()["error"] == f"Unknown filter for products: {name}"

    def test_list_filter_on_plain_column_is_in(self, call, catalogue):
        ids = [catalogue["boots"].id, catalogue["tote"].id]
        data = call("products", "list", filters={"id": ids}).json()["data"]
        assert {p["name"] for p in data} == {"Leather Boots", "Canvas Tote"}


class TestCategories:
    def test_list_orders_by_name(self, call, catalogue):
        names = [c["name"] for c in call("categories", "list").json()["data"]]
        assert names == ["Bags", "Shoes"]

    def test_crud(self, call):
        created = call("categories", "create", data={"name": "Toys", "slug": "toys"}).json()["data"]
        updated = call("categories", "update", id=created["id"], data={"name": "Toys & Games"}).json()["data"]
        assert updated["name"] == "Toys & Games"
        assert updated["slug"] == "toys"
        assert call("categories", "delete", id=created["id"]).json()["message"] == "Category deleted"

    def test_get_is_not_offered(self, call, catalogue):
        response = call("categories", "get", id=catalogue["shoes"].id)
        assert response.json()["error"] == "Unknown action: get"

    def test_slug_must_be_url_safe(self, call):
        response = call("categories", "create", data={"name": "Toys", "slug": "Toys & Games"})
        assert response.status_code == 400


@pytest.fixture
def orders(db, catalogue):
    older = Order(order_number="TS-1001", customer_name="Mona", customer_email="mona@example.com",
                  total=75, status="pending", created_at=datetime(2024, 6, 1))
    newer = Order(order_number="TS-1002", customer_name="Omar", customer_email="omar@example.com",
                  total=15, status="shipped", created_at=datetime(2024, 6, 2))
    db.add_all([older, newer])
    db.flush()
    db.add_all([
        OrderItem(order_id=older.id, product_id=catalogue["boots"].id, quantity=1, unit_price=60, total_price=60),
        OrderItem(order_id=older.id, product_id=catalogue["tote"].id, quantity=1, unit_price=15, total_price=15),
        OrderItem(order_id=newer.id, product_id=catalogue["tote"].id, quantity=1, unit_price=15, total_price=15),
    ])
    db.commit()
    return {"older": older, "newer": newer}


class TestOrders:
    def test_list_embeds_items_and_product_names(self, call, orders):
        data = call("orders", "list").json()["data"]

        assert [o["order_number"] for o in data] == ["TS-1002", "TS-1001"]
        items = data[1]["order_items"]
        assert len(items) == 2
        assert {i["products"]["name"] for i in items} == {"Leather Boots", "Canvas Tote"}
        assert {"name", "image_url"} == set(items[0]["products"])

    def test_get(self, call, orders):
        data = call("orders", "get", id=orders["newer"].id).json()["data"]
        assert data["customer_name"] == "Omar"
        assert len(data["order_items"]) == 1

    def test_update_status(self, call, orders):
        data = call("orders", "update_status", id=orders["older"].id,
                    data={"status": "processing"}).json()["data"]
        assert data["status"] == "processing"
        assert data["total"] == 75

    def test_update_status_ignores_other_fields(self, call, orders):
        data = call("orders", "update_status", id=orders["older"].id,
                    data={"status": "shipped", "total": 0}).json()["data"]
        assert data["status"] == "shipped"
        assert data["total"] == 75

    def test_update_status_rejects_unknown_status(self, call, orders):
        response = call("orders", "update_status", id=orders["older"].id, data={"status": "lost"})
        assert response.status_code == 400
        assert "status" in response.json()["error"]

    def test_general_update_is_not_offered(self, call, orders):
        response = call("orders", "update", id=orders["older"].id, data={"total": 1})
        assert response.json()["error"] == "Unknown action: update"


@pytest.fixture
def reviews(db, catalogue):
    pending = Review(product_id=catalogue["boots"].id, customer_name="Sara", rating=5, comment="Great",
                     created_at=datetime(2024, 7, 1))
    approved = Review(product_id=catalogue["tote"].id, customer_name="Ali", rating=3, comment="Fine",
                      is_approved=True, created_at=datetime(2024, 7, 2))
    db.add_all([pending, approved])
    db.commit()
    return {"pending": pending, "approved": approved}


class TestReviews:
    def test_list_with_product_name(self, call, reviews):
        data = call("reviews", "list").json()["data"]
        assert [r["customer_name"] for r in data] == ["Ali", "Sara"]
        assert data[1]["products"] == {"name": "Leather Boots"}

    def test_list_filtered_by_approval(self, call, reviews):
        data = call("reviews", "list", filters={"is_approved": False}).json()["data"]
        assert [r["customer_name"] for r in data] == ["Sara"]

    def test_approve_and_reject(self, call, reviews):
        approved = call("reviews", "approve", id=reviews["pending"].id).json()["data"]
        assert approved["is_approved"] is True

        rejected = call("reviews", "reject", id=reviews["approved"].id).json()["data"]
        assert rejected["is_approved"] is False

    def test_delete(self, call, reviews):
        assert call("reviews", "delete", id=reviews["pending"].id).json()["message"] == "Review deleted"
        assert len(call("reviews", "list").json()["data"]) == 1

    def test_update_is_not_offered(self, call, reviews):
        response = call("reviews", "update", id=reviews["pending"].id, data={"rating": 1})
        assert response.json()["error"] == "Unknown action: update"


class TestCouponsAndCurrencies:
    def test_coupon_crud(self, call):
        created = call("coupons", "create", data={"code": "summer20", "discount_value": 20}).json()["data"]
        assert created["code"] == "SUMMER20"
        assert created["discount_type"] == "percentage"

        updated = call("coupons", "update", id=created["id"], data={"is_active": False}).json()["data"]
        assert updated["is_active"] is False
        assert call("coupons", "delete", id=created["id"]).json()["message"] == "Coupon deleted"

    def test_coupon_discount_type_is_checked(self, call):
        response = call("coupons", "create", data={"code": "X1", "discount_value": 5, "discount_type": "bogo"})
        assert response.status_code == 400

    def test_currencies_ordered_by_code(self, call):
        for code, name, symbol in (("USD", "US Dollar", "$"), ("AED", "Dirham", "AED"), ("EUR", "Euro", "€")):
            assert call("currencies", "create", data={"code": code, "name": name, "symbol": symbol}).status_code == 200

        codes = [c["code"] for c in call("currencies", "list").json()["data"]]
        assert codes == ["AED", "EUR", "USD"]


class TestFooter:
    def test_links_carry_section_title_and_display_order(self, call, db):
        section = FooterSection(title="Help", display_order=1)
        db.add(section)
        db.flush()
        db.add_all([
            FooterLink(section_id=section.id, label="Contact", url="/contact", display_order=2),
            FooterLink(section_id=section.id, label="Shipping", url="/shipping", display_order=1),
        ])
        db.commit()

        data = call("footer_links", "list").json()["data"]
        assert [link["label"] for link in data] == ["Shipping", "Contact"]
        assert data[0]["footer_sections"] == {"title": "Help"}

    def test_sections_crud(self, call):
        created = call("footer_sections", "create", data={"title": "Shop", "display_order": 0}).json()["data"]
        call("footer_sections", "create", data={"title": "About", "display_order": 3})

        titles = [s["title"] for s in call("footer_sections", "list").json()["data"]]
        assert titles == ["Shop", "About"]

        updated = call("footer_sections", "update", id=created["id"], data={"display_order": 9}).json()["data"]
        assert updated["display_order"] == 9
        assert call("footer_sections", "delete", id=created["id"]).json()["message"] == "Footer section deleted"


class TestWebhooksAndPaymentMethods:
    def test_webhook_crud(self, call, db):
        created = call("webhooks", "create", data={
            "name": "Order feed", "url": "https://hooks.example.com/orders", "events": ["order.created"],
        }).json()["data"]
        assert created["events"] == ["order.created"]

        listed = call("webhooks", "list").json()["data"]
        assert [w["name"] for w in listed] == ["Order feed"]

        updated = call("webhooks", "update", id=created["id"], data={"is_active": False}).json()["data"]
        assert updated["is_active"] is False
        assert call("webhooks", "list", filters={"events": ["order.created"]}).status_code == 400
        assert call("webhooks", "delete", id=created["id"]).json()["message"] == "Webhook deleted"
        assert db.query(Webhook).count() == 0

    def test_payment_methods_list_and_update_only(self, call, db):
        db.add_all([
            PaymentMethod(name="Credit Card", code="card"),
            PaymentMethod(name="Bank Transfer", code="bank"),
        ])
        db.commit()

        data = call("payment_methods", "list").json()["data"]
        assert [m["name"] for m in data] == ["Bank Transfer", "Credit Card"]

        updated = call("payment_methods", "update", id=data[1]["id"], data={"is_enabled": True}).json()["data"]
        assert updated["is_enabled"] is True
        assert updated["code"] == "card"

        assert call("payment_methods", "delete", id=data[0]["id"]).json()["error"] == "Unknown action: delete"

    def test_payment_method_code_is_fixed(self, call, db):
        method = PaymentMethod(name="Cash", code="cod")
        db.add(method)
        db.commit()
        response = call("payment_methods", "update", id=method.id, data={"code": "cash"})
        assert response.status_code == 400
