# backend/database/demo_data.py
"""Demo catalogue and storefront content for a fresh database."""

import logging

from sqlalchemy.orm import Session

from models import (
    Category, Currency, FooterLink, FooterSection, HeroSettings,
    PaymentMethod, Product, SiteSettings,
)

logger = logging.getLogger(__name__)


def seed_demo_data(db: Session) -> dict:
    """Insert demo rows unless the catalogue already has categories. Returns counts."""

    # existing data is never touched
    if db.query(Category).first():
        logger.info("✅ Demo data already present")
        return {}

    categories = {
        "clothing": Category(name="Clothing", slug="clothing", description="Pre-loved fashion"),
        "home": Category(name="Home & Living", slug="home", description="Furniture and decor"),
        "books": Category(name="Books", slug="books", description="Second-hand books"),
    }
    db.add_all(categories.values())
    db.flush()

    products = [
        Product(
            category_id=categories["clothing"].id,
            name="Vintage Denim Jacket",
            slug="vintage-denim-jacket",
            description="Classic 90s cut, lightly worn",
            price=45.0,
            compare_at_price=80.0,
            stock_quantity=3,
            image_url="https://images.example.com/denim.jpg",
            images=["https://images.example.com/denim.jpg"],
            is_featured=True,
        ),
        Product(
            category_id=categories["home"].id,
            name="Rattan Armchair",
            slug="rattan-armchair",
            description="Hand-woven rattan, restored",
            price=120.0,
            stock_quantity=1,
            low_stock_threshold=1,
            images=[],
        ),
        Product(
            category_id=categories["books"].id,
            name="Arabic Poetry Collection",
            slug="arabic-poetry-collection",
            description="Hardcover, 1978 edition",
            price=18.5,
            stock_quantity=7,
            images=[],
        ),
    ]
    db.add_all(products)

    currencies = [
        Currency(code="AED", name="UAE Dirham", symbol="د.إ", exchange_rate=3.6725),
        Currency(code="EUR", name="Euro", symbol="€", exchange_rate=0.92),
        Currency(code="USD", name="US Dollar", symbol="$", exchange_rate=1.0, is_default=True),
    ]
    db.add_all(currencies)

    payment_methods = [
        PaymentMethod(name="Cash on Delivery", code="cod", is_enabled=True, display_order=0),
        PaymentMethod(name="Credit Card", code="card", is_enabled=False, display_order=1),
        PaymentMethod(name="Bank Transfer", code="bank_transfer", is_enabled=False, display_order=2),
    ]
    db.add_all(payment_methods)

    shop = FooterSection(title="Shop", display_order=0)
    help_ = FooterSection(title="Help", display_order=1)
    db.add_all([shop, help_])
    db.flush()
    links = [
        FooterLink(section_id=shop.id, label="New arrivals", url="/products?sort=new", display_order=0),
        FooterLink(section_id=shop.id, label="Featured", url="/products?featured=1", display_order=1),
        FooterLink(section_id=help_.id, label="Shipping", url="/pages/shipping", display_order=0),
        FooterLink(section_id=help_.id, label="Contact us", url="/pages/contact", display_order=1),
    ]
    db.add_all(links)

    db.add(HeroSettings(
        title="Thrift smarter",
        subtitle="Curated second-hand finds, delivered across the UAE",
        cta_text="Shop now",
        cta_link="/products",
    ))
    db.add(SiteSettings(
        site_name="ThriftySouq",
        tagline="Pre-loved, re-loved",
        contact_email="hello@thriftysouq.com",
        default_currency="USD",
        social_links={"instagram": "https://instagram.com/thriftysouq"},
    ))

    db.commit()

    counts = {
        "categories": len(categories),
        "products": len(products),
        "currencies": len(currencies),
        "payment_methods": len(payment_methods),
        "footer_sections": 2,
        "footer_links": len(links),
    }
    logger.info(f"✅ Demo data created: {counts}")
    return counts
