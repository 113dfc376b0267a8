# backend/models/__init__.py
from .category_model import Category
from .product_model import Product
from .order_model import Order, OrderItem
from .review_model import Review
from .coupon_model import Coupon
from .currency_model import Currency
from .site_content_model import HeroSettings, SiteSettings, FooterSection, FooterLink
from .webhook_model import Webhook
from .payment_method_model import PaymentMethod
from .admin_session_model import AdminSessionRecord

__all__ = [
    "Category", "Product", "Order", "OrderItem", "Review", "Coupon", "Currency",
    "HeroSettings", "SiteSettings", "FooterSection", "FooterLink",
    "Webhook", "PaymentMethod", "AdminSessionRecord",
]
