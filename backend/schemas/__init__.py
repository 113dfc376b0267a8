# backend/schemas/__init__.py

# gateway envelope
from .envelope import GatewayRequest, GatewayResponse

# catalogue
from .products import ProductCreate, ProductUpdate
from .categories import CategoryCreate, CategoryUpdate

# sales
from .orders import OrderStatus, OrderStatusUpdate
from .coupons import CouponCreate, CouponUpdate
from .currencies import CurrencyCreate, CurrencyUpdate
from .payment_methods import PaymentMethodUpdate
from .webhooks import WebhookCreate, WebhookUpdate

# storefront content
from .site_content import (
    HeroSettingsUpdate, SiteSettingsUpdate,
    FooterSectionCreate, FooterSectionUpdate, FooterLinkCreate, FooterLinkUpdate,
)

# admin sessions
from .auth import LoginPayload, SessionOut

__all__ = [
    # gateway envelope
    "GatewayRequest", "GatewayResponse",
    # catalogue
    "ProductCreate", "ProductUpdate", "CategoryCreate", "CategoryUpdate",
    # sales
    "OrderStatus", "OrderStatusUpdate", "CouponCreate", "CouponUpdate",
    "CurrencyCreate", "CurrencyUpdate", "PaymentMethodUpdate",
    "WebhookCreate", "WebhookUpdate",
    # storefront content
    "HeroSettingsUpdate", "SiteSettingsUpdate",
    "FooterSectionCreate", "FooterSectionUpdate", "FooterLinkCreate", "FooterLinkUpdate",
    # admin sessions
    "LoginPayload", "SessionOut",
]
