# backend/gateway/handlers.py
"""
Per-resource handlers behind the site-management gateway.

Each handler owns one table and a fixed set of actions. Handlers run
synchronously against a SQLAlchemy session opened by the dispatcher; store
failures are rolled back and re-raised untouched so the router can report
them verbatim.
"""

import logging
from typing import Any, Callable, Dict, Optional, Tuple, Type

from pydantic import BaseModel, ValidationError
from sqlalchemy import JSON, or_
from sqlalchemy import inspect as sa_inspect
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from gateway.errors import RecordNotFound, RequestValidationFailed, UnknownAction, describe_validation_error
from gateway.records import pick, row_to_dict
from gateway.resources import RESOURCE_ACTIONS, Action, Resource
from models import (
    Category, Coupon, Currency, FooterLink, FooterSection, HeroSettings,
    Order, OrderItem, PaymentMethod, Product, Review, SiteSettings, Webhook,
)
from models.base_columns import new_id, utcnow
from schemas.categories import CategoryCreate, CategoryUpdate
from schemas.coupons import CouponCreate, CouponUpdate
from schemas.currencies import CurrencyCreate, CurrencyUpdate
from schemas.envelope import GatewayRequest, GatewayResponse
from schemas.orders import OrderStatusUpdate
from schemas.payment_methods import PaymentMethodUpdate
from schemas.products import ProductCreate, ProductUpdate
from schemas.site_content import (
    FooterLinkCreate, FooterLinkUpdate, FooterSectionCreate, FooterSectionUpdate,
    HeroSettingsUpdate, SiteSettingsUpdate,
)
from schemas.webhooks import WebhookCreate, WebhookUpdate

logger = logging.getLogger(__name__)


class ResourceHandler:
    resource: Resource
    model = None
    label = ""                                   # "Product" -> "Product ID required"
    create_schema: Optional[Type[BaseModel]] = None
    update_schema: Optional[Type[BaseModel]] = None

    ACTION_METHODS: Dict[Action, str] = {
        Action.LIST: "list_records",
        Action.GET: "get_record",
        Action.CREATE: "create_record",
        Action.UPDATE: "update_record",
        Action.DELETE: "delete_record",
        Action.UPDATE_STATUS: "update_status",
        Action.APPROVE: "approve",
        Action.REJECT: "reject",
    }

    ID_ACTIONS = frozenset({Action.GET, Action.UPDATE, Action.DELETE, Action.UPDATE_STATUS, Action.APPROVE, Action.REJECT})
    DATA_ACTIONS = frozenset({Action.CREATE, Action.UPDATE})

    def __init__(self) -> None:
        self.actions: Tuple[Action, ...] = RESOURCE_ACTIONS[self.resource]
        self._routes: Dict[Action, Callable[[Session, GatewayRequest], GatewayResponse]] = {}
        for action in self.actions:
            method = getattr(self, self.ACTION_METHODS[action], None)
            if method is None:
                raise TypeError(f"{type(self).__name__} does not implement '{action.value}'")
            self._routes[action] = method

    # ---------- dispatch ----------

    def resolve_action(self, name: str) -> Action:
        try:
            action = Action(name)
        except ValueError:
            raise UnknownAction(name) from None
        if action not in self._routes:
            raise UnknownAction(name)
        return action

    def check_inputs(self, action: Action, request: GatewayRequest) -> None:
        """Fail on missing id/data before anything touches the store."""
        if action in self.ID_ACTIONS:
            self.require_id(request)
        if action in self.DATA_ACTIONS:
            self.require_data(request)

    def handle(self, db: Session, action: Action, request: GatewayRequest) -> GatewayResponse:
        try:
            return self._routes[action](db, request)
        except SQLAlchemyError:
            db.rollback()
            raise

    # ---------- helpers ----------

    def require_id(self, request: GatewayRequest) -> str:
        if not request.id:
            raise RequestValidationFailed(f"{self.label} ID required")
        return request.id

    def require_data(self, request: GatewayRequest) -> Dict[str, Any]:
        if request.data is None:
            raise RequestValidationFailed(f"{self.label} data required")
        return request.data

    def validate(self, schema: Type[BaseModel], data: Dict[str, Any]) -> Dict[str, Any]:
        try:
            return schema.model_validate(data).model_dump(exclude_unset=True)
        except ValidationError as e:
            raise RequestValidationFailed(f"Invalid {self.label.lower()} data: {describe_validation_error(e)}") from None

    def load_options(self) -> tuple:
        return ()

    def ordering(self) -> tuple:
        return (self.model.created_at.desc(),)

    def serialize(self, obj) -> Dict[str, Any]:
        return row_to_dict(obj)

    def query(self, db: Session):
        return db.query(self.model).options(*self.load_options())

    def apply_filters(self, q, filters: Dict[str, Any]):
        # JSON documents are not filterable
        columns = {
            attr.key: attr for attr in sa_inspect(self.model).mapper.column_attrs
            if not isinstance(attr.columns[0].type, JSON)
        }
        for name, value in filters.items():
            attr = columns.get(name)
            if attr is None:
                raise RequestValidationFailed(f"Unknown filter for {self.resource.value}: {name}")
            column = getattr(self.model, attr.key)
            if isinstance(value, (list, tuple)):
                q = q.filter(column.in_(list(value)))
            elif value is None:
                q = q.filter(column.is_(None))
            else:
                q = q.filter(column == value)
        return q

    def find(self, db: Session, record_id: str):
        obj = db.get(self.model, record_id)
        if obj is None:
            raise RecordNotFound(f"{self.label} not found: {record_id}")
        return obj

    def save(self, db: Session, obj) -> Dict[str, Any]:
        db.commit()
        db.refresh(obj)
        return row_to_dict(obj)

    # ---------- generic actions ----------

    def list_records(self, db: Session, request: GatewayRequest) -> GatewayResponse:
        q = self.query(db)
        if request.filters:
            q = self.apply_filters(q, request.filters)
        rows = q.order_by(*self.ordering(), self.model.id).all()
        return GatewayResponse.ok([self.serialize(r) for r in rows])

    def get_record(self, db: Session, request: GatewayRequest) -> GatewayResponse:
        record_id = self.require_id(request)
        obj = self.query(db).filter(self.model.id == record_id).first()
        return GatewayResponse.ok(self.serialize(obj) if obj is not None else None)

    def create_record(self, db: Session, request: GatewayRequest) -> GatewayResponse:
        values = self.validate(self.create_schema, self.require_data(request))
        obj = self.model(**values)
        db.add(obj)
        data = self.save(db, obj)
        logger.info(f"Created {self.resource.value} {obj.id}")
        return GatewayResponse.ok(data)

    def update_record(self, db: Session, request: GatewayRequest) -> GatewayResponse:
        record_id = self.require_id(request)
        values = self.validate(self.update_schema, self.require_data(request))
        obj = self.find(db, record_id)
        for key, value in values.items():
            setattr(obj, key, value)
        return GatewayResponse.ok(self.save(db, obj))

    def delete_record(self, db: Session, request: GatewayRequest) -> GatewayResponse:
        record_id = self.require_id(request)
        obj = db.get(self.model, record_id)
        if obj is not None:
            db.delete(obj)
            db.commit()
            logger.info(f"Deleted {self.resource.value} {record_id}")
        return GatewayResponse.done(f"{self.label} deleted")


# ---------- catalogue ----------

class ProductsHandler(ResourceHandler):
    resource = Resource.PRODUCTS
    model = Product
    label = "Product"
    create_schema = ProductCreate
    update_schema = ProductUpdate

    def load_options(self) -> tuple:
        return (joinedload(Product.category),)

    def serialize(self, obj) -> Dict[str, Any]:
        out = row_to_dict(obj)
        out["categories"] = pick(obj.category, "name", "slug")
        return out

    def apply_filters(self, q, filters: Dict[str, Any]):
        filters = dict(filters)
        search = filters.pop("search", None)
        category_slug = filters.pop("category_slug", None)
        if search:
            pattern = f"%{search}%"
            q = q.filter(or_(Product.name.ilike(pattern), Product.description.ilike(pattern)))
        if category_slug:
            q = q.join(Category, Product.category_id == Category.id).filter(Category.slug == category_slug)
        return super().apply_filters(q, filters)


class CategoriesHandler(ResourceHandler):
    resource = Resource.CATEGORIES
    model = Category
    label = "Category"
    create_schema = CategoryCreate
    update_schema = CategoryUpdate

    def ordering(self) -> tuple:
        return (Category.name.asc(),)


# ---------- sales ----------

class OrdersHandler(ResourceHandler):
    resource = Resource.ORDERS
    model = Order
    label = "Order"

    def load_options(self) -> tuple:
        return (joinedload(Order.items).joinedload(OrderItem.product),)

    def serialize(self, obj) -> Dict[str, Any]:
        out = row_to_dict(obj)
        items = []
        for item in obj.items:
            row = row_to_dict(item)
            row["products"] = pick(item.product, "name", "image_url")
            items.append(row)
        out["order_items"] = items
        return out

    def check_inputs(self, action: Action, request: GatewayRequest) -> None:
        super().check_inputs(action, request)
        if action is Action.UPDATE_STATUS and not (request.data or {}).get("status"):
            raise RequestValidationFailed("Status required")

    def update_status(self, db: Session, request: GatewayRequest) -> GatewayResponse:
        record_id = self.require_id(request)
        status = (request.data or {}).get("status")
        if not status:
            raise RequestValidationFailed("Status required")
        values = self.validate(OrderStatusUpdate, {"status": status})
        order = self.find(db, record_id)
        previous = order.status
        order.status = values["status"]
        data = self.save(db, order)
        logger.info(f"Order {record_id} status {previous} -> {order.status}")
        return GatewayResponse.ok(data)


class ReviewsHandler(ResourceHandler):
    resource = Resource.REVIEWS
    model = Review
    label = "Review"

    def load_options(self) -> tuple:
        return (joinedload(Review.product),)

    def serialize(self, obj) -> Dict[str, Any]:
        out = row_to_dict(obj)
        out["products"] = pick(obj.product, "name")
        return out

    def _set_approval(self, db: Session, request: GatewayRequest, approved: bool) -> GatewayResponse:
        review = self.find(db, self.require_id(request))
        review.is_approved = approved
        return GatewayResponse.ok(self.save(db, review))

    def approve(self, db: Session, request: GatewayRequest) -> GatewayResponse:
        return self._set_approval(db, request, True)

    def reject(self, db: Session, request: GatewayRequest) -> GatewayResponse:
        return self._set_approval(db, request, False)


class CouponsHandler(ResourceHandler):
    resource = Resource.COUPONS
    model = Coupon
    label = "Coupon"
    create_schema = CouponCreate
    update_schema = CouponUpdate


class CurrenciesHandler(ResourceHandler):
    resource = Resource.CURRENCIES
    model = Currency
    label = "Currency"
    create_schema = CurrencyCreate
    update_schema = CurrencyUpdate

    def ordering(self) -> tuple:
        return (Currency.code.asc(),)


class PaymentMethodsHandler(ResourceHandler):
    resource = Resource.PAYMENT_METHODS
    model = PaymentMethod
    label = "Payment method"
    update_schema = PaymentMethodUpdate

    def ordering(self) -> tuple:
        return (PaymentMethod.name.asc(),)


class WebhooksHandler(ResourceHandler):
    resource = Resource.WEBHOOKS
    model = Webhook
    label = "Webhook"
    create_schema = WebhookCreate
    update_schema = WebhookUpdate


# ---------- storefront content ----------

class FooterSectionsHandler(ResourceHandler):
    resource = Resource.FOOTER_SECTIONS
    model = FooterSection
    label = "Footer section"
    create_schema = FooterSectionCreate
    update_schema = FooterSectionUpdate

    def ordering(self) -> tuple:
        return (FooterSection.display_order.asc(),)


class FooterLinksHandler(ResourceHandler):
    resource = Resource.FOOTER_LINKS
    model = FooterLink
    label = "Footer link"
    create_schema = FooterLinkCreate
    update_schema = FooterLinkUpdate

    def load_options(self) -> tuple:
        return (joinedload(FooterLink.section),)

    def ordering(self) -> tuple:
        return (FooterLink.display_order.asc(),)

    def serialize(self, obj) -> Dict[str, Any]:
        out = row_to_dict(obj)
        out["footer_sections"] = pick(obj.section, "title")
        return out


class SingletonHandler(ResourceHandler):
    """get/update over a table that holds at most one row."""

    ID_ACTIONS = frozenset()

    def get_record(self, db: Session, request: GatewayRequest) -> GatewayResponse:
        obj = db.query(self.model).first()
        return GatewayResponse.ok(row_to_dict(obj) if obj is not None else None)

    def update_record(self, db: Session, request: GatewayRequest) -> GatewayResponse:
        values = self.validate(self.update_schema, self.require_data(request))
        self.upsert(db, values)
        db.commit()
        db.expire_all()
        return GatewayResponse.ok(row_to_dict(db.query(self.model).first()))

    def upsert(self, db: Session, values: Dict[str, Any]) -> None:
        dialect = db.get_bind().dialect.name
        if dialect not in ("postgresql", "sqlite"):
            self._read_then_write(db, values)
            return

        insert = pg_insert if dialect == "postgresql" else sqlite_insert
        now = utcnow()
        stmt = insert(self.model.__table__).values(id=new_id(), singleton=True, updated_at=now, **values)
        changes = {key: stmt.excluded[key] for key in values}
        changes["updated_at"] = now
        stmt = stmt.on_conflict_do_update(index_elements=["singleton"], set_=changes)
        db.execute(stmt)

    def _read_then_write(self, db: Session, values: Dict[str, Any]) -> None:
        # a concurrent insert loses on the unique `singleton` column
        existing = db.query(self.model).first()
        if existing is None:
            db.add(self.model(**values))
        else:
            for key, value in values.items():
                setattr(existing, key, value)
        db.flush()


class HeroSettingsHandler(SingletonHandler):
    resource = Resource.HERO_SETTINGS
    model = HeroSettings
    label = "Hero settings"
    update_schema = HeroSettingsUpdate


class SiteSettingsHandler(SingletonHandler):
    resource = Resource.SETTINGS
    model = SiteSettings
    label = "Site settings"
    update_schema = SiteSettingsUpdate


HANDLER_TYPES = (
    ProductsHandler, CategoriesHandler, OrdersHandler, ReviewsHandler,
    CouponsHandler, CurrenciesHandler, HeroSettingsHandler, FooterSectionsHandler,
    FooterLinksHandler, SiteSettingsHandler, WebhooksHandler, PaymentMethodsHandler,
)


def build_handlers() -> Dict[Resource, ResourceHandler]:
    handlers = {h.resource: h() for h in HANDLER_TYPES}
    missing = set(Resource) - set(handlers) - {Resource.DASHBOARD}
    if missing:
        raise RuntimeError(f"No handler for resources: {sorted(r.value for r in missing)}")
    return handlers
