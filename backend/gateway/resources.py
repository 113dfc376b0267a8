# backend/gateway/resources.py
from enum import Enum
from typing import Dict, FrozenSet, Tuple

from gateway.errors import UnknownResource


class Resource(str, Enum):
    PRODUCTS = "products"
    CATEGORIES = "categories"
    ORDERS = "orders"
    REVIEWS = "reviews"
    COUPONS = "coupons"
    CURRENCIES = "currencies"
    HERO_SETTINGS = "hero_settings"
    FOOTER_SECTIONS = "footer_sections"
    FOOTER_LINKS = "footer_links"
    SETTINGS = "settings"
    WEBHOOKS = "webhooks"
    PAYMENT_METHODS = "payment_methods"
    DASHBOARD = "dashboard"

    @classmethod
    def parse(cls, name: str) -> "Resource":
        try:
            return cls(name)
        except ValueError:
            raise UnknownResource(name) from None


class Action(str, Enum):
    LIST = "list"
    GET = "get"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    UPDATE_STATUS = "update_status"
    APPROVE = "approve"
    REJECT = "reject"


CRUD: Tuple[Action, ...] = (Action.LIST, Action.CREATE, Action.UPDATE, Action.DELETE)
SINGLETON: Tuple[Action, ...] = (Action.GET, Action.UPDATE)

# resource -> supported actions, in the order they are advertised
RESOURCE_ACTIONS: Dict[Resource, Tuple[Action, ...]] = {
    Resource.PRODUCTS: (Action.LIST, Action.GET, Action.CREATE, Action.UPDATE, Action.DELETE),
    Resource.CATEGORIES: CRUD,
    Resource.ORDERS: (Action.LIST, Action.GET, Action.UPDATE_STATUS),
    Resource.REVIEWS: (Action.LIST, Action.APPROVE, Action.REJECT, Action.DELETE),
    Resource.COUPONS: CRUD,
    Resource.CURRENCIES: CRUD,
    Resource.HERO_SETTINGS: SINGLETON,
    Resource.FOOTER_SECTIONS: CRUD,
    Resource.FOOTER_LINKS: CRUD,
    Resource.SETTINGS: SINGLETON,
    Resource.WEBHOOKS: CRUD,
    Resource.PAYMENT_METHODS: (Action.LIST, Action.UPDATE),
    Resource.DASHBOARD: (Action.GET,),
}

# reads the storefront performs without an admin session
PUBLIC_READS: FrozenSet[Resource] = frozenset({
    Resource.PRODUCTS,
    Resource.CATEGORIES,
    Resource.CURRENCIES,
    Resource.HERO_SETTINGS,
    Resource.FOOTER_SECTIONS,
    Resource.FOOTER_LINKS,
    Resource.SETTINGS,
    Resource.PAYMENT_METHODS,
})


def requires_admin(resource: Resource, action: Action) -> bool:
    if resource in PUBLIC_READS and action in (Action.LIST, Action.GET):
        return False
    return True


def capabilities() -> Dict[str, list]:
    return {r.value: [a.value for a in actions] for r, actions in RESOURCE_ACTIONS.items()}
