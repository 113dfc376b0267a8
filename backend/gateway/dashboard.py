# backend/gateway/dashboard.py
import asyncio
import logging
from datetime import datetime, time
from typing import Any, Callable, Dict, List, TypeVar

from sqlalchemy.orm import Session, sessionmaker

from gateway.resources import Action
from models import Coupon, Order, Product, Review
from models.base_columns import utcnow

logger = logging.getLogger(__name__)

T = TypeVar("T")

PENDING_STATUS = "pending"


def summarize(products: List[Any], orders: List[Any], reviews: List[Any], coupons: List[Any],
              now: datetime = None) -> Dict[str, Any]:
    """Reduce the four dashboard reads into flat counters."""
    now = now or utcnow()
    midnight = datetime.combine(now.date(), time.min)

    total_revenue = sum((o.total or 0) for o in orders)
    today = [o for o in orders if o.created_at is not None and o.created_at >= midnight]

    return {
        "totalProducts": len(products),
        "lowStockCount": sum(1 for p in products if p.stock_quantity <= p.low_stock_threshold),
        "totalOrders": len(orders),
        "totalRevenue": total_revenue,
        "pendingOrders": sum(1 for o in orders if o.status == PENDING_STATUS),
        "totalReviews": len(reviews),
        "pendingReviews": sum(1 for r in reviews if not r.is_approved),
        "totalCoupons": len(coupons),
        "activeCoupons": sum(1 for c in coupons if c.is_active),
        "todayOrders": len(today),
        "todayRevenue": sum((o.total or 0) for o in today),
    }


class DashboardAggregator:
    """
    Summary counters for the admin dashboard.

    The four reads are independent, so each runs in its own worker thread with
    its own session and the results are awaited together. One failed read
    fails the whole summary.
    """

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def resolve_action(self, name: str) -> Action:
        # the dashboard has a single view; the action keyword is not inspected
        return Action.GET

    def _read(self, fn: Callable[[Session], T]) -> T:
        with self.session_factory() as db:
            return fn(db)

    @staticmethod
    def _products(db: Session) -> list:
        return db.query(Product.id, Product.stock_quantity, Product.low_stock_threshold).all()

    @staticmethod
    def _orders(db: Session) -> list:
        return db.query(Order.id, Order.total, Order.status, Order.created_at).all()

    @staticmethod
    def _reviews(db: Session) -> list:
        return db.query(Review.id, Review.is_approved).all()

    @staticmethod
    def _coupons(db: Session) -> list:
        return db.query(Coupon.id, Coupon.is_active).all()

    async def get_summary(self) -> Dict[str, Any]:
        loop = asyncio.get_running_loop()
        products, orders, reviews, coupons = await asyncio.gather(
            loop.run_in_executor(None, self._read, self._products),
            loop.run_in_executor(None, self._read, self._orders),
            loop.run_in_executor(None, self._read, self._reviews),
            loop.run_in_executor(None, self._read, self._coupons),
        )
        summary = summarize(products, orders, reviews, coupons)
        logger.debug(f"Dashboard summary: {summary}")
        return summary
