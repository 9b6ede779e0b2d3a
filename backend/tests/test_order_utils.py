"""
╔══════════════════════════════════════════════════════════════════════════════╗
║  YELELE GESTION - Règles commandes                                           ║
║                                                                              ║
║  Tests: calculate_order_total + can_mark_as_paid                             ║
╚══════════════════════════════════════════════════════════════════════════════╝
Run: cd backend && pytest tests/test_order_utils.py -v
"""

import pytest
from pydantic import ValidationError

from models.order import Order, OrderItem, OrderStatus
from services.order_utils import calculate_order_total, can_mark_as_paid


class TestCalculateOrderTotal:

    def test_single_item(self):
        items = [{"quantity": 2, "unit_price": 500}]
        assert calculate_order_total(items) == 1000

    def test_multiple_items(self):
        items = [
            {"quantity": 2, "unit_price": 500},  # 1000
            {"quantity": 1, "unit_price": 2000},  # 2000
        ]
        assert calculate_order_total(items) == 3000

    def test_empty(self):
        assert calculate_order_total([]) == 0
        assert calculate_order_total(None) == 0

    def test_models(self):
        items = [
            OrderItem(product_id="p1", quantity=3, unit_price=1500),
            OrderItem(product_id="p2", quantity=10, unit_price=250),
        ]
        assert calculate_order_total(items) == 7000


class TestCanMarkAsPaid:

    def test_new_order(self):
        assert can_mark_as_paid({"status": "new"}) is True

    def test_paid_order(self):
        assert can_mark_as_paid({"status": "paid"}) is False

    def test_cancelled_order(self):
        assert can_mark_as_paid({"status": "cancelled"}) is False

    def test_case_insensitive(self):
        assert can_mark_as_paid({"status": "PAID"}) is False
        assert can_mark_as_paid({"status": "PENDING"}) is True

    def test_order_model(self):
        order = Order(id="CMD-1", created_at="2026-01-05T10:00:00Z", status=OrderStatus.INVOICED)
        assert can_mark_as_paid(order) is True
        order = Order(id="CMD-2", created_at="2026-01-05T10:00:00Z", status=OrderStatus.PAID)
        assert can_mark_as_paid(order) is False


class TestOrderAmountValidation:

    def test_infinite_price_rejected(self):
        with pytest.raises(ValidationError):
            OrderItem(product_id="p1", quantity=1, unit_price=float("inf"))

    def test_nan_quantity_rejected(self):
        with pytest.raises(ValidationError):
            OrderItem(product_id="p1", quantity=float("nan"), unit_price=500)

    def test_infinite_total_rejected(self):
        with pytest.raises(ValidationError):
            Order(id="CMD-3", created_at="2026-01-05T10:00:00Z", total_amount=float("inf"))
