"""
Routes commandes
Calculs sur les commandes, sans accès base (les données viennent du client)
"""

from fastapi import APIRouter
from typing import List

from models.invoice import CanMarkPaidResponse, OrderTotalResponse
from models.order import Order, OrderItem
from services.currency import format_price
from services.order_utils import calculate_order_total, can_mark_as_paid

router = APIRouter(prefix="/orders", tags=["Commandes"])


@router.post("/total", response_model=OrderTotalResponse)
async def order_total(items: List[OrderItem]):
    """Total d'une commande: somme des quantité x prix unitaire"""
    total = calculate_order_total(items)
    return {"total": total, "formatted": format_price(total)}


@router.post("/can-mark-paid", response_model=CanMarkPaidResponse)
async def order_can_mark_paid(order: Order):
    """Une commande payée ou annulée ne peut plus être marquée payée"""
    return {"order_id": order.id, "status": order.status.value, "can_mark_as_paid": can_mark_as_paid(order)}
