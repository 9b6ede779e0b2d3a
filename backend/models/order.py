"""
╔══════════════════════════════════════════════════════════════════════════════╗
║  YELELE GESTION - Modèles Commande                                           ║
║                                                                              ║
║  Une commande = un client + des lignes produit (quantité x prix unitaire)    ║
║  Montants en FCFA (pas de centimes)                                          ║
║                                                                              ║
║  Les données viennent de la plateforme backend: extra="ignore" partout       ║
╚══════════════════════════════════════════════════════════════════════════════╝
"""

from typing import Optional, List
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


class OrderStatus(str, Enum):
    NEW = "new"
    PREPARING = "preparing"
    READY = "ready"
    DELIVERED = "delivered"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    PAID = "paid"
    UNPAID = "unpaid"
    DRAFT = "draft"
    OVERDUE = "overdue"
    INVOICED = "invoiced"
    ADVANCE = "advance"


class Product(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    price: float = 0.0
    stock: int = 0
    alert_threshold: int = 0
    unit: Optional[str] = ""  # ex: "110g", "220g"
    image_url: Optional[str] = None


class Customer(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    balance: float = 0.0  # Montant dû
    status: str = "active"
    company_name: Optional[str] = None
    niu: Optional[str] = None  # Numéro d'Identifiant Unique
    rc: Optional[str] = None  # Registre de Commerce


class OrderItem(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    order_id: Optional[str] = None
    product_id: str
    product: Optional[Product] = None
    quantity: float = Field(ge=0, allow_inf_nan=False)
    unit_price: float = Field(ge=0, allow_inf_nan=False)


class Order(BaseModel):
    """
    Commande complète (avec client et lignes jointes)

    total_amount absent = recalculé à partir des lignes
    """
    model_config = ConfigDict(extra="ignore")

    id: str
    created_at: str
    customer_id: Optional[str] = None
    customer: Optional[Customer] = None
    status: OrderStatus = OrderStatus.NEW
    total_amount: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    delivery_date: Optional[str] = None
    payment_date: Optional[str] = None
    payment_method: Optional[str] = None
    notes: Optional[str] = ""
    items: List[OrderItem] = []
