"""
╔══════════════════════════════════════════════════════════════════════════════╗
║  YELELE GESTION - Models Package                                             ║
║                                                                              ║
║  Exporte tous les modèles pour import facile                                 ║
║  from models import Order, OrderItem, InvoiceContent, etc.                   ║
╚══════════════════════════════════════════════════════════════════════════════╝
"""

# Commande (client, produits, lignes)
from .order import (
    OrderStatus,
    Product,
    Customer,
    OrderItem,
    Order,
)

# Facture et montants
from .invoice import (
    AmountWordsResponse,
    FormattedAmountResponse,
    OrderTotalResponse,
    CanMarkPaidResponse,
    InvoiceLine,
    BilledTo,
    InvoiceContent,
)

__all__ = [
    # Commande
    "OrderStatus",
    "Product",
    "Customer",
    "OrderItem",
    "Order",
    # Facture
    "AmountWordsResponse",
    "FormattedAmountResponse",
    "OrderTotalResponse",
    "CanMarkPaidResponse",
    "InvoiceLine",
    "BilledTo",
    "InvoiceContent",
]
