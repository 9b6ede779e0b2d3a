"""
Routes factures
Aperçu du contenu d'une facture à partir d'une commande jointe
(client + lignes + produits). Pas de persistance, pas de mise en page.
"""

from fastapi import APIRouter
from typing import Optional

from models.invoice import InvoiceContent
from models.order import Order
from services.invoice_text import build_invoice_content

router = APIRouter(prefix="/invoices", tags=["Invoices"])


@router.post("/preview", response_model=InvoiceContent)
async def preview_invoice(order: Order, invoice_id: Optional[str] = None):
    """
    Contenu de la facture d'une commande.

    invoice_id: id de facture existant (sinon dérivé de la commande: CMD-xxx -> INV-xxx)
    """
    return build_invoice_content(order, invoice_id)
