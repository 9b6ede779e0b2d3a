"""
Service texte de facture
- Montant en toutes lettres (pied de facture)
- Numérotation INV-/CMD- et nom de fichier
- Assemblage du contenu d'une facture (sans mise en page)

La conversion lève des erreurs, ce service décide du repli:
en cas d'échec on affiche le montant en chiffres.
"""

import logging
import math
from datetime import datetime
from decimal import Decimal
from typing import Optional

from config import AMOUNT_WORDS_TEMPLATE, BANK_DETAILS, COMPANY
from services.currency import format_price
from services.number_words import NumberWordsError, convert_amount_to_french_words
from services.order_utils import calculate_order_total, can_mark_as_paid

logger = logging.getLogger("invoice_text")

ORDER_PREFIX = "CMD-"
INVOICE_PREFIX = "INV-"


# ==================== MONTANT EN LETTRES ====================

def floor_amount(amount):
    """Partie entière d'un montant. NaN/infini passent tels quels (rejetés ensuite)"""
    if isinstance(amount, (float, Decimal)):
        try:
            return math.floor(amount)
        except (ValueError, OverflowError):
            return amount
    return amount


def montant_lettres(amount) -> str:
    """
    Montant en toutes lettres, en majuscules.

    75000.9 -> "SOIXANTE-QUINZE-MILLE"
    En cas d'erreur (négatif, hors plafond...): le montant brut en chiffres.
    """
    try:
        return convert_amount_to_french_words(floor_amount(amount)).upper()
    except NumberWordsError as e:
        logger.error(f"Conversion en lettres impossible pour {amount!r}: {e}")
        return f"{amount}"


def amount_in_words_sentence(amount, template: Optional[str] = None) -> str:
    """Phrase légale: "Arrêtée à la somme de ... Francs CFA." """
    return (template or AMOUNT_WORDS_TEMPLATE).format(montant=montant_lettres(amount))


# ==================== NUMÉROTATION ====================

def invoice_id_for_order(order_id: str, existing_invoice_id: Optional[str] = None) -> str:
    """
    Identifiant de facture d'une commande.
    Facture déjà enregistrée -> son id, sinon INV-<numéro de commande sans CMD->
    """
    if existing_invoice_id:
        return existing_invoice_id
    return f"{INVOICE_PREFIX}{order_id.replace(ORDER_PREFIX, '', 1)}"


def invoice_display_number(invoice_id: str) -> str:
    """Numéro affiché en en-tête: "N° CMD-2024001" """
    return f"N° {ORDER_PREFIX}{invoice_id.replace(INVOICE_PREFIX, '', 1)}"


def invoice_filename(invoice_id: str) -> str:
    return f"Facture-{invoice_id}.pdf"


def format_issue_date(created_at: str) -> str:
    """ISO -> jj/mm/aaaa. Chaîne rendue telle quelle si illisible"""
    try:
        return datetime.fromisoformat(created_at.replace("Z", "+00:00")).strftime("%d/%m/%Y")
    except (ValueError, TypeError, AttributeError):
        logger.warning(f"Date de commande illisible: {created_at!r}")
        return created_at or ""


# ==================== CONTENU FACTURE ====================

def _line_label(item) -> str:
    product = item.product
    if product and product.name:
        return f"{product.name} ({product.unit})" if product.unit else product.name
    return f"Produit #{item.product_id}"


def _billed_to(customer) -> dict:
    if customer is None:
        return {
            "name": "Client Inconnu",
            "contact_name": "",
            "address": "Aucune adresse renseignée",
            "phone": "",
            "email": "",
            "niu": "-",
            "rc": "-",
        }
    return {
        "name": customer.company_name or customer.name or "Client Inconnu",
        # Nom du contact seulement si distinct de la raison sociale
        "contact_name": customer.name if customer.company_name and customer.name else "",
        "address": customer.address or "Aucune adresse renseignée",
        "phone": customer.phone or "",
        "email": customer.email or "",
        "niu": customer.niu or "-",
        "rc": customer.rc or "-",
    }


def build_invoice_content(order, invoice_id: Optional[str] = None) -> dict:
    """
    Assemble le contenu d'une facture à partir d'une commande jointe
    (client + lignes + produits).

    Le total TTC est order.total_amount, ou la somme des lignes s'il est absent.
    """
    invoice_id = invoice_id_for_order(order.id, invoice_id)

    total = order.total_amount
    if total is None:
        total = calculate_order_total(order.items)

    lines = [
        {
            "label": _line_label(item),
            "unit_price": format_price(item.unit_price),
            "quantity": item.quantity,
            "total": format_price(item.quantity * item.unit_price),
        }
        for item in order.items
    ]

    logger.info(f"Facture {invoice_id}: {len(lines)} lignes, total {total}")

    return {
        "invoice_id": invoice_id,
        "number": invoice_display_number(invoice_id),
        "filename": invoice_filename(invoice_id),
        "issue_date": format_issue_date(order.created_at),
        "company": dict(COMPANY),
        "bank_details": dict(BANK_DETAILS),
        "billed_to": _billed_to(order.customer),
        "lines": lines,
        "total_amount": total,
        "total_ttc": format_price(total),
        "amount_in_words": amount_in_words_sentence(total),
        "can_mark_as_paid": can_mark_as_paid(order),
    }
