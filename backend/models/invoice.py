"""
Modèles de réponse - Facturation et montants en lettres
"""

from typing import List
from pydantic import BaseModel


class AmountWordsResponse(BaseModel):
    """Montant converti en toutes lettres"""
    montant: float
    montant_entier: int
    lettres: str
    lettres_majuscules: str
    phrase: str


class FormattedAmountResponse(BaseModel):
    montant: float
    formatted: str


class OrderTotalResponse(BaseModel):
    total: float
    formatted: str


class CanMarkPaidResponse(BaseModel):
    order_id: str
    status: str
    can_mark_as_paid: bool


class InvoiceLine(BaseModel):
    label: str
    unit_price: str
    quantity: float
    total: str


class BilledTo(BaseModel):
    name: str
    contact_name: str = ""
    address: str
    phone: str = ""
    email: str = ""
    niu: str
    rc: str


class InvoiceContent(BaseModel):
    """
    Contenu d'une facture, prêt pour le rendu.
    Tous les montants sont déjà formatés (ex: "75 000 FCFA").
    """
    invoice_id: str
    number: str
    filename: str
    issue_date: str
    company: dict
    bank_details: dict
    billed_to: BilledTo
    lines: List[InvoiceLine]
    total_amount: float
    total_ttc: str
    amount_in_words: str
    can_mark_as_paid: bool
