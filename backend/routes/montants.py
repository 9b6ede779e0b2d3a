"""
Routes montants
- Montant en toutes lettres (pied de facture)
- Formatage FCFA
"""

from fastapi import APIRouter, HTTPException, Query
import logging
import math

from config import AMOUNT_WORDS_TEMPLATE
from models.invoice import AmountWordsResponse, FormattedAmountResponse
from services.currency import format_price
from services.invoice_text import floor_amount
from services.number_words import (
    InvalidInputError, OutOfRangeError, MAX_MONTANT, convert_amount_to_french_words,
)

logger = logging.getLogger("routes.montants")

router = APIRouter(prefix="/montants", tags=["Montants"])


@router.get("/lettres", response_model=AmountWordsResponse)
async def amount_in_words(montant: float = Query(..., description="Montant en FCFA")):
    """
    Convertit un montant en toutes lettres.
    La partie décimale est ignorée (arrondi à l'entier inférieur).
    """
    entier = floor_amount(montant)

    try:
        lettres = convert_amount_to_french_words(entier)
    except InvalidInputError as e:
        logger.warning(f"Montant refusé: {montant!r} ({e})")
        raise HTTPException(status_code=400, detail=str(e))
    except OutOfRangeError:
        logger.warning(f"Montant hors plafond: {montant!r}")
        raise HTTPException(
            status_code=422,
            detail=f"Montant trop grand (maximum {MAX_MONTANT:,} FCFA)".replace(",", " ")
        )

    majuscules = lettres.upper()
    return {
        "montant": montant,
        "montant_entier": entier,
        "lettres": lettres,
        "lettres_majuscules": majuscules,
        "phrase": AMOUNT_WORDS_TEMPLATE.format(montant=majuscules),
    }


@router.get("/format", response_model=FormattedAmountResponse)
async def formatted_amount(montant: float = Query(..., description="Montant en FCFA")):
    """Montant formaté pour affichage (ex: "1 000 FCFA")"""
    if not math.isfinite(montant):
        logger.warning(f"Montant non fini refusé: {montant!r}")
        raise HTTPException(status_code=400, detail=f"Montant invalide: {montant}")
    return {"montant": montant, "formatted": format_price(montant)}
