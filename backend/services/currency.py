"""
Service devise - Franc CFA (XAF)

Formatage des prix pour l'affichage et les factures:
    1000     -> "1 000 FCFA"
    None     -> "0 FCFA"
    nan      -> "NaN FCFA"
"""

from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Optional, Union

from config import CURRENCY_CONFIG

Number = Union[int, float, Decimal]


def format_price(amount: Optional[Number], config: Optional[dict] = None) -> str:
    """
    Formate un montant avec séparateur de milliers et symbole.

    - Arrondi au plus proche (0.5 vers le haut en valeur absolue)
    - Nombre de décimales selon la config (0 pour le FCFA)
    - Milliers séparés par une espace, décimales par une virgule
    """
    cfg = config or CURRENCY_CONFIG
    symbol = cfg["symbol"]
    decimals = cfg.get("decimals", 0)

    if amount is None:
        return f"0 {symbol}"

    value = Decimal(str(amount))

    # NaN et infini: rendus tels quels, pas d'arrondi possible
    if value.is_nan():
        return f"NaN {symbol}"
    if value.is_infinite():
        return f"{'-' if value < 0 else ''}∞ {symbol}"

    quantum = Decimal(1).scaleb(-decimals)
    with localcontext() as ctx:
        # Précision suffisante pour tous les chiffres du résultat
        ctx.prec = max(ctx.prec, value.adjusted() + decimals + 2)
        value = value.quantize(quantum, rounding=ROUND_HALF_UP)

    negative = value < 0
    entier, _, fraction = f"{abs(value):f}".partition(".")

    groups = []
    while len(entier) > 3:
        groups.insert(0, entier[-3:])
        entier = entier[:-3]
    groups.insert(0, entier)

    text = " ".join(groups)
    if fraction:
        text = f"{text},{fraction}"
    if negative:
        text = f"-{text}"

    return f"{text} {symbol}"
