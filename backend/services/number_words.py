"""
╔══════════════════════════════════════════════════════════════════════════════╗
║  YELELE GESTION - Montant en toutes lettres                                  ║
║                                                                              ║
║  Convertit un entier positif en français (usage: pied de facture)            ║
║                                                                              ║
║  RÈGLES:                                                                     ║
║  - Orthographe rectifiée 1990: trait d'union entre TOUS les mots             ║
║    (ex: "deux-mille-vingt-trois", "un-million")                              ║
║  - "et" pour 21, 31, 41, 51, 61, 71 (jamais 81 ni 91)                        ║
║  - "vingts"/"cents" au pluriel seulement en fin de nombre                    ║
║    ou devant million/milliard (jamais devant mille)                          ║
║  - "mille" invariable, "un" élidé devant mille et cent                       ║
║  - "million"/"milliard" gardent "un" et prennent un "s" dès deux             ║
║                                                                              ║
║  PLAFOND: 999 999 999 999 (au-delà: OutOfRangeError)                         ║
╚══════════════════════════════════════════════════════════════════════════════╝
"""

import math
from decimal import Decimal

MAX_MONTANT = 999_999_999_999

ZERO = "zéro"

# 0-16: formes irrégulières
UNITES = [
    "", "un", "deux", "trois", "quatre", "cinq", "six", "sept", "huit", "neuf",
    "dix", "onze", "douze", "treize", "quatorze", "quinze", "seize",
]

# 70 et 90 se construisent sur 60 et 80 (+ 10..19)
DIZAINES = {
    2: "vingt",
    3: "trente",
    4: "quarante",
    5: "cinquante",
    6: "soixante",
    8: "quatre-vingt",
}

# Du plus grand au plus petit
ECHELLES = [
    (1_000_000_000, "milliard"),
    (1_000_000, "million"),
    (1_000, "mille"),
]


# ════════════════════════════════════════════════════════════════════════════
# ERREURS
# ════════════════════════════════════════════════════════════════════════════

class NumberWordsError(ValueError):
    """Base des erreurs de conversion en lettres"""
    pass


class InvalidInputError(NumberWordsError):
    """Montant négatif, non entier ou d'un type non numérique"""
    pass


class OutOfRangeError(NumberWordsError):
    """Montant au-delà de MAX_MONTANT"""
    pass


# ════════════════════════════════════════════════════════════════════════════
# VALIDATION
# ════════════════════════════════════════════════════════════════════════════

def _to_int(n) -> int:
    """
    Ramène l'entrée à un int après validation.

    Accepte int, ainsi que float/Decimal à valeur entière (3.0).
    Refuse bool, str, NaN, infini, négatifs et décimaux (3.5).
    """
    if isinstance(n, bool) or not isinstance(n, (int, float, Decimal)):
        raise InvalidInputError(f"Montant invalide: {n!r} (entier attendu)")

    if isinstance(n, float) and not math.isfinite(n):
        raise InvalidInputError(f"Montant invalide: {n!r}")
    if isinstance(n, Decimal) and not n.is_finite():
        raise InvalidInputError(f"Montant invalide: {n!r}")

    if n < 0:
        raise InvalidInputError(f"Montant négatif: {n!r}")

    if n != int(n):
        raise InvalidInputError(f"Montant non entier: {n!r}")

    return int(n)


# ════════════════════════════════════════════════════════════════════════════
# CONVERSION
# ════════════════════════════════════════════════════════════════════════════

def _below_hundred(n: int, final: bool) -> str:
    """1..99. `final`: rien ne suit sauf éventuellement million/milliard"""
    if n <= 16:
        return UNITES[n]
    if n < 20:
        return f"dix-{UNITES[n - 10]}"

    dizaine, unite = divmod(n, 10)

    # 70-79 et 90-99: soixante/quatre-vingt + 10..19
    if dizaine in (7, 9):
        base = DIZAINES[dizaine - 1]
        if dizaine == 7 and unite == 1:
            return f"{base}-et-onze"
        return f"{base}-{_below_hundred(10 + unite, final)}"

    base = DIZAINES[dizaine]
    if unite == 0:
        if dizaine == 8 and final:
            return "quatre-vingts"
        return base
    if unite == 1 and dizaine != 8:
        return f"{base}-et-un"
    return f"{base}-{UNITES[unite]}"


def _below_thousand(n: int, final: bool) -> str:
    """1..999, un groupe de trois chiffres"""
    centaines, reste = divmod(n, 100)
    mots = []

    if centaines:
        if centaines > 1:
            mots.append(UNITES[centaines])
        # "deux-cents" mais "deux-cent-un", "deux-cent-mille"
        if centaines > 1 and reste == 0 and final:
            mots.append("cents")
        else:
            mots.append("cent")

    if reste:
        mots.append(_below_hundred(reste, final))

    return "-".join(mots)


def convert_amount_to_french_words(n) -> str:
    """
    Convertit un montant entier en toutes lettres (français, minuscules).

    Exemples:
        0         -> "zéro"
        21        -> "vingt-et-un"
        1500      -> "mille-cinq-cents"
        2000000   -> "deux-millions"

    Raises:
        InvalidInputError: négatif, non entier, type non numérique
        OutOfRangeError: au-delà de MAX_MONTANT
    """
    valeur = _to_int(n)

    if valeur == 0:
        return ZERO

    if valeur > MAX_MONTANT:
        raise OutOfRangeError(
            f"Montant trop grand: {valeur} (maximum {MAX_MONTANT})"
        )

    parties = []
    reste = valeur

    for taille, nom in ECHELLES:
        groupe, reste = divmod(reste, taille)
        if not groupe:
            continue

        if nom == "mille":
            # mille est invariable: "quatre-vingt-mille", "deux-cent-mille"
            if groupe > 1:
                parties.append(_below_thousand(groupe, final=False))
            parties.append(nom)
        else:
            parties.append(_below_thousand(groupe, final=True))
            parties.append(f"{nom}s" if groupe > 1 else nom)

    if reste:
        parties.append(_below_thousand(reste, final=True))

    return "-".join(parties)
