"""
Règles métier des commandes
- Total d'une commande à partir de ses lignes
- Statuts qui interdisent le passage en "payée"
"""

from typing import Any, Iterable, Optional

# Une commande déjà payée ou annulée ne peut plus être marquée payée
NON_PAYABLE_STATUSES = {"paid", "cancelled"}


def _field(obj: Any, name: str, default=None):
    """Lit un champ sur un modèle pydantic ou un dict"""
    if isinstance(obj, dict):
        return obj.get(name, default)
    return getattr(obj, name, default)


def calculate_order_total(items: Optional[Iterable[Any]]) -> float:
    """
    Somme des quantity * unit_price.
    Retourne 0 si aucune ligne.
    """
    if not items:
        return 0

    total = 0
    for item in items:
        total += (_field(item, "quantity", 0) or 0) * (_field(item, "unit_price", 0) or 0)
    return total


def can_mark_as_paid(order: Any) -> bool:
    """Vrai sauf si la commande est déjà payée ou annulée"""
    status = _field(order, "status", "") or ""
    status = getattr(status, "value", status)
    return str(status).lower() not in NON_PAYABLE_STATUSES
