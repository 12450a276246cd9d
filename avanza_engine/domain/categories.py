"""Fixed registry of budget categories (envelopes)"""

from typing import Dict, Optional, Tuple
from avanza_engine.domain.models import Category


# Order matters: income is distributed and reported in this order
CATEGORIES: Tuple[Category, ...] = (
    Category(id="obligatorios", name="Gastos Obligatorios"),
    Category(id="emergencias", name="Fondo de Emergencias"),
    Category(id="ahorro", name="Ahorro"),
    Category(id="inversion", name="Inversión"),
    Category(id="educacion", name="Educación"),
    Category(id="diversion", name="Diversión y Ocio"),
)

_BY_ID: Dict[str, Category] = {c.id: c for c in CATEGORIES}

ESSENTIAL_CATEGORY_ID = "obligatorios"

DEFAULT_BUDGETS: Dict[str, float] = {
    "obligatorios": 0.6,
    "emergencias": 0.1,
    "ahorro": 0.1,
    "inversion": 0.1,
    "educacion": 0.05,
    "diversion": 0.05,
}


def category_ids() -> Tuple[str, ...]:
    return tuple(c.id for c in CATEGORIES)


def get_category(category_id: Optional[str]) -> Optional[Category]:
    """Look up a category by id, None when unknown"""
    if category_id is None:
        return None
    return _BY_ID.get(category_id)


def is_known_category(category_id: Optional[str]) -> bool:
    return get_category(category_id) is not None


def zeroed() -> Dict[str, float]:
    """Fresh per-category mapping with every envelope at 0, in registry order"""
    return {c.id: 0.0 for c in CATEGORIES}
