"""Fixed keyword tables used by the analytics rules.

All keywords are lowercase; tokens are lowercased before matching. Table
order matters: it decides which keywords are reported first.
"""

from types import MappingProxyType
from typing import Mapping

POSITIVE_KEYWORDS: tuple[str, ...] = (
    "love", "great", "excellent", "amazing", "perfect", "wonderful", "fantastic",
    "satisfied", "happy", "pleased", "impressed", "outstanding", "superb",
    "best", "top", "premium", "quality", "reliable", "trustworthy", "recommend",
)

NEGATIVE_KEYWORDS: tuple[str, ...] = (
    "hate", "terrible", "awful", "horrible", "disappointed", "frustrated",
    "angry", "upset", "annoyed", "bad", "poor", "worst", "useless", "broken",
    "expensive", "overpriced", "cheap", "unreliable", "difficult", "complicated",
)

PAIN_POINT_KEYWORDS: tuple[str, ...] = (
    "problem", "issue", "difficulty", "challenge", "struggle", "frustration",
    "confusion", "complexity", "slow", "expensive", "limited", "missing",
    "broken", "error", "bug", "defect", "fault", "weakness", "drawback",
)

OPPORTUNITY_KEYWORDS: tuple[str, ...] = (
    "improve", "enhance", "better", "upgrade", "add", "include", "expand",
    "develop", "create", "build", "implement", "optimize", "streamline",
    "simplify", "faster", "cheaper", "more", "additional", "new", "innovative",
)

PRICING_INDICATORS: tuple[str, ...] = (
    "expensive", "cheap", "affordable", "overpriced", "value", "worth",
    "cost", "price", "budget", "money", "dollar",
)

# Leaning of a pricing mention
EXPENSIVE_KEYWORDS: tuple[str, ...] = ("expensive", "overpriced", "cost")
CHEAP_KEYWORDS: tuple[str, ...] = ("cheap", "affordable", "value")

QUALITY_INDICATORS: tuple[str, ...] = (
    "quality", "fresh", "taste", "flavor", "texture", "appearance",
    "ingredients", "organic", "natural", "artificial", "preservatives",
)

# Reported per product as competitive advantages
COMPETITIVE_ADVANTAGE_KEYWORDS: tuple[str, ...] = (
    "quality", "fresh", "taste", "unique", "premium", "organic",
)

COMPETITIVE_PHRASES: tuple[str, ...] = (
    "better than", "compared to", "competitor", "alternative", "other brands",
)

# Checked in this order; the first segment wins a tie
CUSTOMER_SEGMENTS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Quality Focused", ("quality", "fresh", "ingredients")),
    ("Price Sensitive", ("expensive", "cheap", "price", "cost")),
    ("Convenience Seekers", ("quick", "fast", "easy", "convenient")),
    ("Experience Driven", ("taste", "flavor", "enjoy", "experience")),
)

PRODUCT_CATALOG: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "bakery": ("bread", "cake", "pastry", "cookie", "muffin", "croissant", "donut"),
        "beverages": ("coffee", "tea", "juice", "smoothie", "milkshake", "soda"),
        "desserts": ("ice cream", "pudding", "custard", "gelato", "sorbet"),
        "snacks": ("chips", "nuts", "crackers", "popcorn", "pretzels"),
        "meals": ("sandwich", "pizza", "pasta", "salad", "soup", "burger"),
    }
)

ALL_PRODUCTS: tuple[str, ...] = tuple(p for products in PRODUCT_CATALOG.values() for p in products)


def category_label(category: str) -> str:
    """'bakery' -> 'Bakery'."""
    return category[:1].upper() + category[1:]
