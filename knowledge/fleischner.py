"""
Recommendation Resolver
=======================

Follow-up recommendation text for each category produced by
models.classifier. The strings are emitted verbatim into reports and must
not be reworded.
"""

from typing import Dict

RECOMMENDATIONS: Dict[int, str] = {
    0: "No routine follow-up is indicated.",
    1: "If the patient carries a high risk for lung cancer, consider follow-up CT in 12 months.",
    2: ("CT in 6-12 months. If the patient carries a high risk for lung cancer, "
        "recommend additional CT at 18-24 months."),
    3: "CT at 3 months, PET/CT, or tissue sampling.",
    4: "CT in 6-12 months to confirm persistence, then CT every 2 years until 5 years.",
    5: ("CT in 3-6 months to confirm persistence. If unchanged and solid component "
        "remains <6mm, annual CT should be performed for 5 years."),
    6: ("CT in 3-6 months. If the patient carries a high risk for lung cancer, "
        "recommend additional CT at 18-24 months."),
    7: "CT in 3-6 months. If stable, consider CT at 2 and 4 years.",
    8: "CT in 3-6 months. Subsequent management based on the most suspicious nodule.",
}


def get_recommendation(category: int) -> str:
    """
    Look up the recommendation for a category.

    Raises:
        ValueError: If the category is outside 0..8
    """
    try:
        return RECOMMENDATIONS[category]
    except KeyError:
        raise ValueError(f"No recommendation for category {category!r}") from None
