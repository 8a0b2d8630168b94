"""
Expense category labels.

Category ids are plain integers stored on transactions and budgets. This table
is the single place they are turned into display labels; ids missing from it
are kept as-is in every aggregate and shown as "Others".
"""

DEFAULT_CATEGORY_LABEL = "Others"

CATEGORY_LABELS: dict[int, str] = {
    1: "Housing",
    2: "Food",
    3: "Transportation",
    4: "Utilities",
    5: "Entertainment",
    6: "Healthcare",
    7: "Shopping",
    8: "Education",
}


def category_label(category_id: int | None) -> str:
    """Resolve a category id to its label, falling back to "Others"."""
    if category_id is None:
        return DEFAULT_CATEGORY_LABEL
    return CATEGORY_LABELS.get(category_id, DEFAULT_CATEGORY_LABEL)


def list_categories() -> list[dict]:
    return [
        {"id": category_id, "name": name}
        for category_id, name in sorted(CATEGORY_LABELS.items())
    ]
