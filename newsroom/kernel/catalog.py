"""
Newsroom Kernel — Category Catalog

The fixed set of topics readers can browse. Category ids are what the
`category` page carries as its navigation context.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Category:
    id: str
    name: str
    description: str


CATEGORIES: tuple[Category, ...] = (
    Category("ai", "AI", "Artificial Intelligence, Machine Learning, and Neural Networks"),
    Category("cybersecurity", "Cybersecurity", "Digital Security, Privacy, and Data Protection"),
    Category("gadgets", "Gadgets", "Latest Devices, Reviews, and Tech Hardware"),
    Category("programming", "Programming", "Software Development, Coding, and Tech Tutorials"),
    Category("startups", "Startups", "Entrepreneurship, Innovation, and Business Insights"),
)

CATEGORY_IDS: set[str] = {c.id for c in CATEGORIES}


def get_category(category_id: str) -> Category | None:
    for category in CATEGORIES:
        if category.id == category_id:
            return category
    return None
