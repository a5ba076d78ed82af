"""Tool category catalog and the resolver that picks enabled categories.

Tools are organized into seven categories. Operators enable them through
environment variables, either with per-category boolean flags::

    ENABLE_ESSENTIAL=true
    ENABLE_MARKETING=false

or with the legacy comma-separated list::

    ENABLED_TOOL_CATEGORIES=essential,commerce
    ENABLED_TOOL_CATEGORIES=all
    ENABLED_TOOL_CATEGORIES=none

If any boolean flag is present the legacy variable is ignored entirely.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Callable, Iterable, List, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

LEGACY_CATEGORIES_VAR = "ENABLED_TOOL_CATEGORIES"


@dataclass(frozen=True)
class CategoryConfig:
    name: str
    description: str
    tool_count: int
    modules: Tuple[str, ...]

    @property
    def flag_var(self) -> str:
        return f"ENABLE_{self.name.upper()}"


ESSENTIAL = CategoryConfig(
    name="essential",
    description="Core e-commerce operations: products, orders, customers, inventory, collections",
    tool_count=35,
    modules=(
        "shop",
        "products",
        "orders",
        "customers",
        "collections",
        "inventory",
        "locations",
        "draft-orders",
        "discounts",
        "fulfillments",
    ),
)

COMMERCE = CategoryConfig(
    name="commerce",
    description="Extended commerce: gift cards, returns, checkouts, payments, store credit, subscriptions",
    tool_count=55,
    modules=(
        "gift-cards",
        "returns",
        "checkouts",
        "payment-terms",
        "payment-customizations",
        "shopify-payments",
        "order-edits",
        "companies",
        "cash-tracking",
        "store-credit",
        "subscriptions",
        "fulfillment-constraints",
        "delivery-customizations",
        "delivery-option-generators",
        "custom-fulfillment-services",
    ),
)

MARKETING = CategoryConfig(
    name="marketing",
    description="Marketing: campaigns, markets, channels, discovery, price rules",
    tool_count=20,
    modules=(
        "marketing-campaigns",
        "markets",
        "channels",
        "discovery",
        "price-rules",
        "analytics",
        "pixels",
        "publications",
    ),
)

CONTENT = CategoryConfig(
    name="content",
    description="Content: pages, navigation, themes, files, metaobjects, translations",
    tool_count=25,
    modules=(
        "pages",
        "navigation",
        "themes",
        "files",
        "metaobjects",
        "translations",
        "locales",
        "legal-policies",
    ),
)

ADVANCED = CategoryConfig(
    name="advanced",
    description="Advanced: cart transforms, validations, audit events, custom pixels, scripts",
    tool_count=20,
    modules=(
        "cart-transforms",
        "validations",
        "audit-events",
        "custom-pixels",
        "script-tags",
        "customer-data-erasure",
        "customer-merge",
        "customer-payment-methods",
        "privacy-settings",
        "shipping",
        "product-listings",
    ),
)

REPORTING = CategoryConfig(
    name="reporting",
    description="Reporting: reports, resource feedbacks, apps",
    tool_count=15,
    modules=("reports", "resource-feedbacks", "apps"),
)

AUTOMATION = CategoryConfig(
    name="automation",
    description="Automation: inventory shipments, transfers, packing slips",
    tool_count=15,
    modules=("inventory-shipments", "inventory-transfers", "packing-slip-templates"),
)

ALL_CATEGORIES: Tuple[CategoryConfig, ...] = (
    ESSENTIAL,
    COMMERCE,
    MARKETING,
    CONTENT,
    ADVANCED,
    REPORTING,
    AUTOMATION,
)

CATEGORY_NAMES: Tuple[str, ...] = tuple(c.name for c in ALL_CATEGORIES)


def get_category_config(name: str) -> Optional[CategoryConfig]:
    """Return the catalog entry for ``name`` or None when it is unknown."""
    for category in ALL_CATEGORIES:
        if category.name == name:
            return category
    return None


def get_enabled_tool_count(
    enabled_categories: Iterable[str],
    lookup: Callable[[str], Optional[CategoryConfig]] = get_category_config,
) -> int:
    """Sum declared tool counts, once per occurrence; unknown names count zero."""
    total = 0
    for name in enabled_categories:
        category = lookup(name)
        if category is not None:
            total += category.tool_count
    return total


def _boolean_flags_present(env: Mapping[str, str]) -> bool:
    return any(env.get(c.flag_var) is not None for c in ALL_CATEGORIES)


def resolve_enabled_categories(env: Optional[Mapping[str, str]] = None) -> List[str]:
    """Compute the ordered list of enabled category names.

    Boolean flags win whenever at least one of them is set, even to "false",
    and even if that leaves nothing enabled. Otherwise the legacy list is
    parsed; unknown names are logged and dropped, duplicates are kept.
    """
    env = os.environ if env is None else env

    if _boolean_flags_present(env):
        enabled = []
        for category in ALL_CATEGORIES:
            value = env.get(category.flag_var)
            if value is not None and value.lower() == "true":
                enabled.append(category.name)
        return enabled

    raw = (env.get(LEGACY_CATEGORIES_VAR) or "").lower().strip()
    if not raw or raw == "all":
        return list(CATEGORY_NAMES)
    if raw == "none":
        return []

    requested = [token.strip() for token in raw.split(",")]
    requested = [token for token in requested if token]

    invalid = [token for token in requested if token not in CATEGORY_NAMES]
    if invalid:
        logger.warning("Invalid tool categories: %s", ", ".join(invalid))
        logger.warning("Valid categories: %s", ", ".join(CATEGORY_NAMES))

    return [token for token in requested if token in CATEGORY_NAMES]
