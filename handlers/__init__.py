"""Tool modules. Each exposes ``register(server, client)``.

``MODULE_REGISTRARS`` maps the module ids used by the category catalog to
those registrars.
"""
from . import (
    analytics,
    apps,
    audit_events,
    cart_transforms,
    cash_tracking,
    channels,
    checkouts,
    collections,
    companies,
    custom_fulfillment_services,
    custom_pixels,
    customer_data_erasure,
    customer_merge,
    customer_payment_methods,
    customers,
    delivery_customizations,
    delivery_option_generators,
    discounts,
    discovery,
    draft_orders,
    files,
    fulfillment_constraints,
    fulfillments,
    gift_cards,
    inventory,
    inventory_shipments,
    inventory_transfers,
    legal_policies,
    locales,
    locations,
    marketing_campaigns,
    markets,
    metaobjects,
    navigation,
    order_edits,
    orders,
    packing_slip_templates,
    pages,
    payment_customizations,
    payment_terms,
    pixels,
    price_rules,
    privacy_settings,
    product_listings,
    products,
    publications,
    reports,
    resource_feedbacks,
    returns,
    script_tags,
    shipping,
    shop,
    shopify_payments,
    store_credit,
    subscriptions,
    themes,
    translations,
    validations,
)

_MODULES = (
    analytics, apps, audit_events, cart_transforms, cash_tracking, channels, checkouts, collections,
    companies, custom_fulfillment_services, custom_pixels, customer_data_erasure, customer_merge,
    customer_payment_methods, customers, delivery_customizations, delivery_option_generators, discounts,
    discovery, draft_orders, files, fulfillment_constraints, fulfillments, gift_cards, inventory,
    inventory_shipments, inventory_transfers, legal_policies, locales, locations, marketing_campaigns,
    markets, metaobjects, navigation, order_edits, orders, packing_slip_templates, pages,
    payment_customizations, payment_terms, pixels, price_rules, privacy_settings, product_listings,
    products, publications, reports, resource_feedbacks, returns, script_tags, shipping, shop,
    shopify_payments, store_credit, subscriptions, themes, translations, validations,
)


def module_id(module) -> str:
    """``handlers.draft_orders`` -> ``draft-orders``."""
    return module.__name__.rsplit(".", 1)[-1].replace("_", "-")


MODULE_REGISTRARS = {module_id(module): module.register for module in _MODULES}
