import logging

from shopify_mcp.categories import CategoryConfig, ESSENTIAL
from shopify_mcp.dispatch import register_enabled_categories

import handlers


class Recorder:
    def __init__(self):
        self.calls = []

    def registrar(self, module):
        def register(server, client):
            self.calls.append((module, server, client))
        return register


def _registrars(recorder, modules):
    return {module: recorder.registrar(module) for module in modules}


def test_runs_modules_in_category_order():
    rec = Recorder()
    server, client = object(), object()
    invoked = register_enabled_categories(
        server, client, ["essential"], registrars=_registrars(rec, ESSENTIAL.modules)
    )
    assert invoked == list(ESSENTIAL.modules)
    assert all(s is server and c is client for _, s, c in rec.calls)


def test_duplicate_category_registers_twice():
    rec = Recorder()
    invoked = register_enabled_categories(
        None, None, ["essential", "essential"], registrars=_registrars(rec, ESSENTIAL.modules)
    )
    assert len(invoked) == 2 * len(ESSENTIAL.modules)
    assert invoked.count("shop") == 2


def test_module_shared_by_two_categories_registers_twice():
    catalog = {
        "a": CategoryConfig("a", "", 1, ("shared", "only-a")),
        "b": CategoryConfig("b", "", 1, ("shared",)),
    }
    rec = Recorder()
    invoked = register_enabled_categories(
        None, None, ["a", "b"],
        registrars=_registrars(rec, ["shared", "only-a"]),
        lookup=catalog.get,
    )
    assert invoked == ["shared", "only-a", "shared"]


def test_unknown_category_and_missing_registrar_are_skipped(caplog):
    rec = Recorder()
    registrars = _registrars(rec, [m for m in ESSENTIAL.modules if m != "discounts"])
    with caplog.at_level(logging.WARNING, logger="shopify_mcp.dispatch"):
        invoked = register_enabled_categories(None, None, ["bogus", "essential"], registrars=registrars)
    assert "discounts" not in invoked
    assert len(invoked) == len(ESSENTIAL.modules) - 1
    assert "bogus" in caplog.text
    assert "discounts" in caplog.text


def test_empty_enabled_set_registers_nothing():
    rec = Recorder()
    assert register_enabled_categories(None, None, [], registrars=_registrars(rec, ESSENTIAL.modules)) == []
    assert rec.calls == []


def test_default_registrars_cover_every_catalog_module():
    from shopify_mcp.categories import ALL_CATEGORIES

    catalog_modules = {m for c in ALL_CATEGORIES for m in c.modules}
    assert catalog_modules == set(handlers.MODULE_REGISTRARS)
    assert handlers.MODULE_REGISTRARS["draft-orders"] is handlers.draft_orders.register
