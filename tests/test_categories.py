import logging

import pytest

from shopify_mcp.categories import (
    ALL_CATEGORIES,
    CATEGORY_NAMES,
    ESSENTIAL,
    get_category_config,
    get_enabled_tool_count,
    resolve_enabled_categories,
)


@pytest.mark.parametrize("name", CATEGORY_NAMES)
def test_single_flag_enables_only_that_category(name):
    env = {f"ENABLE_{name.upper()}": "true"}
    assert resolve_enabled_categories(env) == [name]


def test_false_flag_activates_boolean_mode():
    env = {"ENABLE_MARKETING": "false", "ENABLE_CONTENT": "true"}
    assert resolve_enabled_categories(env) == ["content"]


def test_boolean_mode_ignores_legacy_variable():
    env = {"ENABLE_ESSENTIAL": "false", "ENABLED_TOOL_CATEGORIES": "all"}
    assert resolve_enabled_categories(env) == []


def test_flag_values_are_case_insensitive_but_only_true_counts():
    env = {"ENABLE_ESSENTIAL": "TRUE", "ENABLE_COMMERCE": "1", "ENABLE_REPORTING": "yes"}
    assert resolve_enabled_categories(env) == ["essential"]


def test_boolean_mode_keeps_catalog_order():
    env = {"ENABLE_AUTOMATION": "true", "ENABLE_ESSENTIAL": "true"}
    assert resolve_enabled_categories(env) == ["essential", "automation"]


def test_nothing_set_enables_everything_in_catalog_order():
    assert resolve_enabled_categories({}) == list(CATEGORY_NAMES)
    assert CATEGORY_NAMES == ("essential", "commerce", "marketing", "content", "advanced", "reporting", "automation")


@pytest.mark.parametrize("value", ["all", "ALL", "  all ", ""])
def test_legacy_all_and_empty(value):
    assert resolve_enabled_categories({"ENABLED_TOOL_CATEGORIES": value}) == list(CATEGORY_NAMES)


def test_legacy_none_enables_nothing():
    enabled = resolve_enabled_categories({"ENABLED_TOOL_CATEGORIES": "none"})
    assert enabled == []
    assert get_enabled_tool_count(enabled) == 0


def test_legacy_unknown_tokens_are_dropped_with_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="shopify_mcp.categories"):
        enabled = resolve_enabled_categories({"ENABLED_TOOL_CATEGORIES": "essential,bogus,commerce"})
    assert enabled == ["essential", "commerce"]
    assert "bogus" in caplog.text
    assert "Valid categories" in caplog.text


def test_legacy_tokens_are_trimmed_and_lowercased():
    env = {"ENABLED_TOOL_CATEGORIES": " Essential , ,CONTENT "}
    assert resolve_enabled_categories(env) == ["essential", "content"]


def test_legacy_duplicates_are_preserved():
    enabled = resolve_enabled_categories({"ENABLED_TOOL_CATEGORIES": "essential,essential"})
    assert enabled == ["essential", "essential"]
    assert get_enabled_tool_count(enabled) == 2 * ESSENTIAL.tool_count


def test_lookup_unknown_returns_none():
    assert get_category_config("nonexistent") is None
    assert get_category_config("essential") is ESSENTIAL


def test_tool_count_ignores_unknown_names():
    assert get_enabled_tool_count(["essential", "nope"]) == ESSENTIAL.tool_count


def test_declared_counts_and_flag_names():
    assert sum(c.tool_count for c in ALL_CATEGORIES) == 185
    assert [c.flag_var for c in ALL_CATEGORIES][0] == "ENABLE_ESSENTIAL"


def test_reads_process_environment_when_no_mapping(monkeypatch):
    for category in ALL_CATEGORIES:
        monkeypatch.delenv(category.flag_var, raising=False)
    monkeypatch.setenv("ENABLED_TOOL_CATEGORIES", "reporting")
    assert resolve_enabled_categories() == ["reporting"]
