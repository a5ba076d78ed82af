from shopify_mcp.patch import Patch


def test_only_present_fields_are_kept():
    patch = Patch.from_arguments({"title": "Shirt", "vendor": None, "id": "1"}, ["title", "vendor", "tags"])
    assert patch.as_dict() == {"title": "Shirt", "vendor": None}
    assert "tags" not in patch.as_dict()


def test_falsy_values_are_present():
    patch = Patch.from_arguments({"enabled": False, "quantity": 0, "note": ""}, ["enabled", "quantity", "note"])
    assert patch.as_dict() == {"enabled": False, "quantity": 0, "note": ""}


def test_skip_empty_drops_blank_values_but_not_false_or_zero():
    args = {"a": None, "b": "", "c": [], "d": {}, "e": False, "f": 0, "g": "x"}
    patch = Patch.from_arguments(args, list(args), skip_empty=True)
    assert patch.as_dict() == {"e": False, "f": 0, "g": "x"}


def test_rename():
    patch = Patch.from_arguments({"published": True}, ["published"], rename={"published": "isPublished"})
    assert patch.as_dict() == {"isPublished": True}


def test_empty_patch():
    patch = Patch()
    assert patch.is_empty()
    assert patch.as_dict() == {}


def test_set_chains_and_as_dict_copies():
    patch = Patch().set("a", 1).set("b", 2)
    out = patch.as_dict()
    out["c"] = 3
    assert patch.as_dict() == {"a": 1, "b": 2}
    assert repr(patch) == "Patch({'a': 1, 'b': 2})"
