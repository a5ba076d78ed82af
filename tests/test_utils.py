from utils import mcp_text_response, to_text_content


def test_strings_pass_through():
    assert to_text_content("GraphQL Errors: []") == "GraphQL Errors: []"


def test_values_are_json_encoded():
    assert to_text_content({"name": "Café"}) == '{\n  "name": "Café"\n}'


def test_unencodable_values_fall_back_to_str():
    assert to_text_content({1, 2}) in ("{1, 2}", "{2, 1}")


def test_text_response_envelope():
    assert mcp_text_response("ok") == {"content": [{"type": "text", "text": "ok"}]}
    assert mcp_text_response("Error: x", is_error=True)["isError"] is True
