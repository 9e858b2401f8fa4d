from loan_portal.core.validation import first_validation_message, format_validation_error


def test_missing_field_message():
    error = {"type": "missing", "loc": ("body", "email"), "msg": "Field required"}
    assert format_validation_error(error) == '"email" is required'


def test_extra_field_message():
    error = {"type": "extra_forbidden", "loc": ("body", "nickname"), "msg": "Extra inputs are not permitted"}
    assert format_validation_error(error) == '"nickname" is not allowed'


def test_empty_string_message():
    error = {"type": "string_too_short", "loc": ("body", "type"), "msg": "String should have at least 1 character"}
    assert format_validation_error(error) == '"type" is not allowed to be empty'


def test_other_errors_keep_pydantic_text():
    error = {
        "type": "int_parsing",
        "loc": ("body", "mobile"),
        "msg": "Input should be a valid integer, unable to parse string as an integer",
    }
    assert format_validation_error(error) == '"mobile" input should be a valid integer, unable to parse string as an integer'


def test_missing_body_message():
    error = {"type": "missing", "loc": ("body",), "msg": "Field required"}
    assert format_validation_error(error) == "request body is required"


def test_only_first_error_is_reported():
    errors = [
        {"type": "missing", "loc": ("body", "mobile"), "msg": "Field required"},
        {"type": "missing", "loc": ("body", "email"), "msg": "Field required"},
    ]
    assert first_validation_message(errors) == '"mobile" is required'


def test_no_errors_gives_generic_message():
    assert first_validation_message([]) == "Invalid request body"


def test_value_error_prefix_is_dropped():
    error = {"type": "value_error", "loc": ("body", "email"), "msg": "Value error, must be a valid email"}
    assert format_validation_error(error) == '"email" must be a valid email'
