from algorithms.params import OperationParams, is_integer, parse_params, parse_position, parse_value


def test_empty_value_is_none():
    assert parse_value("") is None
    assert parse_value("   ") is None
    assert parse_value(None) is None


def test_numeric_values():
    assert parse_value("42") == 42
    assert parse_value(" -7 ") == -7
    assert parse_value("3.0") == 3


def test_non_integer_value_kept_as_text():
    assert parse_value("abc") == "abc"
    assert parse_value("2.5") == "2.5"
    assert parse_value("inf") == "inf"


def test_position_defaults_to_zero():
    assert parse_position("") == 0
    assert parse_position(None) == 0
    assert parse_position("x") == 0
    assert parse_position("3") == 3


def test_parse_params():
    assert parse_params("15", "2") == OperationParams(value=15, position=2)
    assert parse_params() == OperationParams(value=None, position=0)


def test_is_integer():
    assert is_integer(5)
    assert is_integer(3.0)
    assert not is_integer(2.5)
    assert not is_integer(float("inf"))
    assert not is_integer(True)
    assert not is_integer("5")
    assert not is_integer(float("nan"))
    assert not is_integer(None)
