import math

import pytest

from products_api.validation.rules import (
    CREATE_RULES,
    DISPATCH_TABLE,
    ID_RULES,
    MISSING,
    UPDATE_RULES,
    as_bool,
    as_number,
    as_text,
    evaluate,
    greater_than_zero,
    is_boolean,
    is_int,
    is_numeric,
    not_empty,
)


def messages(errors):
    return [e["msg"] for e in errors]


class TestChecks:
    def test_as_text(self):
        assert as_text(MISSING) == ""
        assert as_text(None) == ""
        assert as_text(True) == "true"
        assert as_text(30.0) == "30"
        assert as_text(30.5) == "30.5"
        assert as_text("Hola") == "Hola"

    def test_not_empty(self):
        assert not_empty("Mouse")
        assert not_empty(0)
        assert not_empty(False)
        assert not not_empty("")
        assert not not_empty(None)
        assert not not_empty(MISSING)

    @pytest.mark.parametrize("value", ["1", "0", "-5", "+12", 42])
    def test_is_int_accepts(self, value):
        assert is_int(value)

    @pytest.mark.parametrize("value", ["not-valid-url", "01", "1.5", "", MISSING])
    def test_is_int_rejects(self, value):
        assert not is_int(value)

    @pytest.mark.parametrize("value", [0, 30, -300, 2.5, "30", ".5", "-1.25"])
    def test_is_numeric_accepts(self, value):
        assert is_numeric(value)

    @pytest.mark.parametrize("value", ["Hola", "", "1e5", "1.", True, MISSING])
    def test_is_numeric_rejects(self, value):
        assert not is_numeric(value)

    def test_is_boolean(self):
        assert is_boolean(True)
        assert is_boolean(False)
        assert is_boolean("true")
        assert is_boolean("0")
        assert not is_boolean("yes")
        assert not is_boolean(MISSING)

    def test_greater_than_zero_coerces_loosely(self):
        assert greater_than_zero(30)
        assert greater_than_zero("30")
        assert greater_than_zero(True)
        assert not greater_than_zero(0)
        assert not greater_than_zero(-300)
        assert not greater_than_zero("Hola")
        assert not greater_than_zero("")
        assert not greater_than_zero(None)
        assert not greater_than_zero(MISSING)

    def test_as_text_writes_numbers_like_javascript(self):
        assert as_text(0.00005) == "0.00005"
        assert as_text(0.000001) == "0.000001"
        assert as_text(1e-7) == "1e-7"
        assert as_text(-2.5e-8) == "-2.5e-8"
        assert as_text(1e20) == "100000000000000000000"
        assert as_text(1e21) == "1e+21"
        assert as_text(1.5e300) == "1.5e+300"
        assert as_text(10 ** 21) == "1e+21"
        assert as_text(10 ** 400) == "Infinity"

    def test_small_and_huge_prices(self):
        assert is_numeric(0.00005)
        assert greater_than_zero(0.00005)
        assert not is_numeric(1e21)
        assert not is_numeric(10 ** 400)
        assert greater_than_zero(10 ** 400)
        assert as_number(10 ** 400) == math.inf
        assert as_number(-(10 ** 400)) == -math.inf

    def test_as_number_and_as_bool(self):
        assert as_number("12.5") == 12.5
        assert as_number([1]) is None
        assert as_bool("true") is True
        assert as_bool(1) is True
        assert as_bool("0") is False
        assert as_bool(False) is False


class TestRuleSets:
    def test_empty_create_body_reports_four_errors(self):
        errors = evaluate(CREATE_RULES, {}, {})
        assert messages(errors) == [
            "El nombre de producto no puede ir vacío",
            "El precio no puede ir vacío",
            "Valor no válido",
            "Ingrese un precio válido mayor a 0",
        ]

    def test_zero_price_only_fails_custom_predicate(self):
        errors = evaluate(CREATE_RULES, {}, {"name": "Mouse - Testing", "price": 0})
        assert messages(errors) == ["Ingrese un precio válido mayor a 0"]

    def test_text_price_fails_format_and_predicate(self):
        errors = evaluate(CREATE_RULES, {}, {"name": "Mouse - Testing", "price": "Hola"})
        assert messages(errors) == ["Valor no válido", "Ingrese un precio válido mayor a 0"]

    def test_valid_create_body_passes(self):
        assert evaluate(CREATE_RULES, {}, {"name": "Mouse - Testing", "price": 30}) == []

    def test_empty_update_body_reports_five_errors(self):
        errors = evaluate(UPDATE_RULES, {"id": "1"}, {})
        assert len(errors) == 5
        assert errors[-1]["msg"] == "Valor no válido para el estatus"

    def test_negative_update_price(self):
        body = {"name": "Monitor curvo", "price": -300, "status": True}
        errors = evaluate(UPDATE_RULES, {"id": "1"}, body)
        assert messages(errors) == ["Precio no válido"]

    def test_error_entry_shape(self):
        [error] = evaluate(ID_RULES, {"id": "abc"}, {})
        assert error == {
            "type": "field",
            "value": "abc",
            "msg": "ID no válido",
            "path": "id",
            "location": "params",
        }

    def test_absent_field_has_no_value_key(self):
        errors = evaluate(CREATE_RULES, {}, {"price": 10})
        assert errors[0]["path"] == "name"
        assert "value" not in errors[0]

    def test_dispatch_table_covers_every_operation(self):
        assert set(DISPATCH_TABLE) == {
            ("GET", "/"),
            ("GET", "/{id}"),
            ("POST", "/"),
            ("PUT", "/{id}"),
            ("PATCH", "/{id}"),
            ("DELETE", "/{id}"),
        }
        assert DISPATCH_TABLE[("GET", "/")] == []
