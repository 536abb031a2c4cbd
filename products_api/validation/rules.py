"""Declarative request validation rules.

A rule inspects one field of the request (a path parameter or a body field)
and produces at most one error. Rule sets are plain ordered lists; every rule
in a set is evaluated, so a field may collect several errors.

Checks operate on the textual form of the value: an absent field or ``null``
becomes ``""``, booleans become ``"true"``/``"false"`` and numbers are written
as JavaScript writes them (``30``, ``0.00005``, ``1e+21``). The
``greater_than_zero`` predicate is the exception and compares the raw value
numerically.
"""
import math
import re
from decimal import Decimal
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

MISSING = object()

PARAMS = "params"
BODY = "body"

_INT_RE = re.compile(r"^[-+]?(?:0|[1-9][0-9]*)$")
_NUMERIC_RE = re.compile(r"^[+-]?([0-9]*[.])?[0-9]+$")
_NUMBER_LITERAL_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")
_BOOLEAN_STRINGS = ("true", "false", "1", "0")


def _to_float(value) -> float:
    try:
        return float(value)
    except OverflowError:
        return -math.inf if value < 0 else math.inf


def _number_text(value: float) -> str:
    """Number to text the way JavaScript's String(number) writes it"""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "-Infinity" if value < 0 else "Infinity"
    if value == 0:
        return "0"
    if 1e-6 <= abs(value) < 1e21:
        if value.is_integer():
            return str(int(value))
        return format(Decimal(repr(value)), "f")
    mantissa, _, exponent = repr(value).partition("e")
    if mantissa.endswith(".0"):
        mantissa = mantissa[:-2]
    exp = int(exponent)
    return f"{mantissa}e{'+' if exp > 0 else '-'}{abs(exp)}"


def as_text(value: Any) -> str:
    if value is MISSING or value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int) and abs(value) >= 10 ** 21:
        return _number_text(_to_float(value))
    if isinstance(value, float):
        return _number_text(value)
    return str(value)


def as_number(value: Any) -> Optional[float]:
    """Loose numeric coercion; None when the value has no numeric meaning"""
    if value is MISSING:
        return None
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        return _to_float(value)
    if isinstance(value, str):
        text = value.strip()
        if text == "":
            return 0.0
        if text in ("Infinity", "+Infinity", "-Infinity"):
            return -math.inf if text.startswith("-") else math.inf
        if _NUMBER_LITERAL_RE.match(text):
            return float(text)
    return None


def as_bool(value: Any) -> bool:
    return as_text(value) in ("true", "1")


def not_empty(value: Any) -> bool:
    return as_text(value) != ""


def is_int(value: Any) -> bool:
    return bool(_INT_RE.match(as_text(value)))


def is_numeric(value: Any) -> bool:
    return bool(_NUMERIC_RE.match(as_text(value)))


def is_boolean(value: Any) -> bool:
    return as_text(value) in _BOOLEAN_STRINGS


def greater_than_zero(value: Any) -> bool:
    number = as_number(value)
    return number is not None and not math.isnan(number) and number > 0


@dataclass(frozen=True)
class Rule:
    location: str
    field: str
    check: Callable[[Any], bool]
    message: str

    def evaluate(self, params: Dict[str, Any], payload: Dict[str, Any]) -> Optional[dict]:
        source = params if self.location == PARAMS else payload
        value = source.get(self.field, MISSING)
        if self.check(value):
            return None

        error = {
            "type": "field",
            "msg": self.message,
            "path": self.field,
            "location": self.location,
        }
        if value is not MISSING:
            error["value"] = value
        return error


def param(field: str, check: Callable[[Any], bool], message: str) -> Rule:
    return Rule(PARAMS, field, check, message)


def body(field: str, check: Callable[[Any], bool], message: str) -> Rule:
    return Rule(BODY, field, check, message)


def evaluate(rules: List[Rule], params: Dict[str, Any], payload: Dict[str, Any]) -> List[dict]:
    """Run every rule and return the errors in declaration order"""
    errors = []
    for rule in rules:
        error = rule.evaluate(params, payload)
        if error is not None:
            errors.append(error)
    return errors


INVALID_ID = "ID no válido"

ID_RULES = [
    param("id", is_int, INVALID_ID),
]

CREATE_RULES = [
    body("name", not_empty, "El nombre de producto no puede ir vacío"),
    body("price", not_empty, "El precio no puede ir vacío"),
    body("price", is_numeric, "Valor no válido"),
    body("price", greater_than_zero, "Ingrese un precio válido mayor a 0"),
]

UPDATE_RULES = [
    param("id", is_int, INVALID_ID),
    body("name", not_empty, "El nombre del producto no puede ir vacío"),
    body("price", is_numeric, "Valor no válido"),
    body("price", not_empty, "El precio del producto no puede ir vacío"),
    body("price", greater_than_zero, "Precio no válido"),
    body("status", is_boolean, "Valor no válido para el estatus"),
]

# (method, path) -> rule set run before the handler; paths are relative to
# the products prefix and "/" is the collection itself
DISPATCH_TABLE = {
    ("GET", "/"): [],
    ("GET", "/{id}"): ID_RULES,
    ("POST", "/"): CREATE_RULES,
    ("PUT", "/{id}"): UPDATE_RULES,
    ("PATCH", "/{id}"): ID_RULES,
    ("DELETE", "/{id}"): ID_RULES,
}
