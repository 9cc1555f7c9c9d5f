"""Validation rule sets for the Product routes.

Each route declares its rules in the order errors must be reported.
``price`` carries three independent rules, so a value such as ``"hola"``
fails both the numeric and the positivity check.
"""

from __future__ import annotations

from modules.core.validation import (
    RuleSet,
    body,
    is_boolean,
    is_int,
    is_numeric,
    is_positive,
    not_empty,
    param,
)

MSG_INVALID_ID = "ID no válido"
MSG_NAME_EMPTY = "El nombre del producto no puede ir vacio"
MSG_PRICE_NOT_NUMERIC = "Valor no válido"
MSG_PRICE_EMPTY = "El precio del producto no puede ir vacio"
MSG_PRICE_INVALID = "Precio no válido"
MSG_AVAILABILITY_INVALID = "Valor para disponibilidad no válido"

ID_RULES = RuleSet(
    param("id", is_int, MSG_INVALID_ID),
)

PRODUCT_BODY_RULES = RuleSet(
    body("name", not_empty, MSG_NAME_EMPTY),
    body("price", is_numeric, MSG_PRICE_NOT_NUMERIC),
    body("price", not_empty, MSG_PRICE_EMPTY),
    body("price", is_positive, MSG_PRICE_INVALID),
)

CREATE_RULES = PRODUCT_BODY_RULES

REPLACE_RULES = (
    ID_RULES
    + PRODUCT_BODY_RULES
    + RuleSet(body("availability", is_boolean, MSG_AVAILABILITY_INVALID))
)
