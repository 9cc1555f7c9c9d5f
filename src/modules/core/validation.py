"""Declarative request validation.

A ``Rule`` pairs a predicate with the message reported when it fails.
Rules are grouped per route into an ordered ``RuleSet``; evaluation runs
every rule (no short-circuit per field) so a single field can yield several
errors, and the resulting list keeps declaration order.

Predicates follow string-coercion semantics: the incoming value is first
rendered as a string the way a JSON client would send it (``0`` -> ``"0"``,
``False`` -> ``"false"``, missing -> ``""``) and then checked.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Dict, List, Mapping, Optional

import structlog

logger = structlog.get_logger(__name__)

PARAMS = "params"
BODY = "body"

_MISSING = object()

_NUMERIC_RE = re.compile(r"[+-]?([0-9]*[.])?[0-9]+")
_INT_RE = re.compile(r"[-+]?[0-9]+")
_BOOLEAN_STRINGS = frozenset({"true", "false", "0", "1"})


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


def as_string(value: Any) -> str:
    """Render ``value`` the way it would travel as text."""
    if value is _MISSING or value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (dict, list)):
        return "[object]"
    return str(value)


def not_empty(value: Any) -> bool:
    return as_string(value) != ""


def is_numeric(value: Any) -> bool:
    return bool(_NUMERIC_RE.fullmatch(as_string(value)))


def is_int(value: Any) -> bool:
    return bool(_INT_RE.fullmatch(as_string(value)))


def is_boolean(value: Any) -> bool:
    if isinstance(value, bool):
        return True
    if isinstance(value, int):
        return value in (0, 1)
    return isinstance(value, str) and value in _BOOLEAN_STRINGS


def is_positive(value: Any) -> bool:
    """``True`` when ``value`` is a finite number strictly greater than zero."""
    if isinstance(value, bool) or value is _MISSING or value is None:
        return False
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return False
    return number.is_finite() and number > 0


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


def renderable(value: Any) -> Any:
    """Make ``value`` safe for a strict JSON renderer.

    JSON numbers such as ``1e400`` parse to ``inf``, which cannot be
    rendered back; those are echoed as text.
    """
    if isinstance(value, float) and not math.isfinite(value):
        return as_string(value)
    if isinstance(value, dict):
        return {key: renderable(item) for key, item in value.items()}
    if isinstance(value, list):
        return [renderable(item) for item in value]
    return value


@dataclass(frozen=True)
class Rule:
    location: str
    field: str
    predicate: Callable[[Any], bool]
    message: str

    def check(self, value: Any) -> Optional[Dict[str, Any]]:
        """Return an error record, or ``None`` when the rule passes."""
        if self.predicate(value):
            return None
        error: Dict[str, Any] = {"type": "field"}
        if value is not _MISSING:
            error["value"] = renderable(value)
        error["msg"] = self.message
        error["path"] = self.field
        error["location"] = self.location
        return error


def param(field: str, predicate: Callable[[Any], bool], message: str) -> Rule:
    return Rule(PARAMS, field, predicate, message)


def body(field: str, predicate: Callable[[Any], bool], message: str) -> Rule:
    return Rule(BODY, field, predicate, message)


class RuleSet:
    """Ordered collection of rules evaluated together against one request."""

    def __init__(self, *rules: Rule) -> None:
        self.rules = tuple(rules)

    def __add__(self, other: RuleSet) -> RuleSet:
        return RuleSet(*self.rules, *other.rules)

    def __iter__(self):
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    def evaluate(
        self,
        params: Optional[Mapping[str, Any]] = None,
        data: Any = None,
    ) -> List[Dict[str, Any]]:
        """Run every rule and collect the failures in declaration order.

        A non-mapping ``data`` (e.g. a JSON array body) is treated as an
        empty body.
        """
        sources = {
            PARAMS: params or {},
            BODY: data if isinstance(data, Mapping) else {},
        }
        errors = []
        for rule in self.rules:
            value = sources[rule.location].get(rule.field, _MISSING)
            error = rule.check(value)
            if error is not None:
                errors.append(error)
        if errors:
            logger.info(
                "validation.failed",
                fields=[e["path"] for e in errors],
                count=len(errors),
            )
        return errors
