"""View decorators shared by the API modules."""

from __future__ import annotations

from functools import wraps

from rest_framework import status
from rest_framework.response import Response

from modules.core.validation import BODY, RuleSet


def validate_request(rules: RuleSet):
    """Run ``rules`` before a DRF view method.

    Path parameters come from the URL kwargs and the body from
    ``request.data``.  Any failure short-circuits with
    ``400 {"errors": [...]}`` and the wrapped method never runs.
    """
    reads_body = any(rule.location == BODY for rule in rules)

    def decorator(view_method):
        @wraps(view_method)
        def wrapper(self, request, *args, **kwargs):
            data = request.data if reads_body else None
            errors = rules.evaluate(params=kwargs, data=data)
            if errors:
                return Response(
                    {"errors": errors}, status=status.HTTP_400_BAD_REQUEST
                )
            return view_method(self, request, *args, **kwargs)

        wrapper.rules = rules
        return wrapper

    return decorator
