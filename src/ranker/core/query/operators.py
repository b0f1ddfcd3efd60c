# src/ranker/core/query/operators.py
from typing import Any

from sqlalchemy.sql.elements import ColumnElement

from ..exceptions import InvalidCriteriaError

# Maps filter operator names to SQLAlchemy column methods.
# For example, `minRating=3` uses the 'gte' key to call `Column.__ge__(3)`.
OPERATOR_MAP = {
    'eq': '__eq__',               # Equal
    'gte': '__ge__',              # Greater Than or Equal
    'lte': '__le__',              # Less Than or Equal
    'icontains': 'icontains',     # Case-insensitive substring
}

# Operators whose value is a LIKE pattern fragment; wildcards in it are escaped.
PATTERN_OPERATORS = {'icontains'}


def apply_operator(column: Any, operator: str, value: Any) -> ColumnElement[bool]:
    """Build `column <operator> value` as a SQL boolean expression."""
    method_name = OPERATOR_MAP.get(operator)
    if method_name is None:
        raise InvalidCriteriaError(f"Unsupported filter operator '{operator}'")

    method = getattr(column, method_name)
    if operator in PATTERN_OPERATORS:
        return method(value, autoescape=True)
    return method(value)
