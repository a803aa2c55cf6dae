"""
Schema introspection and value coercion.

Asset details have a column set owned by the database rather than by this
code, so incoming values are coerced using the reflected column types:

- numeric columns: "" / None become NULL, everything else is parsed as a number
- date columns: heterogeneous date strings are normalized to YYYY-MM-DD
- anything else is bound unchanged

Reflection runs once per (engine, table) and is cached.
"""
import logging
import math
import re
from datetime import date, datetime
from typing import Any, Dict, Optional, Set

from sqlalchemy import MetaData, Table, inspect
from sqlalchemy.types import Date, Integer, Numeric

from .exceptions import InvalidFieldError

logger = logging.getLogger(__name__)

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_DAY_FIRST = re.compile(r"^(\d{1,2})[/.-](\d{1,2})[/.-](\d{4})$")


def normalize_date(value: Any) -> Optional[str]:
    """
    Normalize a date input to an ISO calendar date string.

    Accepts date/datetime objects, YYYY-MM-DD, full ISO timestamps and
    day-first D/M/YYYY (also with '-' or '.' separators). Unrecognized input
    is logged and returns None instead of raising.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()

    text = str(value).strip()
    if not text:
        return None

    if _ISO_DATE.match(text):
        try:
            date.fromisoformat(text)
            return text
        except ValueError:
            pass
    else:
        try:
            return datetime.fromisoformat(text.replace("Z", "+00:00")).date().isoformat()
        except ValueError:
            pass

        match = _DAY_FIRST.match(text)
        if match:
            day, month, year = (int(part) for part in match.groups())
            try:
                return date(year, month, day).isoformat()
            except ValueError:
                pass

    logger.warning("Unrecognized date format: %r", value)
    return None


def parse_date(value: Any) -> Optional[date]:
    normalized = normalize_date(value)
    return date.fromisoformat(normalized) if normalized else None


def to_number(column: str, value: Any, integral: bool = False):
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise InvalidFieldError(f"'{column}' expects a number, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidFieldError(f"'{column}' expects a number, got {value!r}")
    if not math.isfinite(number):
        raise InvalidFieldError(f"'{column}' expects a finite number, got {value!r}")
    if integral:
        if not number.is_integer():
            raise InvalidFieldError(f"'{column}' expects a whole number, got {value!r}")
        return int(number)
    return number


class SchemaIntrospector:
    """Column metadata for a table, read through sqlalchemy.inspect()."""

    _columns: Dict[tuple, Dict[str, Any]] = {}
    _tables: Dict[tuple, Table] = {}

    def __init__(self, bind):
        # Sessions hand out either an Engine or a Connection; both expose .engine
        self.engine = bind.engine

    def _key(self, table_name: str) -> tuple:
        return (self.engine, table_name)

    def column_types(self, table_name: str) -> Dict[str, Any]:
        key = self._key(table_name)
        if key not in self._columns:
            inspector = inspect(self.engine)
            self._columns[key] = {c["name"]: c["type"] for c in inspector.get_columns(table_name)}
        return self._columns[key]

    def column_names(self, table_name: str) -> Set[str]:
        return set(self.column_types(table_name))

    def numeric_columns(self, table_name: str) -> Set[str]:
        return {
            name for name, col_type in self.column_types(table_name).items()
            if isinstance(col_type, (Integer, Numeric))
        }

    def date_columns(self, table_name: str) -> Set[str]:
        return {
            name for name, col_type in self.column_types(table_name).items()
            if isinstance(col_type, Date)
        }

    def table(self, table_name: str) -> Table:
        key = self._key(table_name)
        if key not in self._tables:
            self._tables[key] = Table(table_name, MetaData(), autoload_with=self.engine)
        return self._tables[key]

    def coerce(self, table_name: str, values: Dict[str, Any]) -> Dict[str, Any]:
        """Return a copy of `values` with numeric and date columns converted for binding."""
        types = self.column_types(table_name)
        coerced = {}
        for name, value in values.items():
            col_type = types.get(name)
            if isinstance(col_type, (Integer, Numeric)):
                coerced[name] = to_number(name, value, integral=isinstance(col_type, Integer))
            elif isinstance(col_type, Date):
                coerced[name] = parse_date(value)
            else:
                coerced[name] = value
        return coerced

    @classmethod
    def clear(cls):
        cls._columns.clear()
        cls._tables.clear()
