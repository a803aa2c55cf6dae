"""
Generic table-backed resource
=============================
Every IT portal resource is one table with one key column. A `Resource`
describes the table; `ResourceService` runs the list/get/create/update/delete
statements for it. Writes are single statements committed immediately.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import Table, delete, func, insert, or_, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .exceptions import InvalidFieldError, RecordNotFoundError
from .introspection import SchemaIntrospector, to_number


def _plain(value):
    # Decimal would serialize as a string in response models
    return float(value) if isinstance(value, Decimal) else value


@dataclass
class Resource:
    name: str                      # URL segment under /api
    label: str                     # used in messages
    table_name: str
    key: str
    model: Optional[type] = None   # None: reflect the table, columns are database-defined
    fields: Optional[Tuple[str, ...]] = None  # writable columns; None: every column but the key
    order_by: Optional[str] = None
    descending: bool = True
    search_columns: Tuple[str, ...] = ()
    page_size: int = 0             # > 0 enables {data, total, page, pageSize} listing
    defaults: Dict[str, Any] = field(default_factory=dict)  # applied on create when blank
    aliases: Dict[str, str] = field(default_factory=dict)   # API name -> column
    blank_to_null: bool = False
    partial_update: bool = False   # False: absent fields are written as NULL
    body_key: bool = False         # also accept PUT /api/<name> with the key in the body

    @property
    def paginated(self) -> bool:
        return self.page_size > 0


class ResourceService:
    """CRUD over one `Resource`, bound to a request session."""

    def __init__(self, db: Session, resource: Resource):
        self.db = db
        self.resource = resource
        self.introspector = SchemaIntrospector(db.get_bind())

    @property
    def table(self) -> Table:
        if self.resource.model is not None:
            return self.resource.model.__table__
        return self.introspector.table(self.resource.table_name)

    @property
    def key_column(self):
        return self.table.c[self.resource.key]

    # ------------------------------------------------------------------
    # row shaping
    # ------------------------------------------------------------------

    def to_columns(self, body: Dict[str, Any]) -> Dict[str, Any]:
        aliases = self.resource.aliases
        return {aliases.get(name, name): value for name, value in body.items()}

    def to_api(self, row) -> Dict[str, Any]:
        data = {name: _plain(value) for name, value in row._mapping.items()}
        if not self.resource.aliases:
            return data
        outward = {column: name for name, column in self.resource.aliases.items()}
        return {outward.get(column, column): value for column, value in data.items()}

    def key_from_body(self, body: Dict[str, Any]):
        value = self.to_columns(body).get(self.resource.key)
        if value in (None, ""):
            raise InvalidFieldError(f"'{self.resource.key}' is required for updating.")
        return to_number(self.resource.key, value, integral=True)

    def pick_values(self, body: Dict[str, Any], full: bool) -> Dict[str, Any]:
        values = self.to_columns(body)
        res = self.resource

        if res.fields is None:
            known = self.introspector.column_names(res.table_name)
            unknown = sorted(name for name in values if name not in known)
            if unknown:
                raise InvalidFieldError(f"Unknown column(s) for {res.label}: {', '.join(unknown)}")
            values = {name: value for name, value in values.items() if name != res.key}
        elif full:
            values = {name: values.get(name) for name in res.fields}
        else:
            values = {name: values[name] for name in res.fields if name in values}

        if res.blank_to_null:
            values = {name: (None if value == "" else value) for name, value in values.items()}
        return values

    def prepare_create(self, body: Dict[str, Any]) -> Dict[str, Any]:
        values = self.pick_values(body, full=self.resource.fields is not None)
        for name, default in self.resource.defaults.items():
            if values.get(name) in (None, ""):
                values[name] = default() if callable(default) else default
        return self.introspector.coerce(self.resource.table_name, values)

    def prepare_update(self, body: Dict[str, Any]) -> Dict[str, Any]:
        full = self.resource.fields is not None and not self.resource.partial_update
        values = self.pick_values(body, full=full)
        if not values:
            raise InvalidFieldError("No fields to update")
        return self.introspector.coerce(self.resource.table_name, values)

    # ------------------------------------------------------------------
    # statements
    # ------------------------------------------------------------------

    def _ordered(self, stmt):
        column = self.table.c[self.resource.order_by or self.resource.key]
        return stmt.order_by(column.desc() if self.resource.descending else column.asc())

    def _search_clause(self, search: str):
        pattern = f"%{search}%"
        return or_(*[self.table.c[name].ilike(pattern) for name in self.resource.search_columns])

    def list_all(self) -> List[Dict[str, Any]]:
        rows = self.db.execute(self._ordered(select(self.table))).all()
        return [self.to_api(row) for row in rows]

    def list_page(self, search: str = "", page: int = 1, page_size: Optional[int] = None) -> Dict[str, Any]:
        # 0 or negative values fall back to the defaults
        page = max(page or 1, 1)
        if not page_size or page_size < 1:
            page_size = self.resource.page_size
        search = (search or "").strip()

        count_stmt = select(func.count()).select_from(self.table)
        list_stmt = self._ordered(select(self.table))
        if search and self.resource.search_columns:
            clause = self._search_clause(search)
            count_stmt = count_stmt.where(clause)
            list_stmt = list_stmt.where(clause)

        total = self.db.execute(count_stmt).scalar() or 0
        rows = self.db.execute(list_stmt.limit(page_size).offset((page - 1) * page_size)).all()
        return {
            "data": [self.to_api(row) for row in rows],
            "total": total,
            "page": page,
            "pageSize": page_size,
        }

    def get(self, key) -> Dict[str, Any]:
        row = self.db.execute(select(self.table).where(self.key_column == key)).first()
        if row is None:
            raise RecordNotFoundError(f"{self.resource.label} not found")
        return self.to_api(row)

    def _write(self, stmt):
        try:
            row = self.db.execute(stmt).first()
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        return row

    def create(self, body: Dict[str, Any]) -> Dict[str, Any]:
        values = self.prepare_create(body)
        row = self._write(insert(self.table).values(**values).returning(*self.table.c))
        return self.to_api(row)

    def update(self, key, body: Dict[str, Any]) -> Dict[str, Any]:
        values = self.prepare_update(body)
        return self.update_values(key, values)

    def update_values(self, key, values: Dict[str, Any]) -> Dict[str, Any]:
        stmt = (
            update(self.table)
            .where(self.key_column == key)
            .values(**values)
            .returning(*self.table.c)
        )
        row = self._write(stmt)
        if row is None:
            raise RecordNotFoundError(f"{self.resource.label} not found")
        return self.to_api(row)

    def delete(self, key) -> int:
        """Delete by key; returns rows affected. A missing key is not an error."""
        try:
            result = self.db.execute(delete(self.table).where(self.key_column == key))
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        return result.rowcount

