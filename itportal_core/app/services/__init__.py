"""
Services package initialization.
Record-level business logic for the IT portal.
"""

from .exceptions import (
    ResourceError,
    RecordNotFoundError,
    InvalidFieldError,
)
from .introspection import (
    SchemaIntrospector,
    normalize_date,
    parse_date,
)
from .resource_service import Resource, ResourceService
from .indent_service import IndentService, format_requisition_no
from .allotment_service import AllotmentService
from .summary_service import SummaryService

__all__ = [
    'ResourceError',
    'RecordNotFoundError',
    'InvalidFieldError',
    'SchemaIntrospector',
    'normalize_date',
    'parse_date',
    'Resource',
    'ResourceService',
    'IndentService',
    'format_requisition_no',
    'AllotmentService',
    'SummaryService',
]
