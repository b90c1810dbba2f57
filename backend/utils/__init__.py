from .datetime_utils import format_datetime, parse_datetime
from .validators import validate_contact_fields, ValidationResult, REQUIRED_FIELDS
from .serializers import contact_to_doc, doc_to_contact

__all__ = [
    'format_datetime', 'parse_datetime',
    'validate_contact_fields', 'ValidationResult', 'REQUIRED_FIELDS',
    'contact_to_doc', 'doc_to_contact'
]
