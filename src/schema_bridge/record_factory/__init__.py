"""Record factory exports."""

from .record_factory import RecordFactory, normalize_cardinality
from .record_models import GenericRecord

__all__ = ["GenericRecord", "RecordFactory", "normalize_cardinality"]
