"""Pydantic models and error types."""

from .conditions import Conditions
from .config import EngineConfig, LabelKeyMatch
from .errors import (
    ConditionsError,
    NotFoundError,
    ResourceNotSupportedError,
    RetrievalError,
)
from .record import LabelSelector, ObjectMeta, Record

__all__ = [
    "Conditions",
    "ConditionsError",
    "EngineConfig",
    "LabelKeyMatch",
    "LabelSelector",
    "NotFoundError",
    "ObjectMeta",
    "Record",
    "ResourceNotSupportedError",
    "RetrievalError",
]
