"""Model path exports."""

from .model_path import ModelPath, parse_path, validate_path_syntax
from .path_models import NO_INDEX, PathSegment

__all__ = ["NO_INDEX", "ModelPath", "PathSegment", "parse_path", "validate_path_syntax"]
