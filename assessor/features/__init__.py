from .detailed import extract_detailed_features
from .extractor import extract_features

__all__ = [
    "extract_features",
    "extract_detailed_features",
]
