"""
Go language support: grammar binding, import scanning and classification.
"""

from .document import GoDocument, load_go_language
from .imports import GENERATED_MARKER, GoImportClassifier, GoImportScanner, classify

__all__ = [
    "GoDocument",
    "load_go_language",
    "GoImportClassifier",
    "GoImportScanner",
    "classify",
    "GENERATED_MARKER",
]
