"""Scan results and runtime type loading."""

from typegraph.scan.loader import ImportlibTypeLoader, TypeLoader, create_type_loader
from typegraph.scan.result import ScanResult

__all__ = [
    "ImportlibTypeLoader",
    "ScanResult",
    "TypeLoader",
    "create_type_loader",
]
