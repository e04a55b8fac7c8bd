"""Provenance value types: where and how a type was discovered.

Only the values needed to propagate provenance are modelled here; the
scanning pipeline that produces them lives outside this package.
"""

from __future__ import annotations

from dataclasses import dataclass

# Fields mirrored from an element ClassInfo onto its array ClassInfo.
# ClassInfo.adopt_provenance_from copies exactly these.
PROVENANCE_FIELDS: tuple[str, ...] = (
    "classpath_element",
    "resource",
    "class_loader",
    "is_scanned_class",
    "is_external_class",
    "module_info",
    "package_info",
)


@dataclass(frozen=True, slots=True)
class ClasspathElement:
    """Origin artifact (directory, archive or module) a type was found in."""

    location: str
    is_module: bool = False


@dataclass(frozen=True, slots=True)
class Resource:
    """Backing resource of a scanned type within its classpath element."""

    path: str
    classpath_element: ClasspathElement | None = None


@dataclass(frozen=True, slots=True)
class ModuleInfo:
    """Owning module of a type."""

    name: str
    location: str | None = None


@dataclass(frozen=True, slots=True)
class PackageInfo:
    """Owning package of a type."""

    name: str
    module: ModuleInfo | None = None
