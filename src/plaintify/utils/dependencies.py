#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/plaintify/utils/dependencies.py
"""Loading of optional third-party packages.

The renderer itself needs nothing beyond the standard library. The Markdown
adapter needs ``mistune``, installed through the ``markdown`` extra, and
loads it through ``import_dependency`` so that a missing or outdated package
surfaces as a ``DependencyError`` with an install hint instead of a bare
``ImportError``.
"""

from __future__ import annotations

import importlib
from importlib import metadata
from types import ModuleType
from typing import Optional

from packaging.specifiers import SpecifierSet
from packaging.version import InvalidVersion, Version

from plaintify.exceptions import DependencyError


def installed_version(distribution: str) -> Optional[str]:
    """Return the installed version of ``distribution``, or None if it is absent."""
    try:
        return metadata.version(distribution)
    except metadata.PackageNotFoundError:
        return None


def satisfies(version_string: str, version_spec: str) -> bool:
    """Whether ``version_string`` falls inside ``version_spec``.

    Unparseable version strings never satisfy a non-empty specifier.
    """
    if not version_spec:
        return True
    try:
        return Version(version_string) in SpecifierSet(version_spec)
    except InvalidVersion:
        return False


def import_dependency(feature: str, requirement: tuple[str, str, str]) -> ModuleType:
    """Import an optional package after checking it is present and recent enough.

    Parameters
    ----------
    feature : str
        Feature that needs the package (e.g. ``"markdown"``); used in the
        error message
    requirement : tuple of (str, str, str)
        ``(distribution_name, module_name, version_spec)``

    Returns
    -------
    ModuleType
        The imported module

    Raises
    ------
    DependencyError
        If the module cannot be imported or the installed distribution does
        not match ``version_spec``

    """
    distribution, module_name, version_spec = requirement
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise DependencyError(feature, [(distribution, version_spec)], original_import_error=e) from e

    if version_spec:
        found = installed_version(distribution)
        if found is None or not satisfies(found, version_spec):
            raise DependencyError(feature, [], version_mismatches=[(distribution, version_spec, found or "unknown")])
    return module


__all__ = ["import_dependency", "installed_version", "satisfies"]
