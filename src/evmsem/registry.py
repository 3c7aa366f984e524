"""Dynamic discovery and registry of candidate implementation modules.

Searches for files matching the pattern 'v*.py' in the implementations/
subpackage, imports them, and validates they expose a callable for every
operation in REQUIRED_OPERATIONS.
"""

import importlib
import logging
import pathlib
import re
from types import ModuleType

from .opcodes import REQUIRED_OPERATIONS

logger = logging.getLogger(__name__)

IMPLEMENTATIONS_PACKAGE = f"{__package__}.implementations"


def extract_version_from_filename(filename: str) -> int | None:
    """Extract version number from v<N>.py filename."""
    match = re.fullmatch(r'v(\d+)\.py', filename)
    return int(match.group(1)) if match else None


def missing_operations(module: ModuleType) -> list[str]:
    return [name for name in REQUIRED_OPERATIONS
            if not callable(getattr(module, name, None))]


def is_valid_implementation(module: ModuleType) -> bool:
    """Validate module has a callable for every required operation."""
    return not missing_operations(module)


def discover_implementations() -> dict[str, tuple[ModuleType, int]]:
    """
    Dynamically discover all candidate implementation modules.

    Returns:
        Dictionary mapping version identifiers (e.g., 'v1', 'v2') to tuples
        of (module, version_number). Sorted by version number ascending.

    Raises:
        RuntimeError: If no valid implementations are found
    """
    implementations: dict[str, tuple[ModuleType, int]] = {}
    impl_dir = pathlib.Path(__file__).parent.resolve() / 'implementations'

    for file_path in impl_dir.glob('v*.py'):
        version_num = extract_version_from_filename(file_path.name)
        if version_num is None:
            continue

        module_name = f"{IMPLEMENTATIONS_PACKAGE}.{file_path.stem}"
        version_key = f'v{version_num}'

        try:
            module = importlib.import_module(module_name)
        except Exception as e:
            logger.warning("Failed to import %s: %r - skipping", module_name, e)
            continue

        missing = missing_operations(module)
        if missing:
            logger.warning("%s lacks operations %s - skipping", module_name, ', '.join(missing))
            continue
        implementations[version_key] = (module, version_num)

    if not implementations:
        raise RuntimeError("No valid implementations found")

    return dict(sorted(implementations.items(), key=lambda x: x[1][1]))


_IMPLEMENTATION_REGISTRY = discover_implementations()


def get_available_versions() -> list[str]:
    """Return sorted list of available implementation version identifiers."""
    return list(_IMPLEMENTATION_REGISTRY.keys())


def get_implementation(version: str) -> ModuleType:
    """
    Get the implementation module for a given version.

    Args:
        version: Version identifier (e.g., 'v1', 'v2')

    Returns:
        The implementation module

    Raises:
        ValueError: If version is not found
    """
    if version in _IMPLEMENTATION_REGISTRY:
        return _IMPLEMENTATION_REGISTRY[version][0]
    available = ', '.join(get_available_versions())
    raise ValueError(f"Unknown implementation: {version}. Available: {available}")
