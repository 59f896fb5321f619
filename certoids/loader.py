"""
Loading of custom OID mapping files into an OidRegistry.

Example mapping file:

    ---
    oid_mapping:
      '1.3.6.1.4.1.34380.1.2.1.1':
        shortname: 'myshortname'
        longname: 'Long name'
      '1.3.6.1.4.1.34380.1.2.1.2':
        shortname: 'myothershortname'
        longname: 'Other Long name'
"""
import os
from typing import Any, List, Optional, Tuple

import yaml

from certoids.app_logger import AppLogger
from certoids.builtin import DEFAULT_REGISTRY
from certoids.errors import OidRegistrationError, ParseError, RegistrationError
from certoids.registry import OidDefinition, OidRegistry

DEFAULT_MAP_KEY = "oid_mapping"

logger = AppLogger.get(__name__)


def _read_mapping(path: str) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f)
    except (yaml.YAMLError, OSError, UnicodeDecodeError) as e:
        raise ParseError(f"Error loading ssl custom OIDs mapping file from '{path}': {e}", path) from e


def _collect_definitions(path: str, mapping: Any, map_key: str) -> List[Tuple[str, str, str]]:
    if not isinstance(mapping, dict) or map_key not in mapping:
        raise ParseError(
            f"Error loading ssl custom OIDs mapping file from '{path}': no such index '{map_key}'", path
        )
    entries = mapping[map_key]
    if not isinstance(entries, dict):
        raise ParseError(
            f"Error loading ssl custom OIDs mapping file from '{path}': "
            f"data under index '{map_key}' must be a Hash", path
        )

    oid_defns: List[Tuple[str, str, str]] = []
    for oid, entry in entries.items():
        oid = str(oid)
        fields = entry if isinstance(entry, dict) else {}
        shortname, longname = fields.get("shortname"), fields.get("longname")
        if shortname in (None, "") or longname in (None, ""):
            raise ParseError(
                f"Error loading ssl custom OIDs mapping file from '{path}': incomplete definition of oid '{oid}'",
                path, oid
            )
        oid_defns.append((oid, shortname, longname))
    return oid_defns


def load_custom_oid_file(path: str, map_key: str = DEFAULT_MAP_KEY,
                         registry: Optional[OidRegistry] = None) -> List[OidDefinition]:
    """Parse a custom OID mapping file and register its OIDs.

    A missing or unreadable file is not an error: custom OIDs are optional,
    so nothing is registered and an empty list is returned. Every entry is
    validated before any of them is registered.

    Args:
        path: File to obtain the custom OID mapping from
        map_key: Top-level key under which the mapping is stored
        registry: Registry to extend, the process-wide one by default

    Returns:
        The definitions registered from the file

    Raises:
        ParseError: If the file is not valid YAML or the mapping is malformed
        RegistrationError: If the registry rejects one of the definitions
    """
    registry = registry if registry is not None else DEFAULT_REGISTRY
    path = os.fspath(path)
    if not (os.path.isfile(path) and os.access(path, os.R_OK)):
        logger.debug(f"Custom OID mapping file {path} not found or not readable, skipping")
        return []

    oid_defns = _collect_definitions(path, _read_mapping(path), map_key)

    registered: List[OidDefinition] = []
    try:
        for oid, shortname, longname in oid_defns:
            registered.append(registry.register(oid, shortname, longname))
    except OidRegistrationError as e:
        raise RegistrationError(
            f"Error registering ssl custom OIDs mapping from file '{path}': {e}", path
        ) from e

    logger.info(f"Loaded {len(registered)} custom OIDs from {path}")
    return registered
