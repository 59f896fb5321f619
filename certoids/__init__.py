"""Certificate extension OID registry."""

from certoids.builtin import DEFAULT_REGISTRY, PUPPET_OIDS, STANDARD_OIDS, initialize_registry
from certoids.errors import OidError, OidParseError, OidRegistrationError, ParseError, RegistrationError
from certoids.loader import load_custom_oid_file
from certoids.registry import OidDefinition, OidRegistry
from certoids.subtree import subtree_of

__all__ = [
    'DEFAULT_REGISTRY', 'PUPPET_OIDS', 'STANDARD_OIDS', 'initialize_registry',
    'OidError', 'OidParseError', 'OidRegistrationError', 'ParseError', 'RegistrationError',
    'load_custom_oid_file', 'OidDefinition', 'OidRegistry', 'subtree_of',
]
