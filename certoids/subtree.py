"""
Subtree containment between two OID references.
"""
from typing import Optional

from certoids.builtin import DEFAULT_REGISTRY
from certoids.errors import OidParseError
from certoids.registry import OidRegistry


def subtree_of(first: str, second: str, exclusive: bool = False,
               registry: Optional[OidRegistry] = None, segment_aware: bool = False) -> bool:
    """Determine if the first OID contains the second OID.

    Both references may be dotted OIDs or registered names. A reference that
    cannot be resolved makes the result False rather than raising.

    By default containment is a plain string-prefix test on the dotted forms,
    so '1.3.6.1' contains '1.3.6.11'. Pass segment_aware=True to compare arc
    by arc instead.

    Examples:
        subtree_of('1.3.6.1', '1.3.6.1.4.1')  # True
        subtree_of('1.3.6.1', '1.3.6')        # False
        subtree_of('IANA', '1.3.6.1.4.1')     # True
        subtree_of('1.3.6.1', 'enterprises')  # True
        subtree_of('IANA', 'IANA')            # True
        subtree_of('IANA', 'IANA', True)      # False
    """
    registry = registry if registry is not None else DEFAULT_REGISTRY
    try:
        first_oid = registry.resolve(first)
        second_oid = registry.resolve(second)
    except OidParseError:
        return False

    if exclusive and first_oid == second_oid:
        return False
    if segment_aware:
        return bool(first_oid.isPrefixOf(second_oid))
    return str(second_oid).startswith(str(first_oid))
