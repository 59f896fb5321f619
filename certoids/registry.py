"""
OidRegistry: Holds OID definitions and resolves names or dotted strings to OIDs.

Definitions are keyed by short name and long name; several definitions may
share one dotted OID (e.g. ``internet`` and ``IANA``), the first registered
being the primary one for that OID. A reference is resolved by short name
first, then long name, then parsed as a dotted OID.
"""
import re
from dataclasses import dataclass
from threading import Lock
from typing import Dict, Iterator, List, Optional

from pyasn1.error import PyAsn1Error
from pyasn1.type import univ

from certoids.errors import OidParseError, OidRegistrationError

_DOTTED_RE = re.compile(r"[0-9]+(?:\.[0-9]+)+")


@dataclass(frozen=True)
class OidDefinition:
    oid: str
    short_name: str
    long_name: str


def parse_dotted(value: str) -> univ.ObjectIdentifier:
    """Parse a dotted-decimal string into an ObjectIdentifier.

    Raises:
        OidParseError: If the string is not a well-formed OID
    """
    if not isinstance(value, str) or not _DOTTED_RE.fullmatch(value):
        raise OidParseError(f"Malformed OID {value!r}", value)
    try:
        oid = univ.ObjectIdentifier(value)
    except PyAsn1Error as e:
        raise OidParseError(f"Malformed OID {value!r}: {e}", value) from e
    arcs = oid.asTuple()
    # X.660: top arc is 0, 1 or 2; below 0 and 1 only 0..39 are allowed
    if arcs[0] > 2 or (arcs[0] < 2 and arcs[1] >= 40):
        raise OidParseError(f"Malformed OID {value!r}: invalid leading arcs", value)
    return oid


class OidRegistry:
    def __init__(self) -> None:
        self._definitions: List[OidDefinition] = []
        self._by_oid: Dict[str, OidDefinition] = {}
        self._by_short_name: Dict[str, OidDefinition] = {}
        self._by_long_name: Dict[str, OidDefinition] = {}
        self._lock = Lock()

    def register(self, oid: str, short_name: str, long_name: str) -> OidDefinition:
        """Register an OID under a short and a long name.

        Registering an identical definition again is a no-op.

        Raises:
            OidRegistrationError: If the OID is malformed, a name is empty, or
                either name is already bound to another definition
        """
        for label, name in (("short name", short_name), ("long name", long_name)):
            if not isinstance(name, str) or not name:
                raise OidRegistrationError(f"Cannot register OID {oid!r}: {label} must be a non-empty string")
        try:
            dotted = str(parse_dotted(oid))
        except OidParseError as e:
            raise OidRegistrationError(f"Cannot register OID {oid!r}: {e}") from e

        defn = OidDefinition(dotted, short_name, long_name)
        with self._lock:
            if self._by_short_name.get(short_name) == defn:
                return defn
            for index, key in ((self._by_short_name, short_name), (self._by_long_name, long_name)):
                existing = index.get(key)
                if existing is not None:
                    raise OidRegistrationError(
                        f"Cannot register {dotted} ({short_name}): name {key!r} is already "
                        f"registered as {existing.oid} ({existing.short_name})"
                    )
            self._definitions.append(defn)
            self._by_oid.setdefault(dotted, defn)
            self._by_short_name[short_name] = defn
            self._by_long_name[long_name] = defn
        return defn

    def resolve(self, ref: str) -> univ.ObjectIdentifier:
        """Resolve a short name, long name or dotted string to an ObjectIdentifier.

        Raises:
            OidParseError: If the reference cannot be resolved
        """
        defn = self._named(ref)
        if defn is not None:
            return univ.ObjectIdentifier(defn.oid)
        if not isinstance(ref, str):
            raise OidParseError(f"Cannot resolve OID reference {ref!r}", ref)
        return parse_dotted(ref)

    def canonical(self, ref: str) -> str:
        return str(self.resolve(ref))

    def lookup(self, ref: str) -> Optional[OidDefinition]:
        """Return the definition a reference names, or None if it names none."""
        defn = self._named(ref)
        if defn is not None:
            return defn
        try:
            return self._by_oid.get(str(parse_dotted(ref)))
        except OidParseError:
            return None

    def definitions(self) -> List[OidDefinition]:
        return list(self._definitions)

    def _named(self, ref: object) -> Optional[OidDefinition]:
        if not isinstance(ref, str):
            return None
        return self._by_short_name.get(ref) or self._by_long_name.get(ref)

    def __contains__(self, ref: object) -> bool:
        return isinstance(ref, str) and self.lookup(ref) is not None

    def __iter__(self) -> Iterator[OidDefinition]:
        return iter(self.definitions())

    def __len__(self) -> int:
        return len(self._definitions)
