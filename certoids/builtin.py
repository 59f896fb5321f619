"""
Built-in OID tables and the process-wide default registry.

ASN.1 layout of the Puppet Labs arc:

    puppetCertExtensions OBJECT IDENTIFIER ::= {iso(1) identified-organization(3)
        dod(6) internet(1) private(4) enterprise(1) 34380 1}

    registeredExtensions OBJECT IDENTIFIER ::= { puppetCertExtensions 1 }
    privateExtensions OBJECT IDENTIFIER ::= { puppetCertExtensions 2 }

    pp_uuid          OBJECT IDENTIFIER ::= { registeredExtensions 1 }
    pp_instance_id   OBJECT IDENTIFIER ::= { registeredExtensions 2 }
    pp_image_name    OBJECT IDENTIFIER ::= { registeredExtensions 3 }
    pp_preshared_key OBJECT IDENTIFIER ::= { registeredExtensions 4 }

The tree under registeredExtensions belongs to Puppet Labs; privateExtensions
can be extended by enterprises through a custom OID mapping file. The short
names of the registered extensions are lowercased since they may be exposed
as variables.
"""
from typing import List, Optional, Tuple

from certoids.registry import OidRegistry

OidTriple = Tuple[str, str, str]

# Well-known arcs and X.509 extensions, named as OpenSSL names them.
STANDARD_OIDS: List[OidTriple] = [
    ("1.3", "identified-organization", "identified-organization"),
    ("1.3.6", "dod", "dod"),
    ("1.3.6.1", "internet", "internet"),
    ("1.3.6.1", "IANA", "iana"),
    ("1.3.6.1.1", "directory", "Directory"),
    ("1.3.6.1.2", "mgmt", "Management"),
    ("1.3.6.1.3", "experimental", "Experimental"),
    ("1.3.6.1.4", "private", "Private"),
    ("1.3.6.1.4.1", "enterprises", "Enterprises"),
    ("1.3.6.1.5", "security", "Security"),
    ("1.3.6.1.5.5.7", "PKIX", "PKIX"),
    ("1.3.6.1.5.5.7.1", "id-pe", "id-pe"),
    ("1.3.6.1.5.5.7.1.1", "authorityInfoAccess", "Authority Information Access"),
    ("1.3.6.1.5.5.7.3", "id-kp", "id-kp"),
    ("1.3.6.1.5.5.7.3.1", "serverAuth", "TLS Web Server Authentication"),
    ("1.3.6.1.5.5.7.3.2", "clientAuth", "TLS Web Client Authentication"),
    ("2.5", "X500", "directory services (X.500)"),
    ("2.5.29", "id-ce", "id-ce"),
    ("2.5.29.14", "subjectKeyIdentifier", "X509v3 Subject Key Identifier"),
    ("2.5.29.15", "keyUsage", "X509v3 Key Usage"),
    ("2.5.29.17", "subjectAltName", "X509v3 Subject Alternative Name"),
    ("2.5.29.19", "basicConstraints", "X509v3 Basic Constraints"),
    ("2.5.29.31", "crlDistributionPoints", "X509v3 CRL Distribution Points"),
    ("2.5.29.32", "certificatePolicies", "X509v3 Certificate Policies"),
    ("2.5.29.35", "authorityKeyIdentifier", "X509v3 Authority Key Identifier"),
    ("2.5.29.37", "extendedKeyUsage", "X509v3 Extended Key Usage"),
    ("2.16.840.1.113730", "Netscape", "Netscape Communications Corp."),
    ("2.16.840.1.113730.1.13", "nsComment", "Netscape Comment"),
]

PUPPET_OIDS: List[OidTriple] = [
    ("1.3.6.1.4.1.34380", "puppetlabs", "Puppet Labs"),
    ("1.3.6.1.4.1.34380.1", "ppCertExt", "Puppet Certificate Extension"),

    ("1.3.6.1.4.1.34380.1.1", "ppRegCertExt", "Puppet Registered Certificate Extension"),

    ("1.3.6.1.4.1.34380.1.1.1", "pp_uuid", "Puppet Node UUID"),
    ("1.3.6.1.4.1.34380.1.1.2", "pp_instance_id", "Puppet Node Instance ID"),
    ("1.3.6.1.4.1.34380.1.1.3", "pp_image_name", "Puppet Node Image Name"),
    ("1.3.6.1.4.1.34380.1.1.4", "pp_preshared_key", "Puppet Node Preshared Key"),

    ("1.3.6.1.4.1.34380.1.2", "ppPrivCertExt", "Puppet Private Certificate Extension"),
]


def initialize_registry(registry: Optional[OidRegistry] = None) -> OidRegistry:
    """Register the standard and Puppet OID tables, parents before children."""
    registry = registry if registry is not None else OidRegistry()
    for oid, short_name, long_name in STANDARD_OIDS + PUPPET_OIDS:
        registry.register(oid, short_name, long_name)
    return registry


DEFAULT_REGISTRY = initialize_registry()
