#!/usr/bin/env python3
"""
Inspect the OID registry from the command line.

    certoids list
    certoids resolve pp_uuid 1.3.6.1.4.1.34380.1.1.2
    certoids subtree ppRegCertExt pp_uuid --exclusive
"""
from __future__ import annotations

import argparse
import sys

from certoids.bootstrap import bootstrap
from certoids.builtin import DEFAULT_REGISTRY
from certoids.errors import OidParseError, ParseError, RegistrationError
from certoids.loader import DEFAULT_MAP_KEY, load_custom_oid_file
from certoids.registry import OidRegistry
from certoids.subtree import subtree_of


def _cmd_list(registry: OidRegistry, args: argparse.Namespace) -> int:
    for defn in registry:
        print(f"{defn.oid:<32} {defn.short_name:<28} {defn.long_name}")
    return 0


def _cmd_resolve(registry: OidRegistry, args: argparse.Namespace) -> int:
    failed = 0
    for ref in args.refs:
        try:
            dotted = registry.canonical(ref)
        except OidParseError as e:
            print(f"{ref}: {e}", file=sys.stderr)
            failed += 1
            continue
        defn = registry.lookup(ref)
        if defn is None:
            print(f"{ref}: {dotted} (unregistered)")
        else:
            print(f"{ref}: {dotted} {defn.short_name} ({defn.long_name})")
    return 1 if failed else 0


def _cmd_subtree(registry: OidRegistry, args: argparse.Namespace) -> int:
    contained = subtree_of(args.first, args.second, args.exclusive,
                           registry=registry, segment_aware=args.segment_aware)
    print("true" if contained else "false")
    return 0 if contained else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="certoids",
        description="Resolve certificate extension OIDs and test subtree containment.",
    )
    parser.add_argument("--config", help="Settings file to bootstrap logging and custom OIDs from.")
    parser.add_argument("--custom-oid-file", help="Custom OID mapping file to load first.")
    parser.add_argument("--map-key", default=DEFAULT_MAP_KEY,
                        help=f"Top-level key of the mapping file. Default: {DEFAULT_MAP_KEY}")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="Print every registered OID.").set_defaults(func=_cmd_list)

    resolve = sub.add_parser("resolve", help="Print the dotted form and names of OID references.")
    resolve.add_argument("refs", nargs="+", help="Dotted OIDs or registered names.")
    resolve.set_defaults(func=_cmd_resolve)

    subtree = sub.add_parser("subtree", help="Test whether FIRST contains SECOND.")
    subtree.add_argument("first")
    subtree.add_argument("second")
    subtree.add_argument("--exclusive", action="store_true",
                         help="Do not consider an OID a subtree of itself.")
    subtree.add_argument("--segment-aware", action="store_true",
                         help="Compare arc by arc instead of by string prefix.")
    subtree.set_defaults(func=_cmd_subtree)
    return parser


def main(argv: list[str] | None = None, registry: OidRegistry | None = None) -> int:
    args = build_parser().parse_args(argv)
    registry = registry if registry is not None else DEFAULT_REGISTRY
    try:
        if args.config:
            bootstrap(args.config, registry=registry)
        if args.custom_oid_file:
            load_custom_oid_file(args.custom_oid_file, args.map_key, registry=registry)
    except (FileNotFoundError, ParseError, RegistrationError) as e:
        print(str(e), file=sys.stderr)
        return 2
    return int(args.func(registry, args))


if __name__ == "__main__":
    raise SystemExit(main())
