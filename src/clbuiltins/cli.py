#!/usr/bin/env python3
"""
clbuiltins command line interface

Classify builtin symbols and inspect the builtin catalog
"""

import argparse
import logging
import sys

from clbuiltins.common import CatalogError, ClassificationMiss, default_log_level, get_config, init_config


def setup_logging():
    """Configure logging from the active config"""
    logging.basicConfig(
        level=default_log_level(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def lookup_symbols(symbols: list[str]) -> int:
    """Print the FunctionInfo of each symbol"""
    from clbuiltins.registry import BuiltinRegistry

    with BuiltinRegistry() as registry:
        for symbol in symbols:
            info = registry.lookup(symbol)
            if info.is_valid:
                print(f"{symbol}: {info}")
            else:
                print(f"{symbol}: not a builtin ({registry.failure_of(symbol)})")

    return 0


def classify_names(names: list[str]) -> int:
    """Print the catalog match of each unmangled name"""
    from clbuiltins.catalog import CatalogMatcher

    matcher = CatalogMatcher()
    status = 0
    for name in names:
        try:
            print(f"{name}: {matcher.classify(name)}")
        except ClassificationMiss:
            print(f"{name}: no catalog entry")
            status = 1

    return status


def list_catalog(category: str = None) -> int:
    """List catalog entries, optionally of a single category"""
    from clbuiltins.catalog import BuiltinType, load_default_catalog

    catalog = load_default_catalog()

    if category is not None:
        try:
            wanted = BuiltinType.from_name(category)
        except ValueError as e:
            print(f"error: {e}")
            return 1

        for stem in catalog.list_by_category(wanted):
            print(catalog.get(stem))
        return 0

    for entry in sorted(catalog, key=lambda e: (e.category, e.stem)):
        print(entry)
    return 0


def show_info() -> int:
    """Show version and configuration"""
    from clbuiltins import __version__
    from clbuiltins.catalog import load_default_catalog
    from clbuiltins.common import default_catalog_path

    config = get_config()
    catalog = load_default_catalog()

    print("clbuiltins - OpenCL C builtin recognition")
    print("=" * 50)
    print(f"version: {__version__}")
    print(f"catalog: {default_catalog_path()} (version {catalog.version}, {len(catalog)} stems)")
    print(f"vector widths: {', '.join(str(w) for w in config.vector_widths)}")
    print(f"log level: {config.log_level}")
    return 0


def main(argv: list[str] = None) -> int:
    """Main entry point"""
    argv = sys.argv[1:] if argv is None else argv
    init_config(argv)
    setup_logging()

    parser = argparse.ArgumentParser(
        prog='clbuiltins',
        description='OpenCL C builtin recognition'
    )
    parser.add_argument('--config', help='config file (json5)')
    parser.add_argument('--catalog', help='builtin catalog YAML file')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'], help='logging level')

    subparsers = parser.add_subparsers(dest='command', help='available commands')

    lookup_parser = subparsers.add_parser('lookup', help='classify mangled symbols')
    lookup_parser.add_argument('symbols', nargs='+', help='symbol names, e.g. _Z11read_imagef14ocl_image2d_ro11ocl_samplerDv2_f')

    classify_parser = subparsers.add_parser('classify', help='match unmangled names against the catalog')
    classify_parser.add_argument('names', nargs='+', help='builtin names, e.g. convert_uchar4_sat_rte')

    catalog_parser = subparsers.add_parser('catalog', help='list catalog entries')
    catalog_parser.add_argument('--category', help='only entries of this category')

    subparsers.add_parser('info', help='show configuration')

    args = parser.parse_args(argv)

    try:
        if args.command == 'lookup':
            return lookup_symbols(args.symbols)
        elif args.command == 'classify':
            return classify_names(args.names)
        elif args.command == 'catalog':
            return list_catalog(args.category)
        else:
            return show_info()

    except (CatalogError, OSError) as e:
        print(f"error: failed to load catalog: {e}")
        return 1


if __name__ == '__main__':
    sys.exit(main())
