#!/usr/bin/env python3
"""
Convert a transit field catalog (JSON) into OpenAPI component schemas,
written either as a full OpenAPI 3.0 document or as a bare schema map.
"""

# Version string
from . import __version__

# Command line parsing
import argparse
import logging
import sys

# Output
import os
import json
import yaml

# Core functionality
import gtfs2openapi.catalog
import gtfs2openapi.openapi
from gtfs2openapi.errors import Gtfs2OpenAPIError
from gtfs2openapi.naming import NAMING_POLICIES


def dump_document(document, output_type):
    if output_type == "json":
        return json.dumps(document, indent=2) + "\n"
    return yaml.dump(document, sort_keys=False, allow_unicode=True)


def guess_output_type(output):
    if output and os.path.splitext(output)[1].lower() == ".json":
        return "json"
    return "yaml"


def build_parser():
    parser = argparse.ArgumentParser(description="Convert a transit field catalog to OpenAPI schemas")
    parser.add_argument("catalog", help="Path to the JSON field catalog")
    parser.add_argument('-v', '--version', action='version', version='%(prog)s ' + str(__version__))
    parser.add_argument("-o", "--output", help="Output file (default: stdout)")
    parser.add_argument("--format", choices=["openapi", "schemas"], default="openapi",
                        help="Output format: openapi document (default) or bare schema map")
    parser.add_argument("--registry", choices=gtfs2openapi.openapi.REGISTRY_MODES, default="reference",
                        help="reference: emit shared definitions and $ref them (default); "
                             "inline: copy them into every field")
    parser.add_argument("--naming", choices=NAMING_POLICIES, default="singular",
                        help="Schema naming: raw asset name, camel-cased, or camel-cased and singular (default)")
    parser.add_argument("--output-type", choices=["yaml", "json"],
                        help="Serialization (default: from the output file suffix, else yaml)")
    parser.add_argument("--title", default=gtfs2openapi.openapi.DEFAULT_TITLE,
                        help="info.title of the OpenAPI document")
    parser.add_argument("--api-version", default=gtfs2openapi.openapi.DEFAULT_VERSION,
                        help="info.version of the OpenAPI document")
    parser.add_argument("--debug", action="store_true", help="Log conversion details")
    return parser


# Main module
def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    # Build the whole document before anything is written
    try:
        assets = gtfs2openapi.catalog.load_catalog(args.catalog)
        document = gtfs2openapi.openapi.convert_catalog_to_schemas(
            assets,
            registry_mode=args.registry,
            naming=args.naming,
            envelope=args.format == "openapi",
            title=args.title,
            version=args.api_version,
        )
    except Gtfs2OpenAPIError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    output_type = args.output_type or guess_output_type(args.output)
    output = dump_document(document, output_type)

    if args.output:
        os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(output)
        print(f"Wrote {args.format.upper()} to {args.output}")
    else:
        print(output, end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
