# main.py
"""
CLI entry point for the Zonos Graph client.

Usage:
    python main.py cartById --variables '{"id": "cart_abc"}'
    python main.py getCredentialServiceToken --schema auth \
        --variables '{"input": {"mode": "LIVE", "storeId": 3}}'
    python main.py --list
"""

import argparse
import asyncio
import json
import logging
import sys

import config
from gql_request import gql_request
from sdk import CUSTOMER_GRAPH, SCHEMAS, GraphConfigurationError, operation_names
from utils import setup_logging


def parse_headers(pairs: list[str]) -> dict[str, str]:
    """
    Turn repeated "Key=Value" arguments into a header dict.

    Raises:
        ValueError: If a pair has no "=".
    """
    headers = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise ValueError(f"Invalid header {pair!r}, expected Key=Value")
        headers[key.strip()] = value.strip()
    return headers


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Send a single operation to the Zonos Graph."
    )
    parser.add_argument(
        "operation",
        nargs="?",
        help="Operation name, e.g. cartById",
    )
    parser.add_argument(
        "--schema",
        default=CUSTOMER_GRAPH,
        choices=sorted(SCHEMAS),
        help=f"Schema the operation belongs to (default: {CUSTOMER_GRAPH})",
    )
    parser.add_argument(
        "--variables",
        default=None,
        help="Operation variables as a JSON object",
    )
    parser.add_argument(
        "--url",
        default=None,
        help=f"Endpoint URL (default: {config.GRAPHQL_BASE_URL}/<schema>/<operation>)",
    )
    parser.add_argument(
        "--header",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Extra request header, may be repeated",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List the operations of every schema and exit",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, send the operation, and print the response envelope."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.debug else logging.getLevelName(config.LOG_LEVEL)
    setup_logging(level=level)
    logger = logging.getLogger(__name__)

    if args.list:
        for schema in sorted(SCHEMAS):
            for name in operation_names(schema):
                print(f"{schema}/{name}")
        return 0

    if not args.operation:
        parser.error("operation is required unless --list is given")

    try:
        variables = json.loads(args.variables) if args.variables else None
        headers = parse_headers(args.header)
    except ValueError as e:
        logger.error("Invalid arguments: %s", e)
        print(json.dumps({"error": str(e)}), file=sys.stderr)
        return 1

    endpoint = f"{args.schema}/{args.operation}"
    logger.info("Endpoint: %s", endpoint)

    try:
        response = asyncio.run(
            gql_request(
                endpoint,
                variables=variables,
                request_headers=headers,
                custom_url=args.url,
            )
        )
    except GraphConfigurationError as e:
        logger.error("Unknown endpoint %s: %s", endpoint, e)
        print(json.dumps({"error": str(e)}), file=sys.stderr)
        return 1

    print(json.dumps(response.to_dict(), indent=2))
    return 0 if response.ok else 1


if __name__ == "__main__":
    sys.exit(main())
