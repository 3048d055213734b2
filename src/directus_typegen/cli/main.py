#!/usr/bin/env python3
"""
directus-typegen CLI - Main entry point.

Usage:
    directus-typegen --host http://localhost:8055 --email admin@example.com --password secret
    directus-typegen --token STATIC_TOKEN --out-file src/directus.ts --type-name MyCollections
    directus-typegen --config directus-typegen.yaml --spec-out-file directus.spec.json
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
from typing import Any, List, Optional
import sys
from pathlib import Path

from pydantic import ValidationError

from .. import __version__
from ..core.errors import TypegenError
from ..core.pipeline import generate_types
from ..core.schema_types import SchemaSnapshot
from ..runtime.directus_client import DirectusClient
from .config import TypegenConfig, load_config
from .logging_config import configure_logging

logger = logging.getLogger(__name__)


async def fetch_schema(config: TypegenConfig) -> tuple[SchemaSnapshot, Optional[dict[str, Any]]]:
    """Authenticate and fetch the schema snapshot (and the OpenAPI spec if requested)."""
    async with DirectusClient(config.host, timeout=config.timeout) as client:
        if config.token:
            client.use_token(config.token)
        else:
            await client.login(config.email, config.password)

        snapshot = await client.fetch_snapshot()
        spec = await client.fetch_spec() if config.spec_out_file else None

    return snapshot, spec


def write_output(path: str, content: str) -> Path:
    """Write generated content relative to the working directory."""
    target = Path.cwd() / path
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(content, encoding="utf-8")
    return target


def cmd_generate(config: TypegenConfig) -> int:
    """Generate the TypeScript file (and the OpenAPI spec file) for a configured run."""
    try:
        config.validate()
        snapshot, spec = asyncio.run(fetch_schema(config))
        content = generate_types(snapshot, config.to_options())
    except (TypegenError, ValidationError) as e:
        logger.error(f"Generation failed: {e}")
        return 1

    try:
        out_path = write_output(config.out_file, content)
        logger.info(f"Wrote {out_path}")
        if spec is not None:
            spec_path = write_output(config.spec_out_file, json.dumps(spec, indent=2))
            logger.info(f"Wrote {spec_path}")
    except OSError as e:
        logger.error(f"Could not write output: {e}")
        return 1

    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="directus-typegen",
        description="Extract TypeScript type definitions from a live Directus server"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    parser.add_argument("--host", help="Directus server URL (default: http://0.0.0.0:8055)")
    parser.add_argument("--email", help="Admin email")
    parser.add_argument("--password", help="Admin password")
    parser.add_argument("--token", help="Static access token, instead of email/password")
    parser.add_argument("--type-name", "--typeName", dest="type_name", help="Name of the registry type (default: DirectusTypes)")
    parser.add_argument("--out-file", "--outFile", dest="out_file", help="Output file (default: directus.ts)")
    parser.add_argument("--spec-out-file", "--specOutFile", dest="spec_out_file", help="Also write the OpenAPI spec to this file")
    parser.add_argument("--legacy", action="store_true", default=None, help="No arrays in the registry type, no CollectionNames enum")
    parser.add_argument("--new-types", "--newTypes", dest="new_types", action="store_true", default=None, help="Tag datetime/json/csv fields and emit DirectusToPrimitive")
    parser.add_argument("--timeout", type=float, help="HTTP timeout in seconds (default: 30)")
    parser.add_argument("--config", "-c", help="YAML config file (default: directus-typegen.yaml if present)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    return parser


def app(args: Optional[List[str]] = None) -> int:
    """Main CLI application."""
    parser = create_parser()
    parsed = parser.parse_args(args)

    configure_logging(parsed.verbose)

    overrides = vars(parsed).copy()
    config_path = overrides.pop("config")
    overrides.pop("verbose")

    try:
        config = load_config(config_path).merge(overrides)
    except TypegenError as e:
        logger.error(str(e))
        return 1

    return cmd_generate(config)


def main() -> None:
    """Entry point for CLI."""
    sys.exit(app())


if __name__ == "__main__":
    main()
