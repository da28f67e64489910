#!/usr/bin/env python3
"""
Write the Catalog API OpenAPI document to a JSON file.

The document is produced by the same ``create_app`` used to serve the
API (without demo data), so client generators can run against it
without starting a server.

Usage:
    catalog-export-openapi --output ./openapi/spec.json
"""

import argparse
import json
import logging
from pathlib import Path
from typing import Optional, Sequence

from catalog_api.app.core.config import Settings
from catalog_api.app.main import create_app

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = Path("openapi") / "spec.json"


def build_openapi(settings: Optional[Settings] = None) -> dict:
    """Return the OpenAPI document of a freshly built application."""
    settings = settings or Settings(seed_data=False)
    return create_app(settings).openapi()


def write_openapi(output: Path, settings: Optional[Settings] = None) -> Path:
    output = Path(output)
    output.parent.mkdir(parents=True, exist_ok=True)
    document = build_openapi(settings)
    output.write_text(json.dumps(document, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    logger.info("OpenAPI specification written to %s", output)
    return output


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Export the Catalog API OpenAPI document.")
    ap.add_argument(
        "--output",
        "-o",
        default=str(DEFAULT_OUTPUT),
        help=f"Destination JSON file (default: {DEFAULT_OUTPUT})",
    )
    ap.add_argument("--api-prefix", help="Override the API_PREFIX the routes are mounted under")
    args = ap.parse_args(argv)

    settings = Settings(seed_data=False)
    if args.api_prefix:
        settings.api_prefix = args.api_prefix

    path = write_openapi(Path(args.output), settings)
    print(f"[+] OpenAPI specification generated at: {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
