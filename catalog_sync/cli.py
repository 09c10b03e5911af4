"""
Command line entry point.

    catalog-sync ingest <platform>
    catalog-sync list
    catalog-sync search [--text TEXT] [--price PRICE] [--operator equal|less|more]

Results are printed to stdout as JSON. Failures print ``{"error": ...}`` and
exit with status 1.
"""
import argparse
import asyncio
import json
import logging
import sys
from typing import Optional

from catalog_sync import settings
from catalog_sync.db.config import get_supabase_client
from catalog_sync.db.repositories import CatalogProductRepository
from catalog_sync.db.services import CatalogService
from catalog_sync.platforms import PlatformRegistry
from catalog_sync.utils.logger_config import setup_logging
from catalog_sync.utils.sentry import init_sentry

logger = logging.getLogger(__name__)

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="catalog-sync", description=__doc__.strip().splitlines()[0])
    commands = parser.add_subparsers(dest="command", required=True)

    ingest = commands.add_parser("ingest", help="Fetch a platform catalog and store new products")
    ingest.add_argument("platform", help="Platform tag, e.g. shopify or vtex")

    commands.add_parser("list", help="List stored products")

    search = commands.add_parser("search", help="Search stored products")
    search.add_argument("--text", dest="search_text")
    search.add_argument("--price", type=float)
    search.add_argument("--operator", choices=["equal", "less", "more"])
    return parser

async def run(args: argparse.Namespace, service: Optional[CatalogService] = None) -> dict:
    if service is None:
        supabase = await get_supabase_client()
        service = CatalogService(CatalogProductRepository(supabase), PlatformRegistry.from_settings())

    if args.command == "ingest":
        return await service.ingest(args.platform)
    if args.command == "list":
        return await service.list_products()
    return await service.search_products(args.search_text, args.price, args.operator)

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(log_level=settings.LOG_LEVEL, log_dir=settings.LOG_DIR)
    init_sentry(
        dsn=settings.SENTRY_DSN,
        environment=settings.SENTRY_ENVIRONMENT,
        traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
        profiles_sample_rate=settings.SENTRY_PROFILES_SAMPLE_RATE,
    )

    try:
        response = asyncio.run(run(args))
    except Exception as e:
        logger.exception(f"{args.command} failed")
        print(json.dumps({"error": str(e)}))
        return 1

    print(json.dumps(response, indent=2, default=str))
    return 0

if __name__ == "__main__":
    sys.exit(main())
