"""pos-catalog CLI エントリポイント."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from loguru import logger

from pos_catalog.adapters.osm_adapter import OSM_Adapter
from pos_catalog.config import CatalogSettings, load_settings
from pos_catalog.core.database import create_database
from pos_catalog.core.exceptions import PosCatalogError
from pos_catalog.core.export import EXPORT_FORMATS, export_catalog
from pos_catalog.core.storage import SqlitePosDataService
from pos_catalog.service import PosService


def _configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level)


def _build_service(settings: CatalogSettings) -> PosService:
    if not settings.db_path.exists():
        create_database(settings.db_path)
    return PosService(
        SqlitePosDataService(settings.db_path),
        OSM_Adapter(base_url=settings.osm_base_url),
    )


def _cmd_init_db(settings: CatalogSettings, args: argparse.Namespace) -> int:
    create_database(settings.db_path)
    return 0


def _cmd_import_osm(settings: CatalogSettings, args: argparse.Namespace) -> int:
    service = _build_service(settings)
    failed = 0
    for node_id in args.node_ids:
        try:
            pos = service.import_from_osm_node(node_id)
        except PosCatalogError as e:
            logger.error(f"Import failed for OSM node {node_id}: {e}")
            failed += 1
            continue
        print(f"{pos.id}\t{pos.name}\t{pos.type.value}\t{pos.campus.value}")
    return 1 if failed else 0


def _cmd_list(settings: CatalogSettings, args: argparse.Namespace) -> int:
    service = _build_service(settings)
    for pos in service.get_all():
        print(f"{pos.id}\t{pos.name}\t{pos.type.value}\t{pos.campus.value}\t{pos.postal_code}")
    return 0


def _cmd_export(settings: CatalogSettings, args: argparse.Namespace) -> int:
    service = _build_service(settings)
    out = export_catalog(service.get_all(), args.output, fmt=args.format)
    logger.info(f"Exported catalog: {out}")
    return 0


def _cmd_clear(settings: CatalogSettings, args: argparse.Namespace) -> int:
    if not args.yes:
        logger.error("Refusing to clear the catalog without --yes")
        return 2
    _build_service(settings).clear()
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pos-catalog", description="Campus POS catalog")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Optional YAML config file",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level override (DEBUG/INFO/WARNING/ERROR)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    init_db = subparsers.add_parser("init-db", help="Create the catalog database")
    init_db.set_defaults(handler=_cmd_init_db)

    import_osm = subparsers.add_parser("import-osm", help="Import POS from OpenStreetMap node(s)")
    import_osm.add_argument("node_ids", type=int, nargs="+", help="OpenStreetMap node ID(s)")
    import_osm.set_defaults(handler=_cmd_import_osm)

    list_cmd = subparsers.add_parser("list", help="List all POS")
    list_cmd.set_defaults(handler=_cmd_list)

    export = subparsers.add_parser("export", help="Export the catalog to a file")
    export.add_argument("--output", type=Path, required=True, help="Output file path")
    export.add_argument("--format", choices=EXPORT_FORMATS, default="csv", help="Output format")
    export.set_defaults(handler=_cmd_export)

    clear = subparsers.add_parser("clear", help="Delete ALL POS (irreversible)")
    clear.add_argument("--yes", action="store_true", help="Confirm deletion of every POS")
    clear.set_defaults(handler=_cmd_clear)

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI エントリポイント."""
    args = build_parser().parse_args(argv)
    settings = load_settings(args.config)
    _configure_logging(args.log_level.upper() if args.log_level else settings.log_level)
    return args.handler(settings, args)


if __name__ == "__main__":
    sys.exit(main())
