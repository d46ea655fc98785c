import argparse
import logging
import shutil
import sqlite3
import sys

import jinja2
import uvicorn

from db import Database
from seed_sample_data import seed
from settings_schema import load_settings
from web_app import create_app

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def serve(config_path: str, db_path=None, host=None, port=None) -> None:
    """Start the web server; any startup failure terminates the process."""
    try:
        settings = load_settings(config_path, db_path=db_path, host=host, port=port)
    except ValueError as e:
        configure_logging()
        logger.critical("Invalid settings: %s", e)
        sys.exit(1)
    configure_logging(settings.log_level)
    try:
        app = create_app(settings)
    except (sqlite3.Error, OSError, RuntimeError, jinja2.TemplateError) as e:
        logger.critical("Startup failed: %s", e)
        sys.exit(1)
    logger.info("Server starting on %s:%d", settings.host, settings.port)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


def init_db(db_path: str) -> None:
    Database(db_path)


def backup_db(db_path: str, backup_path: str) -> None:
    shutil.copy(db_path, backup_path)


def restore_db(backup_path: str, db_path: str) -> None:
    shutil.copy(backup_path, db_path)


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Workout tracker commands")
    sub = parser.add_subparsers(dest="cmd", required=True)

    srv = sub.add_parser("serve")
    srv.add_argument("--config", default="settings.yaml")
    srv.add_argument("--db")
    srv.add_argument("--host")
    srv.add_argument("--port", type=int)

    init = sub.add_parser("init-db")
    init.add_argument("--db", default="workouts.db")

    demo = sub.add_parser("demo")
    demo.add_argument("--db", default="workouts.db")

    bkp = sub.add_parser("backup")
    bkp.add_argument("--db", default="workouts.db")
    bkp.add_argument("--out", default="backup.db")

    rst = sub.add_parser("restore")
    rst.add_argument("--in", dest="src", default="backup.db")
    rst.add_argument("--db", default="workouts.db")

    args = parser.parse_args(argv)

    if args.cmd == "serve":
        serve(args.config, args.db, args.host, args.port)
        return
    configure_logging()
    if args.cmd == "init-db":
        init_db(args.db)
    elif args.cmd == "demo":
        count = seed(args.db)
        print(f"Inserted {count} sample workouts")
    elif args.cmd == "backup":
        backup_db(args.db, args.out)
    elif args.cmd == "restore":
        restore_db(args.src, args.db)


if __name__ == "__main__":
    main()
