import argparse

from loguru import logger

from opening_notifier.config import get_settings
from opening_notifier.db.database import Base, sync_engine

settings = get_settings()


def init_database():
    """初始化資料庫"""
    import opening_notifier.models  # noqa: F401

    Base.metadata.create_all(sync_engine)
    logger.info("Database initialized")


def parse_hours(text: str):
    """解析營業時間字串（除錯用）"""
    from opening_notifier.scheduling.clock import now_in_zone
    from opening_notifier.scheduling.parser import ParseFailure, parse_opening
    from opening_notifier.scheduling.timeout import compute_timeout

    now = now_in_zone(settings.zone_id)
    opening = parse_opening(text, now)
    if isinstance(opening, ParseFailure):
        logger.error(f"Could not parse {text!r}: {opening.reason}")
        return
    logger.info(f"Opening: {opening.isoformat()} (in {compute_timeout(opening, now)} ms)")


def main():
    parser = argparse.ArgumentParser(description="Opening Notifier CLI")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # init command
    subparsers.add_parser("init", help="Initialize database")

    # seed command
    seed_parser = subparsers.add_parser("seed", help="Seed the venue's days-open counter")
    seed_parser.add_argument("--days", "-d", type=int, help="Day number to announce next")

    # run command
    run_parser = subparsers.add_parser("run", help="Run the opening notification once")
    run_parser.add_argument(
        "--no-wait", action="store_true", help="Send immediately instead of waiting"
    )

    # parse command
    parse_parser = subparsers.add_parser("parse", help="Parse an hours string")
    parse_parser.add_argument("text", help='Hours text, e.g. "10am - 2am"')

    # serve command
    subparsers.add_parser("serve", help="Start API server with scheduler")

    args = parser.parse_args()

    if args.command == "init":
        init_database()
    elif args.command == "seed":
        from opening_notifier.db.seed import seed_store

        seed_store(args.days)
    elif args.command == "run":
        from opening_notifier.scheduler.jobs import run_opening_notification

        run_opening_notification(wait=not args.no_wait)
    elif args.command == "parse":
        parse_hours(args.text)
    elif args.command == "serve":
        import uvicorn

        uvicorn.run(
            "opening_notifier.main:app",
            host=settings.api_host,
            port=settings.api_port,
            reload=settings.debug,
        )
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
