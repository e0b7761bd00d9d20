"""
SanctumPath - Entry Point

Plans the best route through a Sanctum floor from a floor snapshot, once or
every time the snapshot changes.
"""

import argparse
import logging
import os
import sys
import threading
import time

import uvicorn

from sanctumpath.hooks.base import BaseHook
from sanctumpath.planner import RoutePlanner
from sanctumpath.reporting import format_path, format_room_label
from sanctumpath.storage.models import PlanResult
from sanctumpath.storage.snapshot import SnapshotError, load_snapshot
from sanctumpath.weights.factory import create_weight_tables, load_config


class ConsoleReportHook(BaseHook):
    """Prints each plan to stdout."""

    def __init__(self, debug: bool = False) -> None:
        self.debug = debug

    def on_plan_complete(self, result: PlanResult) -> None:
        print(f"Best path: {format_path(result.path)}")
        if not self.debug:
            return
        for coordinate in sorted(result.breakdowns):
            label = format_room_label(result.breakdowns[coordinate], debug=True)
            marker = "*" if coordinate in result.path else " "
            print(f"{marker} {coordinate} cost={result.costs[coordinate]}")
            for line in label.splitlines():
                print(f"    {line}")


def main() -> None:
    """Parse arguments, load configuration, and plan the route."""
    parser = argparse.ArgumentParser(
        description="SanctumPath - best route planner for Sanctum floors"
    )
    parser.add_argument(
        "--floor",
        required=True,
        help="Path to a floor snapshot JSON file",
    )
    parser.add_argument(
        "--config",
        default="config.json",
        help="Path to configuration file (default: config.json)",
    )
    parser.add_argument(
        "--profile",
        help="Override the weight profile from config",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print the weight breakdown of every room",
    )
    parser.add_argument(
        "--watch",
        action="store_true",
        help="Re-plan whenever the snapshot file changes",
    )
    parser.add_argument(
        "--serve",
        action="store_true",
        help="Serve the latest plan over HTTP/WebSocket",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )
    args = parser.parse_args()

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )

    logger = logging.getLogger("sanctumpath")

    try:
        # The config file is optional; the stock profile applies without it
        if os.path.exists(args.config):
            config = load_config(args.config)
        else:
            logger.info(f"No configuration at {args.config}, using default weights")
            config = {}

        debug = args.debug or config.get("debug", False)
        tables = create_weight_tables(config, args.profile)

        planner = RoutePlanner(tables)
        planner.register_hook(ConsoleReportHook(debug=debug))

        serving = args.serve or "route_monitor" in config.get("hooks", [])
        if serving:
            from sanctumpath.hooks.route_monitor import RouteMonitorHook
            from sanctumpath.web.server import app as web_app

            planner.register_hook(RouteMonitorHook(debug=debug))

            web_config = config.get("web_server", {})
            web_host = web_config.get("host", "127.0.0.1")
            web_port = web_config.get("port", 8080)

            server_thread = threading.Thread(
                target=uvicorn.run,
                args=(web_app,),
                kwargs={"host": web_host, "port": web_port, "log_level": "warning"},
                daemon=True,
            )
            server_thread.start()
            logger.info(f"Route monitor available at http://{web_host}:{web_port}")

        if not args.watch:
            planner.plan(load_snapshot(args.floor))
            if serving:
                # Keep serving the plan until interrupted
                while True:
                    time.sleep(1)
            return

        if not os.path.exists(args.floor):
            raise FileNotFoundError(args.floor)

        interval = float(config.get("watch_interval", 1.0))
        last_mtime = None
        logger.info(f"Watching {args.floor} every {interval}s")
        while True:
            try:
                mtime = os.path.getmtime(args.floor)
                if mtime != last_mtime:
                    last_mtime = mtime
                    planner.plan(load_snapshot(args.floor))
            except FileNotFoundError:
                # Writers may replace the snapshot by rename
                logger.debug(f"Snapshot {args.floor} is missing, waiting for it")
            except SnapshotError as e:
                # The file may be mid-write; try again on the next change
                logger.warning(f"Skipping unreadable snapshot: {e}")
            time.sleep(interval)

    except FileNotFoundError as e:
        logger.error(f"File not found: {e}")
        sys.exit(1)
    except (SnapshotError, ValueError) as e:
        logger.error(f"Invalid input: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(0)


if __name__ == "__main__":
    main()
