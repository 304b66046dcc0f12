from __future__ import annotations

import argparse
import importlib
import logging
import sys
from types import ModuleType
from typing import Optional, Sequence

from dotenv import load_dotenv

from config import get_settings_module

from .commands.dispatcher import CommandDispatcher
from .container import build_container
from .core.exceptions import MissingSalaryConfigError
from .ingestion.config import DataSourceConfig
from .payroll.controller import register as register_payroll
from .reports.controller import register as register_reports

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Send logs to stderr; stdout is reserved for report output."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))


def load_settings() -> ModuleType:
    load_dotenv(override=False)
    return importlib.import_module(get_settings_module())


def create_app(*, settings: Optional[ModuleType] = None, data_dir: Optional[str] = None) -> CommandDispatcher:
    """Load the data files, derive salaries and return a ready dispatcher.

    Raises MissingSalaryConfigError when derivation cannot run.
    """
    settings = settings or load_settings()
    data_config = DataSourceConfig.from_settings(settings, data_dir=data_dir)
    logger.debug("data files: %s", data_config)

    container = build_container(data_config=data_config)
    container.loader.load_into(container.store)
    container.payroll_service.calculate_salaries()

    dispatcher = CommandDispatcher()
    register_payroll(dispatcher, container)
    register_reports(dispatcher, container)
    return dispatcher


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Salary and working-hour reports from CSV data")
    parser.add_argument("--data-dir", type=str, default=None, help="directory holding the four CSV files")
    parser.add_argument("--log-level", type=str, default=None, help="DEBUG, INFO, WARNING, ERROR")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    settings = load_settings()
    configure_logging(args.log_level or getattr(settings, "LOG_LEVEL", "INFO"))
    logger.debug("settings=%s", settings.__name__)

    try:
        dispatcher = create_app(settings=settings, data_dir=args.data_dir)
    except MissingSalaryConfigError as e:
        logger.critical("Cannot derive salaries: %s", e)
        return 1

    try:
        dispatcher.run(sys.stdin)
    except KeyboardInterrupt:
        logger.info("Interrupted")
    return 0


if __name__ == "__main__":
    sys.exit(main())
