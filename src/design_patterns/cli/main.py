"""
Main CLI module with argument parsing and command execution.

Without arguments every category's demos run once, in catalogue order
(Creational, Structural, Behavioral), and the process exits with status 0.
"""
import argparse
import os
import sys
from typing import List, Optional

from design_patterns._package import CONSOLE_SCRIPT, DESCRIPTION
from design_patterns._version import __version__
from design_patterns.cli.formatters import format_output
from design_patterns.config.manager import ConfigurationManager, config_file_from_env
from design_patterns.config.schemas import AppConfig, LoggingConfig, LogLevel, PatternCategory
from design_patterns.demos import register_all_demos
from design_patterns.demos.registry import DemoRegistry, parse_category
from design_patterns.domain.core.exceptions import DomainException, OutputError
from design_patterns.infrastructure.logging.logger import get_logger, setup_logging
from design_patterns.infrastructure.output import ConsoleSink, OutputSink
from design_patterns.infrastructure.patterns import get_singleton


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else CONSOLE_SCRIPT,
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                              # Run every demo
  %(prog)s --category behavioral        # Run one category
  %(prog)s --demo observer --demo state # Run selected demos
  %(prog)s --list --format table        # Show the catalogue
        """,
    )

    parser.add_argument("--config", help="Configuration file path (JSON or YAML)")
    parser.add_argument(
        "--log-level",
        choices=[level.value for level in LogLevel],
        help="Override the configured logging level",
    )
    parser.add_argument(
        "--category",
        action="append",
        choices=[category.value for category in PatternCategory],
        help="Run only the demos of this category (repeatable)",
    )
    parser.add_argument("--demo", action="append", help="Run only this demo (repeatable)")
    parser.add_argument("--list", action="store_true", help="List registered demos instead of running them")
    parser.add_argument(
        "--format",
        choices=["json", "yaml", "table", "list"],
        default="table",
        help="Output format for --list",
    )
    parser.add_argument("--output", help="Write demo output to this file instead of stdout")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser.parse_args(argv)


def load_config(config_file: Optional[str]) -> AppConfig:
    """Load configuration through the process-wide configuration manager."""
    manager = get_singleton(ConfigurationManager)
    config_file = config_file or config_file_from_env()
    if config_file != manager.config_file:
        manager.use_file(config_file)
    return manager.app_config


def execute(args: argparse.Namespace, registry: DemoRegistry, app_config: AppConfig, sink: OutputSink) -> List[str]:
    """Run the demos selected by ``args`` and return their names."""
    if args.demo:
        for name in args.demo:
            registry.run_demo(name, sink, app_config.demo)
        return list(args.demo)

    if args.category:
        executed: List[str] = []
        for category in args.category:
            executed.extend(registry.run_category(parse_category(category), sink, app_config.demo))
        return executed

    return registry.run_all(sink, app_config.demo)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point. Returns the process exit status."""
    args = parse_args(argv)
    logger = get_logger(__name__)

    try:
        app_config = load_config(args.config)

        logging_config: LoggingConfig = app_config.logging
        if args.log_level:
            logging_config = logging_config.model_copy(update={"level": LogLevel(args.log_level)})
        setup_logging(logging_config)

        registry = register_all_demos()

        if args.list:
            data = {"demos": [registration.to_dict() for registration in registry.get_registrations()]}
            print(format_output(data, args.format))
            return 0

        if args.output:
            try:
                with open(args.output, "w", encoding="utf-8") as f:
                    executed = execute(args, registry, app_config, ConsoleSink(f))
            except OSError as e:
                raise OutputError(args.output, e.strerror or str(e)) from e
        else:
            executed = execute(args, registry, app_config, ConsoleSink())

        logger.info("Demo run finished", demos=len(executed))
        return 0

    except DomainException as e:
        logger.error("Demo run failed", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1


def run() -> None:
    """Console script entry point."""
    sys.exit(main())
