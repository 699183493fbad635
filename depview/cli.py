"""Command-line interface for depview."""

import argparse
import logging
import sys
from typing import Optional

from .app.viewer import ViewerApp
from .cli_builder import build_arg_parser
from .config import ViewConfig
from .formatters.output import OutputFormatter
from .screen.backend import DrawError
from .source.demo import DemoVerification
from .source.store import VerificationStore

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(log_file: Optional[str]) -> None:
    """Send logs to a file, or nowhere: stderr belongs to the full-screen view."""
    root = logging.getLogger("depview")
    if log_file:
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.setLevel(logging.DEBUG)
    else:
        handler = logging.NullHandler()
    root.addHandler(handler)


class CLI:
    """Command-line interface for depview."""

    def __init__(self):
        self.parser = build_arg_parser()

    def run(self, argv: Optional[list[str]] = None) -> int:
        """Run the CLI.

        Args:
            argv: Command-line arguments (defaults to sys.argv[1:])

        Returns:
            Exit code
        """
        args = self.parser.parse_args(argv)
        configure_logging(args.log_file)

        try:
            config = ViewConfig.from_args(args)
        except ValueError as e:
            OutputFormatter().print_error(str(e))
            return 2

        output = OutputFormatter(no_color=config.no_color)
        store = VerificationStore()
        producer = self._build_producer(args, store, config)
        app = ViewerApp(store, config)

        producer.start()
        try:
            app.run()
        except DrawError as e:
            output.print_error(str(e))
            return 1
        except KeyboardInterrupt:
            pass
        finally:
            producer.stop()

        snapshot = store.snapshot()
        output.print_summary(len(snapshot.deps), snapshot.computation_status.is_done)
        return 0

    def _build_producer(
        self, args: argparse.Namespace, store: VerificationStore, config: ViewConfig
    ) -> DemoVerification:
        return DemoVerification(
            store,
            row_count=args.demo_rows,
            delay=args.demo_delay,
            phases=config.phases,
        )


def main() -> int:
    """Main entry point."""
    cli = CLI()
    return cli.run()


if __name__ == "__main__":
    sys.exit(main())
