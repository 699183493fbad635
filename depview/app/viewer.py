"""Interactive viewer loop: keys in, one screen refresh per frame out."""

from __future__ import annotations

import logging
import time
from typing import Optional

from rich.console import Console

from ..config import ViewConfig
from ..deps.columns import build_dep_columns
from ..formatters.palette import StylePalette
from ..screen.backend import RichBackend
from ..screen.controller import VerifyScreen
from ..source.store import DataSource
from .keys import Command, KeyReader

logger = logging.getLogger(__name__)


class ViewerApp:
    """Runs the verification screen until the user quits.

    Single-threaded: the loop polls keys and redraws; the producer filling
    the data source runs elsewhere.
    """

    def __init__(
        self,
        source: DataSource,
        config: ViewConfig,
        console: Optional[Console] = None,
        keys: Optional[KeyReader] = None,
    ):
        self.source = source
        self.config = config
        self.console = console or Console(no_color=config.no_color, highlight=False)
        self.keys = keys or KeyReader()
        self.screen = VerifyScreen(
            RichBackend(self.console),
            build_dep_columns(),
            title=config.title,
            palette=StylePalette.create(config.no_color),
            phases=config.phases,
            show_header=config.show_header,
        )
        self.stop_flag = False

    def handle(self, command: Command) -> bool:
        """Apply a command. Returns True when the viewer should exit."""
        if command is Command.QUIT:
            return True
        if command is Command.LINE_UP:
            self.screen.scroll_by_lines(-1)
        elif command is Command.LINE_DOWN:
            self.screen.scroll_by_lines(1)
        elif command is Command.PAGE_UP:
            self.screen.scroll_by_pages(-1)
        elif command is Command.PAGE_DOWN:
            self.screen.scroll_by_pages(1)
        elif command is Command.TOP:
            self.screen.scroll_to_top()
        elif command is Command.BOTTOM:
            self.screen.scroll_to_bottom()
        return False

    def _main_loop(self) -> None:
        last_update = 0.0
        while not self.stop_flag:
            command = self.keys.read()
            if command is not None:
                if self.handle(command):
                    break
                self.screen.refresh(self.source)
                last_update = time.monotonic()

            now = time.monotonic()
            if now - last_update >= self.config.refresh_interval:
                last_update = now
                self.screen.refresh(self.source)

    def run(self) -> None:
        """Take over the terminal and run until quit.

        Raises:
            DrawError: If the terminal stops accepting output; the session ends
        """
        logger.info("viewer session started")
        self.keys.setup()
        try:
            with self.console.screen(hide_cursor=True):
                self._main_loop()
        finally:
            self.keys.restore()
            logger.info("viewer session stopped")
