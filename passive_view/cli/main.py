# passive_view/cli/main.py

import logging
from dataclasses import replace
from pathlib import Path
from typing import Callable, List, Optional

import click
from rich.console import Console

from passive_view.core.settings import SettingsError, load_settings
from passive_view.gui.coordinator import Coordinator
from passive_view.utils.logger import set_console_level, setup_logging

logger = logging.getLogger(__name__)


class ConsoleSurface:
    """
    A terminal stand-in for the Qt DisplaySurface. "Rendering" prints the label,
    and `tap()` plays the role of the button.
    """

    def __init__(self, out: Optional[Console] = None):
        self._out = out if out is not None else Console()
        self._text = ""
        self._tap_callback: Optional[Callable[[], None]] = None
        self.history: List[str] = []

    def set_label_text(self, text: str):
        self._text = text
        self.history.append(text)
        self._out.print(f"Label: [bold green]{text}[/bold green]")

    def label_text(self) -> str:
        return self._text

    def on_button_tap(self, callback: Callable[[], None]):
        self._tap_callback = callback

    def tap(self):
        if self._tap_callback is not None:
            self._tap_callback()


@click.command()
@click.option('-n', '--taps', type=click.IntRange(min=0), default=1, show_default=True,
              help="How many button taps to simulate.")
@click.option('--low', type=int, default=None, help="Lower bound (inclusive). Overrides the settings file.")
@click.option('--high', type=int, default=None, help="Upper bound (inclusive). Overrides the settings file.")
@click.option('--seed', type=int, default=None, help="Seed for reproducible numbers.")
@click.option('--settings', 'settings_path', type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="Path to a custom settings.json.")
def roll(taps: int, low: Optional[int], high: Optional[int], seed: Optional[int], settings_path: Optional[Path]):
    """🎲 Runs the presenter headless, tapping the button from the terminal."""
    # Logging comes first so problems reading the settings file are logged properly.
    setup_logging()
    try:
        settings = load_settings(settings_path)
    except SettingsError as e:
        raise click.ClickException(str(e))
    set_console_level(settings.log_level)

    overrides = {k: v for k, v in (("low", low), ("high", high), ("seed", seed)) if v is not None}
    settings = replace(settings, **overrides)
    if settings.low > settings.high:
        raise click.ClickException(f"Invalid range: --low {settings.low} is greater than --high {settings.high}.")

    out = Console()
    out.print(f"[bold cyan]Range:[/bold cyan] [{settings.low}, {settings.high}]  "
             f"[bold cyan]Taps:[/bold cyan] {taps}")

    surface = ConsoleSurface(out)
    coordinator = Coordinator(surface, settings)
    coordinator.start()
    try:
        for _ in range(taps):
            surface.tap()
    finally:
        coordinator.teardown()
