# passive_view/main.py

from pathlib import Path
from typing import Optional

import click

from passive_view.cli.main import roll


@click.group(context_settings=dict(help_option_names=['-h', '--help']))
@click.version_option(version="1.0", prog_name="Passive View Sample")
def main():
    """
    Passive View Sample: a label, a button, and a presenter in between.

    Example (GUI): python -m passive_view.main gui
    Example (terminal): python -m passive_view.main roll --taps 3
    """
    pass


@click.command()
@click.option('--settings', 'settings_path', type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="Path to a custom settings.json.")
def gui(settings_path: Optional[Path]):
    """🎨 Launches the graphical user interface."""
    # Imported lazily so the terminal command works without a display.
    from passive_view.core.settings import SettingsError
    from passive_view.gui.main_window import run_gui
    try:
        run_gui(settings_path)
    except SettingsError as e:
        raise click.ClickException(str(e))


main.add_command(gui)
main.add_command(roll)

if __name__ == '__main__':
    main()
