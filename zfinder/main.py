# zfinder/main.py

from pathlib import Path

import click

from zfinder.cli.main import zf


@click.group(context_settings=dict(help_option_names=['-h', '--help']))
def main():
    """
    ZFinder: pin filesystem paths and open them in the system file browser.

    Example (GUI): python -m zfinder.main gui --pin ~/Documents
    Example (CLI): python -m zfinder.main cli --help
    """
    pass


@click.command()
@click.option('-p', '--pin', 'pin_paths', multiple=True, type=click.Path(path_type=Path),
              help="A path to pin at startup. Repeat for more pins.")
@click.option('--config', type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path),
              default=None, help="Path to a custom settings.json.")
def gui(pin_paths, config):
    """Launches the pin window."""
    # Imported here so the CLI works without a display or Qt libraries loaded.
    from zfinder.gui.main_window import run_gui
    run_gui(pin_paths, config)


main.add_command(gui)
main.add_command(zf, name='cli')

if __name__ == '__main__':
    main()
