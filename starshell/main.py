"""Main entry point for Star Shell."""

if __name__ == "__main__" and __package__ is None:
    import sys
    from pathlib import Path

    # Add the project root to the Python path
    project_root = Path(__file__).resolve().parent.parent
    sys.path.insert(0, str(project_root))
    __package__ = "starshell"


from typing import Iterable, List, Optional

import typer
from loguru import logger
from rich.markup import escape

from starshell import BUILD_INFO, IS_BETA, __version__
from starshell.command_proxy import CommandProxy, CommandResult, ShellContext
from starshell.config import (
    ConfigurationError,
    ShellConfig,
    Theme,
    get_home_dir,
    load_configuration,
)
from starshell.logging_utils import configure_logging
from starshell.session import SessionState
from starshell.ui import console, get_renderer

app = typer.Typer(
    name="starshell",
    help="Star Shell - a small interactive shell with built-in commands",
    add_completion=False,
    no_args_is_help=False,
)


def show_welcome(theme: Theme):
    """Set the terminal title and print the welcome banner."""
    console.set_window_title(f"Star Shell v{__version__}")
    banner = f"Welcome to Star Shell v{__version__}"
    if IS_BETA:
        banner += f" {BUILD_INFO}"
    get_renderer(theme.text_color).print(banner + "\n")


def dispatch_line(proxy: CommandProxy, line: str) -> Optional[CommandResult]:
    """Dispatch one line; Ctrl-C abandons that line but keeps the session."""
    try:
        return proxy.dispatch(line)
    except KeyboardInterrupt:
        console.print()
        logger.debug("Interrupted {!r}", line)
        return None


def run_startup_commands(
    proxy: CommandProxy, commands: Iterable[str]
) -> List[Optional[CommandResult]]:
    """Dispatch each configured startup command in order."""
    results = []
    for command in commands:
        logger.debug("Running startup command {!r}", command)
        results.append(dispatch_line(proxy, command))
    return results


def read_eval_loop(proxy: CommandProxy, config: ShellConfig, theme: Theme):
    """Read lines until end of input, dispatching each one."""
    prompt = get_renderer(theme.prompt_color).text(f"{config.prompt} ")

    while True:
        try:
            line = console.input(prompt)
        except EOFError:
            console.print()
            return
        except KeyboardInterrupt:
            console.print()
            continue
        dispatch_line(proxy, line)


def handle_error(error: Exception):
    """Display a startup error."""
    console.print(f"[bold red]Error:[/bold red] {escape(str(error))}", highlight=False)


@app.command()
def main():
    """Start the interactive shell."""
    configure_logging()
    home = get_home_dir()

    try:
        config, theme = load_configuration(home)
    except ConfigurationError as e:
        handle_error(e)
        raise typer.Exit(1)

    context = ShellContext(
        config=config,
        theme=theme,
        session=SessionState.from_process(),
        home=home,
    )
    proxy = CommandProxy(context)

    show_welcome(theme)
    run_startup_commands(proxy, config.initial_commands)
    read_eval_loop(proxy, config, theme)


if __name__ == "__main__":
    app()
