# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0

"""BlockShade CLI entrypoint.

Commands are registered and lazy-loaded from here.
"""

from __future__ import annotations

import sys

from cyclopts import App, Parameter
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from blockshade import __version__
from blockshade.cli.utils import print_error
from blockshade.common import BLOCKSHADE_PREFIX, setup_logger
from blockshade.config.settings import get_settings
from blockshade.exceptions import BlockShadeError


console = Console(markup=True, emoji=True)
app = App(
    "blockshade",
    help="BlockShade: tint code blocks by the kind of construct they belong to.",
    default_parameter=Parameter(negative=()),
    version=__version__,
    console=console,
)
app.command("blockshade.cli.commands.show:show", name="show")
app.command("blockshade.cli.commands.show:decorations", name="decorations")
app.command("blockshade.cli.commands.colors:blend", name="blend")
app.command("blockshade.cli.commands.colors:categories", name="categories")


def main() -> None:
    """Main CLI entry point."""
    try:
        settings = get_settings()
        setup_logger(level=settings.log_level, rich=settings.rich_logging)
        app()
    except BlockShadeError as e:
        print_error(console, e)
        sys.exit(1)
    except ValidationError as e:
        console.print(f"{BLOCKSHADE_PREFIX} [bold red]Invalid settings:[/bold red] {escape(str(e))}")
        sys.exit(1)
    except OSError as e:
        console.print(f"{BLOCKSHADE_PREFIX} [bold red]{escape(str(e))}[/bold red]")
        sys.exit(1)
    except KeyboardInterrupt:
        console.print(f"\n{BLOCKSHADE_PREFIX} [yellow]Interrupted[/yellow]")
        sys.exit(130)


if __name__ == "__main__":
    main()
