"""
FILE: todolist/cli/commands/system.py
PURPOSE: System commands (version, help, repl)
"""

import typer

# Import shared objects from main module
# These will be available after main.py imports this module
from ..main import app, console, error_console, __version__


@app.command()
def version():
    """Show todo version."""
    console.print(f"todo v{__version__}")


@app.command()
def help():
    """Show available commands and usage."""
    console.print("\n[bold cyan]todo[/bold cyan] - Single-session terminal to-do list\n")
    console.print(f"[dim]Version {__version__}[/dim]\n")

    console.print("[bold]Usage:[/bold]")
    console.print("  todo [command] [options]")
    console.print("  todo                      [dim]# Launch interactive REPL (default)[/dim]\n")

    console.print("[bold]Commands:[/bold]")

    commands = [
        ("repl", "Launch interactive REPL", "todo repl"),
        ("ls", "List the sample tasks", "todo ls [--filter all|high|completed] [--json|--raw]"),
        ("run", "Run REPL commands from a file", "todo run plan.txt [--json]"),
        ("version", "Show version", "todo version"),
        ("help", "Show this help message", "todo help"),
    ]

    for cmd, desc, example in commands:
        console.print(f"  [green]{cmd:8}[/green] {desc}")
        console.print(f"           [dim]{example}[/dim]\n")

    console.print("[bold]Environment:[/bold]")
    console.print("  [yellow]TODOLIST_LOG_LEVEL[/yellow]    Console log level (default WARNING)")
    console.print("  [yellow]TODOLIST_LOG_FILE[/yellow]     Also write DEBUG logs to this file")
    console.print("  [yellow]TODOLIST_SEED[/yellow]         Start with the sample tasks (default 1)")
    console.print("  [yellow]TODOLIST_AUTO_RENDER[/yellow]  Redraw the list after each change (default 1)\n")

    console.print("[dim]Tasks live in memory only and are gone when todo exits.[/dim]\n")


@app.command()
def repl():
    """
    Launch interactive REPL mode.

    The REPL provides:
    - Command history (up/down arrows)
    - Autocomplete (Tab key)
    - A live task list that redraws after every change
    - Exit with Ctrl+D or type 'exit'

    Example:
        todo repl
    """
    # Import here to avoid loading REPL dependencies for one-shot commands
    from ...repl import main as repl_main

    try:
        repl_main()
    except Exception as e:
        error_console.print(f"[red]Error starting REPL:[/red] {e}")
        raise typer.Exit(1)
