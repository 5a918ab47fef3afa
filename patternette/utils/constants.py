"""
Centralized UI constants for consistent styling across Patternette.

Symbols and styles used by the Rich tree view and CLI tables.
"""

SYMBOLS = {
    "composite": "📁 ",
    "leaf": "🍃 ",
    "leaf2": "🌿 ",
    "decorator": "🎀 ",
    "success": "[bold green]✓[/bold green] ",
    "error": "[bold red]![/bold red] ",
    "warning": "[bold yellow]⚠[/bold yellow] ",
}

STYLE = {
    "header": "bold cyan",
    "dim": "dim",
    "composite": "bold magenta",
    "leaf": "cyan",
    "leaf2": "green",
    "decorator": "yellow",
    "more": "dim",
}
