"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) remain
functional even when Rich is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from quantcycle.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True, soft_wrap=True, emoji=False)


def escape(text: str) -> str:
	"""Escape Rich markup in *text*; identity when Rich is missing."""
	try:
		from rich.markup import escape as rich_escape
	except ModuleNotFoundError:
		return text
	return rich_escape(text)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)

	def error(self, message: str, *, hint: str | None = None) -> None:
		"""Render an error line (and optional hint) with literal text."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(f"Error: {message}", file=sys.stderr)
			if hint:
				print(f"Hint: {hint}", file=sys.stderr)
			return
		rich_console.print(f"[bold red]Error:[/bold red] {escape(message)}")
		if hint:
			rich_console.print(f"[yellow]Hint:[/yellow] {escape(hint)}")


console = _ConsoleProxy()
