"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``) remain functional even
when Rich is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from flaq.exceptions import FlaqError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``FlaqError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise FlaqError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = True) -> Any:
	"""Create a Rich console instance targeting stderr (or stdout)."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback.

	Keyword arguments (``style``, ``markup``, ``end``, ...) are passed to
	Rich; the plain fallback only honours ``end``.
	"""

	def __init__(self, *, stderr: bool) -> None:
		self._stderr = stderr

	def print(self, *objects: object, **kwargs: Any) -> None:
		"""Render with Rich when available, else plain print."""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except FlaqError:
			stream = sys.stderr if self._stderr else sys.stdout
			print(*objects, file=stream, end=kwargs.get("end", "\n"))
			return
		rich_console.print(*objects, **kwargs)


console = _ConsoleProxy(stderr=True)
stdout_console = _ConsoleProxy(stderr=False)
