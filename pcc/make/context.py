# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Build context threaded through every make action.

The context carries:
- the session's `BuildOptions`,
- a warnings accumulator (non-fatal `MakeError`s),
- the progress sink ("Reading ...", "Writing ..."),
- `run`, which turns a raised `MakeError` into a failed `MakeResult`.

The first `MakeError` raised inside `run` aborts that action; nothing else is
caught, so programming errors still surface as tracebacks.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from pcc.make.errors import MakeError
from pcc.make.options import BuildOptions

T = TypeVar("T")

ProgressSink = Callable[[str], None]


def print_progress(message: str) -> None:
	print(message, flush=True)


@dataclass(frozen=True)
class MakeResult(Generic[T]):
	ok: bool
	value: T | None = None
	warnings: list[MakeError] = field(default_factory=list)
	error: MakeError | None = None

	def unwrap(self) -> T | None:
		if self.error is not None:
			raise self.error
		return self.value

	def to_dict(self) -> dict[str, Any]:
		return {
			"ok": self.ok,
			"warnings": [w.to_dict() for w in self.warnings],
			"error": self.error.to_dict() if self.error is not None else None,
		}


class BuildContext:
	"""
	Per-session state for make actions.

	The warnings list grows for the life of the context; create one context per
	build session rather than reusing it across sessions.
	"""

	def __init__(self, options: BuildOptions, progress: ProgressSink | None = None) -> None:
		self.options = options
		self._progress = progress if progress is not None else print_progress
		self._lock = threading.Lock()
		self._warnings: list[MakeError] = []
		# Warnings raised inside the current thread's `run` call.
		self._scope = threading.local()

	@property
	def warnings(self) -> list[MakeError]:
		with self._lock:
			return list(self._warnings)

	def warn(self, warning: MakeError) -> None:
		with self._lock:
			self._warnings.append(warning)
		scoped = getattr(self._scope, "warnings", None)
		if scoped is not None:
			scoped.append(warning)

	def progress(self, message: str) -> None:
		self._progress(message)

	@contextmanager
	def io(self, make_error: Callable[..., MakeError], path: object) -> Iterator[None]:
		"""
		Translate `OSError` raised in the block into a typed `MakeError`.

		`make_error` is one of the `pcc.make.errors` constructors
		(`cannot_read_file`, `cannot_write_file`, ...).
		"""
		try:
			yield
		except OSError as err:
			raise make_error(path, cause=err.strerror or str(err)) from err

	def run(self, action: Callable[..., T], *args: Any, **kwargs: Any) -> MakeResult[T]:
		outer = getattr(self._scope, "warnings", None)
		scoped: list[MakeError] = []
		self._scope.warnings = scoped
		try:
			value = action(*args, **kwargs)
		except MakeError as err:
			return MakeResult(ok=False, warnings=scoped, error=err)
		finally:
			self._scope.warnings = outer
			if outer is not None:
				outer.extend(scoped)
		return MakeResult(ok=True, value=value, warnings=scoped)


__all__ = ["BuildContext", "MakeResult", "ProgressSink", "print_progress"]
