# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

from pathlib import Path

from pcc.make.context import BuildContext
from pcc.make.fsio import read_text_file, write_text_file
from pcc.make.layout import externs_path
from pcc.make.module_name import ModuleName


class ExternsStore:
	"""Reads and writes `<output>/<module dir>/externs.purs`, verbatim."""

	def __init__(self, ctx: BuildContext) -> None:
		self.ctx = ctx

	def path_for(self, mn: ModuleName) -> Path:
		return externs_path(self.ctx.options, mn)

	def read(self, mn: ModuleName) -> tuple[Path, str]:
		path = self.path_for(mn)
		return path, read_text_file(self.ctx, path)

	def write(self, path: Path, text: str) -> None:
		write_text_file(self.ctx, path, text)


__all__ = ["ExternsStore"]
