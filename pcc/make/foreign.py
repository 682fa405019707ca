# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Foreign implementation pairing.

A module declaring foreign bindings ships hand-written C++ next to its source:

  src/Data/Foo.purs   module source
  src/Data/Foo.hh     foreign header (required)
  src/Data/Foo.cc     foreign source (optional)

Both are copied verbatim beside the generated output as `Foo_ffi.hh` and
`Foo_ffi.cc`. A missing header fails the module before anything is copied.
Both inputs are read before the first `_ffi` file is written.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pcc.make.context import BuildContext
from pcc.make.errors import missing_foreign_module
from pcc.make.fsio import file_exists, read_text_file, write_text_file
from pcc.make.layout import OutputArtifactSet
from pcc.make.module_name import ModuleName
from pcc.make.options import BuildOptions


@dataclass(frozen=True)
class ForeignInputs:
	header: Path
	source: Path


def foreign_inputs_for(opts: BuildOptions, input_source: Path) -> ForeignInputs:
	return ForeignInputs(
		header=input_source.with_suffix(f".{opts.header_ext}"),
		source=input_source.with_suffix(f".{opts.source_ext}"),
	)


class ForeignPairer:
	def __init__(self, ctx: BuildContext) -> None:
		self.ctx = ctx

	def has_foreign_header(self, input_source: Path) -> bool:
		return file_exists(self.ctx, foreign_inputs_for(self.ctx.options, input_source).header)

	def pair_foreign(self, mn: ModuleName, input_source: Path, arts: OutputArtifactSet) -> None:
		inputs = foreign_inputs_for(self.ctx.options, input_source)
		if not file_exists(self.ctx, inputs.header):
			raise missing_foreign_module(mn, inputs.header)
		header_text = read_text_file(self.ctx, inputs.header)
		source_text = read_text_file(self.ctx, inputs.source) if file_exists(self.ctx, inputs.source) else None

		write_text_file(self.ctx, arts.foreign_header, header_text)
		if source_text is not None:
			write_text_file(self.ctx, arts.foreign_source, source_text)


__all__ = ["ForeignInputs", "ForeignPairer", "foreign_inputs_for"]
