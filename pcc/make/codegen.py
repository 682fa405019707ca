# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Per-module code generation output.

`CodegenDriver.codegen` runs the external C++ generator over a compiled module
and materializes its results:

1. generator elements are split at `END_OF_HEADER` into header and source
   segments and pretty-printed separately,
2. `<Mod>.cc`, `<Mod>.hh` and `externs.purs` are written (optionally prefixed
   with a `// Generated by ...` provenance line),
3. the output root scaffold is created if missing,
4. foreign implementation files are paired for modules with foreign bindings.

There is no rollback: when a later step fails, files already written stay.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol

from pcc.make.context import BuildContext
from pcc.make.errors import ErrorKind, MakeError
from pcc.make.externs import ExternsStore
from pcc.make.foreign import ForeignPairer, foreign_inputs_for
from pcc.make.fsio import write_text_file
from pcc.make.inputs_v0 import InputMap, RebuildPolicy, lookup_input_path
from pcc.make.layout import artifacts_for
from pcc.make.module_name import ModuleName
from pcc.make.scaffold import ScaffoldMaterializer


class _EndOfHeader:
	def __repr__(self) -> str:
		return "END_OF_HEADER"


# Generators emit this once, between header and source elements.
END_OF_HEADER = _EndOfHeader()


class NameSupply:
	"""Monotonic counter for synthesized identifiers within one codegen run."""

	def __init__(self, start: int = 0) -> None:
		self._next = start

	@property
	def next_value(self) -> int:
		return self._next

	def fresh(self) -> int:
		n = self._next
		self._next += 1
		return n

	def fresh_name(self, prefix: str = "__") -> str:
		return f"{prefix}{self.fresh()}"


@dataclass(frozen=True)
class CompiledModule:
	"""
	What the driver needs to know about a compiled module.

	`body` is opaque here and only handed to the generator. `foreign` lists the
	module's foreign declarations; any entry means foreign files are required.
	"""

	name: ModuleName
	body: Any = None
	foreign: tuple[str, ...] = field(default_factory=tuple)

	@property
	def requires_foreign(self) -> bool:
		return len(self.foreign) > 0


class CodeGenerator(Protocol):
	def generate(self, module: CompiledModule, environment: Any, supply: NameSupply) -> Sequence[Any]:
		"""Lower and translate `module`; the result contains `END_OF_HEADER` once."""
		...

	def pretty_print(self, elements: Sequence[Any]) -> str:
		...


def split_header(elements: Iterable[Any]) -> tuple[list[Any], list[Any]]:
	"""Split at the first `END_OF_HEADER`; the marker itself is dropped."""
	header: list[Any] = []
	source: list[Any] = []
	target = header
	for el in elements:
		if target is header and el is END_OF_HEADER:
			target = source
			continue
		target.append(el)
	return header, source


def with_prefix(prefix_lines: Sequence[str], body: str) -> str:
	return "\n".join([f"// {line}" for line in prefix_lines] + [body]) + "\n"


class CodegenDriver:
	def __init__(self, ctx: BuildContext, inputs: InputMap, generator: CodeGenerator) -> None:
		self.ctx = ctx
		self.inputs = inputs
		self.generator = generator
		self.externs = ExternsStore(ctx)
		self.scaffold = ScaffoldMaterializer(ctx)
		self.foreign = ForeignPairer(ctx)

	def render(self, module: CompiledModule, environment: Any, supply: NameSupply) -> tuple[str, str]:
		"""Generate (source text, header text) without touching the disk."""
		elements = self.generator.generate(module, environment, supply)
		header_els, source_els = split_header(elements)
		prefix = self.ctx.options.provenance_lines()
		source = with_prefix(prefix, self.generator.pretty_print(source_els))
		header = with_prefix(prefix, self.generator.pretty_print(header_els))
		return source, header

	def codegen(self, module: CompiledModule, environment: Any, supply: NameSupply, externs: str) -> None:
		mn = module.name
		arts = artifacts_for(self.ctx.options, mn)
		source, header = self.render(module, environment, supply)

		write_text_file(self.ctx, arts.source, source)
		write_text_file(self.ctx, arts.header, header)
		self.externs.write(arts.externs, externs)

		self.scaffold.ensure_scaffold()

		if module.requires_foreign:
			self.foreign.pair_foreign(mn, lookup_input_path(self.inputs, mn), arts)
		else:
			self._check_unused_foreign(mn)

	def _check_unused_foreign(self, mn: ModuleName) -> None:
		spec = self.inputs.get(mn)
		if spec is None or isinstance(spec, RebuildPolicy):
			return
		if self.foreign.has_foreign_header(spec):
			self.ctx.warn(
				MakeError(
					ErrorKind.UNNECESSARY_FOREIGN_MODULE,
					module_name=str(mn),
					path=str(foreign_inputs_for(self.ctx.options, spec).header),
				)
			)


__all__ = [
	"END_OF_HEADER",
	"CodeGenerator",
	"CodegenDriver",
	"CompiledModule",
	"NameSupply",
	"split_header",
	"with_prefix",
]
