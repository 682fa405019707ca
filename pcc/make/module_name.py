# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Dotted module names and their output-tree mapping.

A module name `A.B.C` maps to the directory `A/B/C` and the file basename `C`.
Both derivations are pure; nothing here touches the filesystem.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from lark import Lark, Token
from lark.exceptions import UnexpectedInput

_GRAMMAR_PATH = Path(__file__).with_name("module_name.lark")
_GRAMMAR_SRC = _GRAMMAR_PATH.read_text()

_PARSER = Lark(
	_GRAMMAR_SRC,
	parser="lalr",
	lexer="basic",
	start="start",
	maybe_placeholders=False,
)
_SEGMENT_RE = re.compile(_PARSER.get_terminal("SEGMENT").pattern.to_regexp())


@dataclass(frozen=True, order=True)
class ModuleName:
	"""A validated dotted module name."""

	segments: tuple[str, ...]

	def __post_init__(self) -> None:
		if not self.segments:
			raise ValueError("module name must have at least one segment")
		for seg in self.segments:
			if not isinstance(seg, str) or _SEGMENT_RE.fullmatch(seg) is None:
				raise ValueError(f"invalid module name segment {seg!r}")

	@classmethod
	def parse(cls, text: str) -> "ModuleName":
		if not isinstance(text, str) or not text:
			raise ValueError("invalid module name (empty)")
		try:
			tree = _PARSER.parse(text)
		except UnexpectedInput as err:
			raise ValueError(f"invalid module name '{text}' (column {err.column})") from err
		return cls(tuple(str(tok) for tok in tree.children if isinstance(tok, Token)))

	def __str__(self) -> str:
		return ".".join(self.segments)

	def directory(self) -> PurePosixPath:
		"""Relative directory for this module's artifacts (`A.B.C` -> `A/B/C`)."""
		return PurePosixPath(*self.segments)

	def basename(self) -> str:
		"""File basename shared by the module's generated artifacts."""
		return self.segments[-1]


def as_module_name(value: ModuleName | str) -> ModuleName:
	if isinstance(value, ModuleName):
		return value
	return ModuleName.parse(value)


__all__ = ["ModuleName", "as_module_name"]
