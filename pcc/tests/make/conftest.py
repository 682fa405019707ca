# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Mapping, Sequence

import pytest

from pcc.make.actions import MakeActions
from pcc.make.codegen import END_OF_HEADER, CompiledModule, NameSupply
from pcc.make.context import BuildContext
from pcc.make.inputs_v0 import InputMap, build_input_map
from pcc.make.options import BuildOptions


class FakeGenerator:
	"""
	Stand-in for the C++ backend.

	Elements are plain strings; pretty printing joins them with newlines. Each
	run draws one fresh name so supply consumption is observable.
	"""

	def __init__(self, header: Sequence[str] = ("#pragma once",), source: Sequence[str] = ("int x = 0;",)) -> None:
		self.header = list(header)
		self.source = list(source)
		self.calls: list[str] = []

	def generate(self, module: CompiledModule, environment: Any, supply: NameSupply) -> list[Any]:
		self.calls.append(str(module.name))
		tmp = supply.fresh_name("$tmp")
		return [*self.header, END_OF_HEADER, *self.source, f"// {module.name} {tmp}"]

	def pretty_print(self, elements: Sequence[Any]) -> str:
		return "\n".join(str(e) for e in elements)


@pytest.fixture
def progress_log() -> list[str]:
	return []


@pytest.fixture
def out_dir(tmp_path: Path) -> Path:
	return tmp_path / "out"


@pytest.fixture
def make_ctx(out_dir: Path, progress_log: list[str]) -> Callable[..., BuildContext]:
	def _make(**overrides: Any) -> BuildContext:
		opts = BuildOptions(output_dir=out_dir, **overrides)
		return BuildContext(opts, progress=progress_log.append)

	return _make


@pytest.fixture
def ctx(make_ctx: Callable[..., BuildContext]) -> BuildContext:
	return make_ctx()


@pytest.fixture
def generator() -> FakeGenerator:
	return FakeGenerator()


@pytest.fixture
def make_actions(
	make_ctx: Callable[..., BuildContext], generator: FakeGenerator
) -> Callable[..., MakeActions]:
	def _make(inputs: Mapping[str, Any] | InputMap, **overrides: Any) -> MakeActions:
		return MakeActions(make_ctx(**overrides), build_input_map(inputs), generator)

	return _make
