# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Make actions handed to the external build driver.

One method per operation the driver needs; each runs inside the build context
and returns a `MakeResult` rather than raising.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any

from pcc.make.codegen import CodeGenerator, CodegenDriver, CompiledModule, NameSupply
from pcc.make.context import BuildContext, MakeResult, ProgressSink
from pcc.make.externs import ExternsStore
from pcc.make.freshness import FreshnessOracle
from pcc.make.inputs_v0 import InputMap, RebuildPolicy
from pcc.make.module_name import ModuleName, as_module_name
from pcc.make.options import BuildOptions


class MakeActions:
	def __init__(self, ctx: BuildContext, inputs: InputMap, generator: CodeGenerator) -> None:
		self.ctx = ctx
		self.inputs = inputs
		self.oracle = FreshnessOracle(ctx, inputs)
		self.externs = ExternsStore(ctx)
		self.driver = CodegenDriver(ctx, inputs, generator)

	def get_input_timestamp(self, mn: ModuleName | str) -> MakeResult[RebuildPolicy | datetime | None]:
		return self.ctx.run(self.oracle.input_timestamp, as_module_name(mn))

	def get_output_timestamp(self, mn: ModuleName | str) -> MakeResult[datetime | None]:
		return self.ctx.run(self.oracle.output_timestamp, as_module_name(mn))

	def read_externs(self, mn: ModuleName | str) -> MakeResult[tuple[Path, str]]:
		return self.ctx.run(self.externs.read, as_module_name(mn))

	def codegen(self, module: CompiledModule, environment: Any, supply: NameSupply, externs: str) -> MakeResult[None]:
		return self.ctx.run(self.driver.codegen, module, environment, supply, externs)

	def progress(self, message: str) -> None:
		self.ctx.progress(message)


def build_make_actions(
	output_dir: Path,
	inputs: InputMap,
	use_prefix: bool,
	generator: CodeGenerator,
	*,
	progress: ProgressSink | None = None,
) -> MakeActions:
	ctx = BuildContext(BuildOptions(output_dir=output_dir, use_prefix=use_prefix), progress=progress)
	return MakeActions(ctx, inputs, generator)


__all__ = ["MakeActions", "build_make_actions"]
