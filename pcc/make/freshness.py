# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

from datetime import datetime

from pcc.make.context import BuildContext
from pcc.make.fsio import get_timestamp
from pcc.make.inputs_v0 import InputMap, RebuildPolicy, lookup_input
from pcc.make.layout import artifacts_for
from pcc.make.module_name import ModuleName


class FreshnessOracle:
	"""
	Timestamp queries used by the driver to decide whether a module is stale.

	Missing files are not errors here: a missing input yields None, and a
	missing source or externs output yields None (always stale). The generated
	header does not take part in the output timestamp.
	"""

	def __init__(self, ctx: BuildContext, inputs: InputMap) -> None:
		self.ctx = ctx
		self.inputs = inputs

	def input_timestamp(self, mn: ModuleName) -> RebuildPolicy | datetime | None:
		spec = lookup_input(self.inputs, mn)
		if isinstance(spec, RebuildPolicy):
			return spec
		return get_timestamp(self.ctx, spec)

	def output_timestamp(self, mn: ModuleName) -> datetime | None:
		arts = artifacts_for(self.ctx.options, mn)
		src_ts = get_timestamp(self.ctx, arts.source)
		externs_ts = get_timestamp(self.ctx, arts.externs)
		if src_ts is None or externs_ts is None:
			return None
		return min(src_ts, externs_ts)

	def is_up_to_date(self, mn: ModuleName) -> bool | None:
		"""
		True when output exists and is not older than the input.

		Returns None for policy-backed modules; the caller owns that decision.
		"""
		in_ts = self.input_timestamp(mn)
		if isinstance(in_ts, RebuildPolicy):
			return None
		out_ts = self.output_timestamp(mn)
		if in_ts is None or out_ts is None:
			return False
		return out_ts >= in_ts


__all__ = ["FreshnessOracle"]
