# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Build session: run codegen for a driver-ordered list of modules.

A failing module does not stop the session; its error is recorded and the next
module is built. Ordering and scheduling stay with the caller.
"""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field
from typing import Any, Iterable, Literal

from pcc.make.actions import MakeActions
from pcc.make.codegen import CompiledModule, NameSupply
from pcc.make.errors import MakeError
from pcc.make.inputs_v0 import RebuildPolicy

ModuleStatus = Literal["built", "failed"]


@dataclass(frozen=True)
class ModuleJob:
	module: CompiledModule
	environment: Any
	externs: str
	supply: NameSupply = field(default_factory=NameSupply)


@dataclass(frozen=True)
class ModuleOutcome:
	module_name: str
	status: ModuleStatus
	warnings: list[MakeError]
	error: MakeError | None = None

	def to_dict(self) -> dict[str, Any]:
		return {
			"module_name": self.module_name,
			"status": self.status,
			"warnings": [w.to_dict() for w in self.warnings],
			"error": self.error.to_dict() if self.error is not None else None,
		}


@dataclass(frozen=True)
class MakeReport:
	outcomes: list[ModuleOutcome]

	@property
	def ok(self) -> bool:
		return all(o.status == "built" for o in self.outcomes)

	@property
	def errors(self) -> list[MakeError]:
		return [o.error for o in self.outcomes if o.error is not None]

	def to_dict(self) -> dict[str, Any]:
		outcomes_sorted = sorted(self.outcomes, key=lambda o: o.module_name)
		return {
			"ok": self.ok,
			"built_count": sum(1 for o in self.outcomes if o.status == "built"),
			"error_count": len(self.errors),
			"outcomes": [o.to_dict() for o in outcomes_sorted],
		}

	def emit(self, *, as_json: bool = False) -> None:
		if as_json:
			print(json.dumps(self.to_dict(), sort_keys=True, separators=(",", ":")))
			return
		for outcome in self.outcomes:
			for w in outcome.warnings:
				print(f"warning: {w.format_human()}", file=sys.stderr)
		if self.ok:
			return
		print(f"make: {len(self.errors)} module(s) failed", file=sys.stderr, flush=True)
		for err in self.errors:
			print(f"- {err.format_human()}", file=sys.stderr, flush=True)


class MakeSession:
	def __init__(self, actions: MakeActions) -> None:
		self.actions = actions

	def needs_rebuild(self, job: ModuleJob) -> bool:
		"""
		Timestamp check for one module.

		Policy-backed modules follow their policy; a failed timestamp query
		counts as stale so the error resurfaces during codegen.
		"""
		mn = job.module.name
		in_res = self.actions.get_input_timestamp(mn)
		if not in_res.ok:
			return True
		if in_res.value is RebuildPolicy.ALWAYS:
			return True
		out_res = self.actions.get_output_timestamp(mn)
		if not out_res.ok or out_res.value is None:
			return True
		if in_res.value is RebuildPolicy.NEVER:
			return False
		return in_res.value is None or out_res.value < in_res.value

	def build(self, jobs: Iterable[ModuleJob], *, only_stale: bool = False) -> MakeReport:
		outcomes: list[ModuleOutcome] = []
		for job in jobs:
			if only_stale and not self.needs_rebuild(job):
				self.actions.progress(f"Up to date {job.module.name}")
				continue
			res = self.actions.codegen(job.module, job.environment, job.supply, job.externs)
			outcomes.append(
				ModuleOutcome(
					module_name=str(job.module.name),
					status="built" if res.ok else "failed",
					warnings=list(res.warnings),
					error=res.error,
				)
			)
		return MakeReport(outcomes=outcomes)


__all__ = ["MakeReport", "MakeSession", "ModuleJob", "ModuleOutcome"]
