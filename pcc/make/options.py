# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pcc import __version__


@dataclass(frozen=True)
class BuildOptions:
	output_dir: Path = Path("output")
	use_prefix: bool = True  # emit the "Generated by ..." provenance line
	tool_name: str = "pcc"
	version: str = __version__
	source_ext: str = "cc"
	header_ext: str = "hh"
	externs_name: str = "externs.purs"
	scaffold_dir: str = "PureScript"
	build_script: str = "CMakeLists.txt"

	def provenance_lines(self) -> list[str]:
		if not self.use_prefix:
			return []
		return [f"Generated by {self.tool_name} version {self.version}"]


__all__ = ["BuildOptions"]
