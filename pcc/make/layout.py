# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Output tree layout.

For module `A.B.C` under output root `R`:

  R/A/B/C/C.cc          generated source
  R/A/B/C/C.hh          generated header
  R/A/B/C/externs.purs  serialized interface
  R/A/B/C/C_ffi.hh      foreign header copy (foreign modules only)
  R/A/B/C/C_ffi.cc      foreign source copy (optional)

Paths are derived on demand and never cached, so two modules can only share a
path if they share a name.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pcc.make.module_name import ModuleName
from pcc.make.options import BuildOptions


@dataclass(frozen=True)
class OutputArtifactSet:
	module_dir: Path
	source: Path
	header: Path
	externs: Path
	foreign_header: Path
	foreign_source: Path


def module_dir(output_dir: Path, mn: ModuleName) -> Path:
	return output_dir.joinpath(*mn.directory().parts)


def externs_path(opts: BuildOptions, mn: ModuleName) -> Path:
	return module_dir(opts.output_dir, mn) / opts.externs_name


def artifacts_for(opts: BuildOptions, mn: ModuleName) -> OutputArtifactSet:
	base_dir = module_dir(opts.output_dir, mn)
	base = mn.basename()
	ffi = f"{base}_ffi"
	return OutputArtifactSet(
		module_dir=base_dir,
		source=base_dir / f"{base}.{opts.source_ext}",
		header=base_dir / f"{base}.{opts.header_ext}",
		externs=base_dir / opts.externs_name,
		foreign_header=base_dir / f"{ffi}.{opts.header_ext}",
		foreign_source=base_dir / f"{ffi}.{opts.source_ext}",
	)


__all__ = ["OutputArtifactSet", "artifacts_for", "externs_path", "module_dir"]
