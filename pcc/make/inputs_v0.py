# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Module input map (v0).

Every module in a build session has exactly one input spec:
- a concrete source path, or
- a `RebuildPolicy` for modules with no physical source (builtins, synthesized
  modules). Freshness for those is decided by the caller.

The map is built once at session start and is read-only afterwards.

Source list format (pinned for v0, JSON):
{
  "format": "pcc-sources",
  "version": 0,
  "modules": {
    "Data.Maybe": "src/Data/Maybe.purs",
    "Prim": { "rebuild": "never" }
  }
}
Relative paths resolve against the directory holding the source list.
"""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Union

from pcc.make.errors import module_has_no_filename
from pcc.make.module_name import ModuleName, as_module_name


class RebuildPolicy(str, Enum):
	NEVER = "never"
	ALWAYS = "always"


InputSpec = Union[RebuildPolicy, Path]
InputMap = Mapping[ModuleName, InputSpec]


def build_input_map(entries: Mapping[ModuleName | str, InputSpec | str]) -> InputMap:
	out: dict[ModuleName, InputSpec] = {}
	for raw_name, spec in entries.items():
		mn = as_module_name(raw_name)
		if mn in out:
			raise ValueError(f"duplicate input for module '{mn}'")
		if isinstance(spec, RebuildPolicy):
			out[mn] = spec
		elif isinstance(spec, (str, Path)) and str(spec):
			out[mn] = Path(spec)
		else:
			raise ValueError(f"input for module '{mn}' must be a path or a rebuild policy")
	return MappingProxyType(out)


def _parse_entry(name: str, raw: Any, *, base_dir: Path) -> InputSpec:
	if isinstance(raw, str):
		if not raw:
			raise ValueError(f"source list entry for module '{name}' has an empty path")
		p = Path(raw)
		return p if p.is_absolute() else base_dir / p
	if isinstance(raw, dict):
		unknown = sorted(set(raw.keys()) - {"rebuild", "x"})
		if unknown:
			raise ValueError(f"source list entry for module '{name}' has unknown fields: {', '.join(unknown)}")
		policy = raw.get("rebuild")
		try:
			return RebuildPolicy(policy)
		except ValueError as err:
			raise ValueError(
				f"source list entry for module '{name}' has unknown rebuild policy {policy!r} (expected 'never' or 'always')"
			) from err
	raise ValueError(f"source list entry for module '{name}' must be a path string or an object")


def _reject_duplicate_keys(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
	out: dict[str, Any] = {}
	for key, value in pairs:
		if key in out:
			raise ValueError(f"source list has duplicate key '{key}'")
		out[key] = value
	return out


def load_sources_v0(path: Path) -> InputMap:
	data = json.loads(path.read_text(encoding="utf-8"), object_pairs_hook=_reject_duplicate_keys)
	if not isinstance(data, dict):
		raise ValueError("source list must be a JSON object")
	if data.get("format") != "pcc-sources" or data.get("version") != 0:
		raise ValueError("unsupported source list format/version (upgrade pcc?)")
	unknown_top = sorted(set(data.keys()) - {"format", "version", "modules", "x"})
	if unknown_top:
		raise ValueError(f"source list has unknown top-level fields: {', '.join(unknown_top)}")
	modules = data.get("modules")
	if not isinstance(modules, dict):
		raise ValueError("source list modules must be an object")

	base_dir = path.parent
	entries: dict[ModuleName, InputSpec] = {}
	for name, raw in modules.items():
		try:
			mn = ModuleName.parse(name)
		except ValueError as err:
			raise ValueError(f"source list: {err}") from err
		entries[mn] = _parse_entry(name, raw, base_dir=base_dir)
	return build_input_map(entries)


def lookup_input(inputs: InputMap, mn: ModuleName) -> InputSpec:
	spec = inputs.get(mn)
	if spec is None:
		raise module_has_no_filename(mn)
	return spec


def lookup_input_path(inputs: InputMap, mn: ModuleName) -> Path:
	"""Source path of a file-backed module; policy-backed modules have none."""
	spec = lookup_input(inputs, mn)
	if isinstance(spec, RebuildPolicy):
		raise module_has_no_filename(mn)
	return spec


__all__ = [
	"InputMap",
	"InputSpec",
	"RebuildPolicy",
	"build_input_map",
	"load_sources_v0",
	"lookup_input",
	"lookup_input_path",
]
