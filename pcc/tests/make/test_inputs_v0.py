# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from pcc.make.errors import ErrorKind, MakeError
from pcc.make.inputs_v0 import (
	RebuildPolicy,
	build_input_map,
	load_sources_v0,
	lookup_input,
	lookup_input_path,
)
from pcc.make.module_name import ModuleName


def _write_sources(path: Path, obj: Any) -> Path:
	path.parent.mkdir(parents=True, exist_ok=True)
	path.write_text(json.dumps(obj), encoding="utf-8")
	return path


def test_load_sources_resolves_relative_paths(tmp_path: Path) -> None:
	src = _write_sources(
		tmp_path / "proj" / "pcc-sources.json",
		{
			"format": "pcc-sources",
			"version": 0,
			"modules": {
				"Data.Maybe": "src/Data/Maybe.purs",
				"Abs": str(tmp_path / "abs" / "Abs.purs"),
				"Prim": {"rebuild": "never"},
				"Gen.Synth": {"rebuild": "always"},
			},
		},
	)
	inputs = load_sources_v0(src)
	assert inputs[ModuleName.parse("Data.Maybe")] == tmp_path / "proj" / "src" / "Data" / "Maybe.purs"
	assert inputs[ModuleName.parse("Abs")] == tmp_path / "abs" / "Abs.purs"
	assert inputs[ModuleName.parse("Prim")] is RebuildPolicy.NEVER
	assert inputs[ModuleName.parse("Gen.Synth")] is RebuildPolicy.ALWAYS


@pytest.mark.parametrize(
	("obj", "match"),
	[
		([], "must be a JSON object"),
		({"format": "pcc-sources", "version": 1, "modules": {}}, "unsupported source list format/version"),
		({"format": "other", "version": 0, "modules": {}}, "unsupported source list format/version"),
		({"format": "pcc-sources", "version": 0, "modules": {}, "extra": 1}, "unknown top-level fields: extra"),
		({"format": "pcc-sources", "version": 0, "modules": []}, "modules must be an object"),
		({"format": "pcc-sources", "version": 0, "modules": {"Bad-Name": "x.purs"}}, "invalid module name"),
		({"format": "pcc-sources", "version": 0, "modules": {"A": ""}}, "empty path"),
		({"format": "pcc-sources", "version": 0, "modules": {"A": 3}}, "must be a path string or an object"),
		({"format": "pcc-sources", "version": 0, "modules": {"A": {"rebuild": "sometimes"}}}, "unknown rebuild policy"),
		({"format": "pcc-sources", "version": 0, "modules": {"A": {"rebuild": "never", "y": 1}}}, "unknown fields: y"),
	],
)
def test_load_sources_rejects_malformed_documents(tmp_path: Path, obj: Any, match: str) -> None:
	src = _write_sources(tmp_path / "pcc-sources.json", obj)
	with pytest.raises(ValueError, match=match):
		load_sources_v0(src)


def test_input_map_is_read_only() -> None:
	inputs = build_input_map({"Main": "src/Main.purs"})
	with pytest.raises(TypeError):
		inputs[ModuleName.parse("Other")] = Path("x")  # type: ignore[index]


def test_build_input_map_rejects_duplicates_and_bad_specs() -> None:
	with pytest.raises(ValueError, match="duplicate input"):
		build_input_map({"Main": "a.purs", ModuleName.parse("Main"): "b.purs"})
	with pytest.raises(ValueError, match="must be a path or a rebuild policy"):
		build_input_map({"Main": 3})  # type: ignore[dict-item]


def test_lookup_reports_modules_without_filename() -> None:
	inputs = build_input_map({"Main": "src/Main.purs", "Prim": RebuildPolicy.NEVER})
	assert lookup_input_path(inputs, ModuleName.parse("Main")) == Path("src/Main.purs")
	assert lookup_input(inputs, ModuleName.parse("Prim")) is RebuildPolicy.NEVER

	with pytest.raises(MakeError) as excinfo:
		lookup_input_path(inputs, ModuleName.parse("Prim"))
	assert excinfo.value.kind is ErrorKind.MODULE_HAS_NO_FILENAME
	assert excinfo.value.module_name == "Prim"

	with pytest.raises(MakeError) as excinfo:
		lookup_input(inputs, ModuleName.parse("Missing"))
	assert excinfo.value.kind is ErrorKind.MODULE_HAS_NO_FILENAME


def test_load_sources_rejects_duplicate_module_keys(tmp_path: Path) -> None:
	src = tmp_path / "pcc-sources.json"
	src.write_text(
		'{"format": "pcc-sources", "version": 0, "modules": {"A": "a.purs", "A": "b.purs"}}',
		encoding="utf-8",
	)
	with pytest.raises(ValueError, match="duplicate key 'A'"):
		load_sources_v0(src)
