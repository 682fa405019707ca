# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

from pathlib import Path

import pytest

from pcc.make.context import BuildContext
from pcc.make.errors import ErrorKind, MakeError
from pcc.make.externs import ExternsStore
from pcc.make.module_name import ModuleName


def test_read_uses_fixed_path(ctx: BuildContext, out_dir: Path, progress_log: list[str]) -> None:
	target = out_dir / "Data" / "Maybe" / "externs.purs"
	target.parent.mkdir(parents=True)
	target.write_text("module Data.Maybe where\n", encoding="utf-8")

	path, text = ExternsStore(ctx).read(ModuleName.parse("Data.Maybe"))
	assert path == target
	assert text == "module Data.Maybe where\n"
	assert progress_log == [f"Reading {target}"]


def test_read_missing_externs_is_cannot_read_file(ctx: BuildContext, out_dir: Path) -> None:
	with pytest.raises(MakeError) as excinfo:
		ExternsStore(ctx).read(ModuleName.parse("Data.Maybe"))
	assert excinfo.value.kind is ErrorKind.CANNOT_READ_FILE
	assert excinfo.value.path == str(out_dir / "Data" / "Maybe" / "externs.purs")


def test_write_overwrites_verbatim(ctx: BuildContext) -> None:
	store = ExternsStore(ctx)
	path = store.path_for(ModuleName.parse("Main"))
	store.write(path, "first\nsecond\n")
	store.write(path, "third")
	assert path.read_bytes() == b"third"
