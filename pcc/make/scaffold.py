# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Runtime scaffold for an output tree.

The first module built into an output root also materializes:
- `<root>/CMakeLists.txt` (build-script stub), and
- `<root>/PureScript/*.hh` (runtime-support headers).

Contents are bundled with the tool under `pcc/make/support/` and copied as-is.
The `PureScript/` directory doubles as the marker: once it exists the step is
skipped. Threads in one process are serialized per output root; separate
processes sharing a root must order the first build themselves.
"""

from __future__ import annotations

import threading
from pathlib import Path, PurePosixPath

from pcc.make.context import BuildContext
from pcc.make.errors import cannot_read_file
from pcc.make.fsio import dir_exists, write_text_file
from pcc.make.options import BuildOptions
from pcc.make.support import SUPPORT_DIR, read_support_file

# Output file name (inside the scaffold dir) -> bundled asset name.
SUPPORT_HEADERS: dict[str, str] = {
	"any_map.hh": "any_map.hh",
	"bind.hh": "bind.hh",
	"memory.hh": "memory.hh",
	"PureScript.hh": "purescript.hh",
	"shared_list.hh": "shared_list.hh",
}
BUILD_SCRIPT_ASSET = "CMakeLists.txt"

# One lock per output root ever scaffolded in this process. Entries are never
# evicted; a process builds into a handful of roots.
_ROOT_LOCKS: dict[Path, threading.Lock] = {}
_ROOT_LOCKS_GUARD = threading.Lock()


def _root_lock(root: Path) -> threading.Lock:
	key = root.resolve()
	with _ROOT_LOCKS_GUARD:
		lock = _ROOT_LOCKS.get(key)
		if lock is None:
			lock = threading.Lock()
			_ROOT_LOCKS[key] = lock
		return lock


def scaffold_assets(opts: BuildOptions) -> dict[PurePosixPath, str]:
	"""Relative output path -> bundled asset name, build script first."""
	table = {PurePosixPath(opts.build_script): BUILD_SCRIPT_ASSET}
	for out_name, asset in SUPPORT_HEADERS.items():
		table[PurePosixPath(opts.scaffold_dir, out_name)] = asset
	return table


class ScaffoldMaterializer:
	def __init__(self, ctx: BuildContext) -> None:
		self.ctx = ctx

	@property
	def marker_dir(self) -> Path:
		return self.ctx.options.output_dir / self.ctx.options.scaffold_dir

	def ensure_scaffold(self) -> bool:
		"""Write the scaffold unless the marker dir exists. Returns True if written."""
		root = self.ctx.options.output_dir
		with _root_lock(root):
			if dir_exists(self.ctx, self.marker_dir):
				return False
			for rel, asset in scaffold_assets(self.ctx.options).items():
				with self.ctx.io(cannot_read_file, SUPPORT_DIR / asset):
					text = read_support_file(asset)
				write_text_file(self.ctx, root.joinpath(*rel.parts), text)
		return True


__all__ = ["BUILD_SCRIPT_ASSET", "SUPPORT_HEADERS", "ScaffoldMaterializer", "scaffold_assets"]
