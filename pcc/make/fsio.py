# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Filesystem primitives for make actions.

Each helper wraps exactly one kind of access so that an `OSError` is reported
with the matching error kind and the offending path. Reads and writes announce
themselves on the context's progress sink before touching the disk.
"""

from __future__ import annotations

import stat
from datetime import datetime, timezone
from pathlib import Path

from pcc.make.context import BuildContext
from pcc.make.errors import cannot_get_file_info, cannot_read_file, cannot_write_file


def get_timestamp(ctx: BuildContext, path: Path) -> datetime | None:
	"""Modification time of a regular file, or None when there is no such file."""
	with ctx.io(cannot_get_file_info, path):
		try:
			st = path.stat()
		except (FileNotFoundError, NotADirectoryError):
			return None
	if not stat.S_ISREG(st.st_mode):
		return None
	return datetime.fromtimestamp(st.st_mtime, tz=timezone.utc)


def file_exists(ctx: BuildContext, path: Path) -> bool:
	with ctx.io(cannot_read_file, path):
		return path.is_file()


def dir_exists(ctx: BuildContext, path: Path) -> bool:
	with ctx.io(cannot_read_file, path):
		return path.is_dir()


def read_text_file(ctx: BuildContext, path: Path) -> str:
	ctx.progress(f"Reading {path}")
	with ctx.io(cannot_read_file, path):
		data = path.read_bytes()
	try:
		return data.decode("utf-8")
	except UnicodeDecodeError as err:
		raise cannot_read_file(path, cause="not valid UTF-8") from err


def write_text_file(ctx: BuildContext, path: Path, text: str) -> None:
	ctx.progress(f"Writing {path}")
	try:
		data = text.encode("utf-8")
	except UnicodeEncodeError as err:
		raise cannot_write_file(path, cause="not encodable as UTF-8") from err
	with ctx.io(cannot_write_file, path):
		path.parent.mkdir(parents=True, exist_ok=True)
		path.write_bytes(data)


__all__ = ["dir_exists", "file_exists", "get_timestamp", "read_text_file", "write_text_file"]
