# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
	CANNOT_READ_FILE = "CANNOT_READ_FILE"
	CANNOT_WRITE_FILE = "CANNOT_WRITE_FILE"
	CANNOT_GET_FILE_INFO = "CANNOT_GET_FILE_INFO"
	MISSING_FOREIGN_MODULE = "MISSING_FOREIGN_MODULE"
	MODULE_HAS_NO_FILENAME = "MODULE_HAS_NO_FILENAME"
	# Warning only; never raised.
	UNNECESSARY_FOREIGN_MODULE = "UNNECESSARY_FOREIGN_MODULE"


_DEFAULT_MESSAGES: dict[ErrorKind, str] = {
	ErrorKind.CANNOT_READ_FILE: "cannot read file",
	ErrorKind.CANNOT_WRITE_FILE: "cannot write file",
	ErrorKind.CANNOT_GET_FILE_INFO: "cannot get file info",
	ErrorKind.MISSING_FOREIGN_MODULE: "module declares foreign bindings but has no foreign header",
	ErrorKind.MODULE_HAS_NO_FILENAME: "module has no filename in make",
	ErrorKind.UNNECESSARY_FOREIGN_MODULE: "foreign header found for a module without foreign bindings",
}


@dataclass(frozen=True)
class MakeError(Exception):
	"""
	A structured build error attributed to a path or a module.

	Every filesystem failure leaving `pcc.make` is one of these; raw `OSError`
	never escapes a build action.
	"""

	kind: ErrorKind
	message: str = ""
	path: str | None = None
	module_name: str | None = None
	cause: str | None = None

	def __post_init__(self) -> None:
		if not self.message:
			object.__setattr__(self, "message", _DEFAULT_MESSAGES[self.kind])

	def __str__(self) -> str:
		return self.format_human()

	@property
	def reason_code(self) -> str:
		return self.kind.value

	def to_dict(self) -> dict[str, Any]:
		return {
			"reason_code": self.reason_code,
			"message": self.message,
			"path": self.path,
			"module_name": self.module_name,
			"cause": self.cause,
		}

	def format_human(self) -> str:
		parts: list[str] = [f"[{self.reason_code}] {self.message}"]
		if self.module_name:
			parts.append(f"module={self.module_name}")
		if self.path:
			parts.append(f"path={self.path}")
		if self.cause:
			parts.append(f"cause={self.cause}")
		return " ".join(parts)


def cannot_read_file(path: object, cause: str | None = None) -> MakeError:
	return MakeError(ErrorKind.CANNOT_READ_FILE, path=str(path), cause=cause)


def cannot_write_file(path: object, cause: str | None = None) -> MakeError:
	return MakeError(ErrorKind.CANNOT_WRITE_FILE, path=str(path), cause=cause)


def cannot_get_file_info(path: object, cause: str | None = None) -> MakeError:
	return MakeError(ErrorKind.CANNOT_GET_FILE_INFO, path=str(path), cause=cause)


def missing_foreign_module(module_name: object, path: object | None = None) -> MakeError:
	return MakeError(
		ErrorKind.MISSING_FOREIGN_MODULE,
		module_name=str(module_name),
		path=str(path) if path is not None else None,
	)


def module_has_no_filename(module_name: object) -> MakeError:
	return MakeError(ErrorKind.MODULE_HAS_NO_FILENAME, module_name=str(module_name))


__all__ = [
	"ErrorKind",
	"MakeError",
	"cannot_read_file",
	"cannot_write_file",
	"cannot_get_file_info",
	"missing_foreign_module",
	"module_has_no_filename",
]
