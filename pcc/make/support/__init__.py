# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
# Runtime-support files copied into every output tree by the scaffold step.
from pathlib import Path

SUPPORT_DIR = Path(__file__).parent


def read_support_file(name: str) -> str:
	return (SUPPORT_DIR / name).read_text(encoding="utf-8")

__all__ = ["SUPPORT_DIR", "read_support_file"]
