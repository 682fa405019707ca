# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
pcc package: build-side tooling for the C++ backend.

Subpackages:
  make: per-module incremental build actions (freshness, codegen output,
        externs, foreign pairing, runtime scaffold)
"""

__version__ = "0.7.0"

__all__ = ["make", "__version__"]
