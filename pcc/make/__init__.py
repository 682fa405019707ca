# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Incremental build actions for the C++ backend.

The external driver decides module order; for each module it may query
timestamps (`FreshnessOracle`), read externs (`ExternsStore`) and run
`CodegenDriver.codegen`, all bundled behind `MakeActions`.

Output layout for module `A.B.C` under root `R` (see `pcc.make.layout`):
- `R/A/B/C/C.cc`, `R/A/B/C/C.hh`, `R/A/B/C/externs.purs`
- `R/A/B/C/C_ffi.hh` / `C_ffi.cc` for modules with foreign bindings
- `R/CMakeLists.txt` and `R/PureScript/*.hh`, written once per root
"""

from __future__ import annotations

from pcc.make.actions import MakeActions, build_make_actions
from pcc.make.codegen import END_OF_HEADER, CodeGenerator, CodegenDriver, CompiledModule, NameSupply
from pcc.make.context import BuildContext, MakeResult
from pcc.make.errors import ErrorKind, MakeError
from pcc.make.inputs_v0 import RebuildPolicy, build_input_map, load_sources_v0
from pcc.make.module_name import ModuleName
from pcc.make.options import BuildOptions
from pcc.make.session import MakeReport, MakeSession, ModuleJob

__all__ = [
	"END_OF_HEADER",
	"BuildContext",
	"BuildOptions",
	"CodeGenerator",
	"CodegenDriver",
	"CompiledModule",
	"ErrorKind",
	"MakeActions",
	"MakeError",
	"MakeReport",
	"MakeResult",
	"MakeSession",
	"ModuleJob",
	"ModuleName",
	"NameSupply",
	"RebuildPolicy",
	"build_input_map",
	"build_make_actions",
	"load_sources_v0",
]
