# SPDX-License-Identifier: MIT
"""Compiled-in configuration for building Clang from a flattened LLVM tree.

Directory names are relative to the LLVM monorepo checkout
(``<root>/llvm-project``). Output names in CODEGEN_JOBS and
GENERATED_HEADERS are flat names inside ``<root>/clang_src``.
"""

from __future__ import annotations

VERSION = "420.69"

DEFINES: list[str] = [
    "LLVM_ON_UNIX",
    'PACKAGE_NAME="LLVM"',
    f'PACKAGE_VERSION="{VERSION}"',
    "HAVE_FCNTL_H=1",
    "HAVE_UNISTD_H=1",
    "LLVM_ENABLE_THREADS=1",
    "HAVE_SYSEXITS_H=1",
    "HAVE_SYS_STAT_H=1",
    "LLVM_WINDOWS_PREFER_FORWARD_SLASH=1",
    "HAVE_SYS_MMAN_H=1",
    "HAVE_FUTIMENS=1",
    "LLVM_ENABLE_CRASH_DUMPS=1",
    "HAVE_GETRUSAGE=1",
    "HAVE_SYS_RESOURCE_H=1",
    "HAVE_GETPAGESIZE=1",
    "HAVE_MALLINFO2=1",
    "HAVE_PTHREAD_H",
    "HAVE_ERRNO_H",
    "HAVE_STRERROR_R",
    'BUG_REPORT_URL="hawtdawgadverntures.xyz"',
    "CLANG_SPAWN_CC1=0",
    'CLANG_INSTALL_LIBDIR_BASENAME=""',
    "ENABLE_X86_RELAX_RELOCATIONS=1",
    'DEFAULT_SYSROOT=""',
    'CLANG_RESOURCE_DIR=""',
    "PPC_LINUX_DEFAULT_IEEELONGDOUBLE=0",
    'CLANG_DEFAULT_OPENMP_RUNTIME="libomp"',
    'CLANG_DEFAULT_LINKER=""',
    'LLVM_HOST_TRIPLE="x86_64-unknown-linux-gnu"',
    'CLANG_DEFAULT_RTLIB=""',
    'CLANG_DEFAULT_UNWINDLIB=""',
    'CLANG_DEFAULT_CXX_STDLIB=""',
    'LLVM_DEFAULT_TARGET_TRIPLE="x86_64-unknown-linux-gnu"',
    'C_INCLUDE_DIRS=""',
    "CLANG_DEFAULT_PIE_ON_LINUX=1",
    'CLANG_DEFAULT_OBJCOPY="objcopy"',
    'GCC_INSTALL_PREFIX=""',
    f'LLVM_VERSION_STRING="{VERSION}"',
    'CLANG_OPENMP_NVPTX_DEFAULT_ARCH="sm_35"',
    'CLANG_SYSTEMZ_DEFAULT_ARCH="z10"',
    "LLVM_ENABLE_ABI_BREAKING_CHECKS=1",
    "LLVM_VERSION_MAJOR=69",
    "LLVM_VERSION_MINOR=420",
    "LLVM_VERSION_PATCH=1337",
]

# Pulled into the flat directory before anything else
FLATTEN_FILES: list[str] = [
    "clang/tools/driver/driver.cpp",
]

# Every translation unit directly inside these is pulled, plus whatever
# they include
FLATTEN_DIRS: list[str] = [
    "llvm/lib/Support",
    "llvm/lib/TableGen",
    "llvm/lib/Option",
    "llvm/lib/MC",
    "llvm/lib/MC/MCParser",
    "llvm/lib/TargetParser",
    "llvm/lib/ProfileData",
    "llvm/lib/Demangle",
    "llvm/lib/BinaryFormat",
    "llvm/lib/Object",
    "llvm/lib/TextAPI",
    "llvm/lib/Remarks",
    "llvm/lib/IR",
    "llvm/lib/IRReader",
    "llvm/lib/AsmParser",
    "llvm/lib/DebugInfo/DWARF",
    "llvm/lib/Bitstream/Reader",
    "llvm/lib/Bitcode/Reader",
    "llvm/lib/WindowsDriver",
    "llvm/lib/Target",
    "llvm/lib/Target/X86",
    "llvm/lib/Target/X86/TargetInfo",
    "llvm/lib/Target/X86/MCTargetDesc",
    "llvm/lib/Analysis",
    "llvm/lib/CodeGen",
    "llvm/lib/CodeGen/LiveDebugValues",
    "llvm/lib/CodeGen/SelectionDAG",
    "llvm/lib/CodeGen/GlobalISel",
    "llvm/lib/Transforms/Utils",
    "llvm/lib/Transforms/ObjCARC",
    "llvm/utils/TableGen",
    "llvm/utils/TableGen/GlobalISel",
    "clang/lib/Support",
    "clang/lib/Driver",
    "clang/lib/Driver/ToolChains",
    "clang/lib/Driver/ToolChains/Arch",
    "clang/lib/Basic",
    "clang/utils/TableGen",
]

# (kind, match, value); first match wins
INCLUDE_RULES: list[tuple[str, str, str]] = [
    ("prefix", "clang", "clang/include"),
    ("prefix", "llvm", "llvm/include"),
    ("prefix", "ToolChains/", "clang/lib/Driver"),
    ("exact", "Targets.h", "clang/lib/Basic/Targets.h"),
    ("prefix", "MCTargetDesc/X86", "llvm/lib/Target/X86"),
    ("suffix", "X86TargetInfo.h", "llvm/lib/Target/X86/TargetInfo/X86TargetInfo.h"),
    ("exact", "X86InstrInfo.h", "llvm/lib/Target/X86/X86InstrInfo.h"),
]

# Includes left exactly as written (fnmatch patterns)
KEEP_INCLUDES: list[str] = [
    "google*",
    "tensorflow*",
    "InlinerSizeModel.h",
    "RegallocEvictModel.h",
    "x.h",
    "X86Gen*.inc",
]

# Includes rewritten to their flat name but never pulled from the tree;
# they are produced by GENERATED_HEADERS, TARGET_DEFS or CODEGEN_JOBS
GENERATED_INCLUDES: list[str] = [
    "clang/Config/config.h",
    "clang/Driver/Options.inc",
    "llvm/Config/llvm-config.h",
    "llvm/Config/config.h",
    "llvm/Config/Targets.def",
    "llvm/Config/AsmPrinters.def",
    "llvm/Config/AsmParsers.def",
    "llvm/Config/Disassemblers.def",
    "llvm/Config/TargetMCAs.def",
    "llvm/Config/abi-breaking.h",
    "clang/Basic/DiagnosticDriverKinds.inc",
    "clang/StaticAnalyzer/Checkers/Checkers.inc",
    "clang/Basic/DiagnosticCommonKinds.inc",
    "clang/AST/StmtNodes.inc",
    "clang/AST/DeclNodes.inc",
    "clang/AST/TypeNodes.inc",
    "clang/Basic/AttrList.inc",
    "llvm/Frontend/OpenMP/OMP.inc",
    "clang/include/clang/AST/CommentCommandList.inc",
    "clang/AST/CommentCommandList.inc",
    "clang/Basic/Version.inc",
    "clang/Basic/DiagnosticFrontendKinds.inc",
    "clang/Basic/DiagnosticSerializationKinds.inc",
    "clang/Basic/DiagnosticLexKinds.inc",
    "clang/Basic/DiagnosticParseKinds.inc",
    "clang/Basic/DiagnosticASTKinds.inc",
    "clang/Basic/DiagnosticCommentKinds.inc",
    "clang/Basic/DiagnosticCrossTUKinds.inc",
    "clang/Basic/DiagnosticSemaKinds.inc",
    "clang/Basic/DiagnosticAnalysisKinds.inc",
    "clang/Basic/DiagnosticRefactoringKinds.inc",
    "clang/Basic/DiagnosticGroups.inc",
    "clang/Basic/AttrHasAttributeImpl.inc",
    "clang/Basic/AttrSubMatchRulesList.inc",
    "clang/Sema/AttrParsedAttrKinds.inc",
    "clang/Sema/AttrParsedAttrList.inc",
    "clang/Sema/AttrSpellingListIndex.inc",
    "VCSVersion.inc",
    "clang/Basic/arm_sve_typeflags.inc",
    "clang/Basic/arm_neon.inc",
    "clang/Basic/arm_fp16.inc",
    "clang/Basic/arm_mve_builtins.inc",
    "clang/Basic/arm_cde_builtins.inc",
    "clang/Basic/arm_sve_builtins.inc",
    "clang/Basic/riscv_vector_builtins.inc",
    "llvm/Frontend/OpenMP/OMP.h.inc",
    "llvm/IR/Attributes.inc",
    "llvm/Support/VCSRevision.h",
    "llvm/IR/IntrinsicsAArch64.h",
    "llvm/IR/IntrinsicsARM.h",
    "llvm/IR/IntrinsicsX86.h",
    "llvm/IR/IntrinsicsAMDGPU.h",
    "llvm/IR/IntrinsicsBPF.h",
    "llvm/IR/IntrinsicsDirectX.h",
    "llvm/IR/IntrinsicsHexagon.h",
    "llvm/IR/IntrinsicsMips.h",
    "llvm/IR/IntrinsicsNVPTX.h",
    "llvm/IR/IntrinsicsPowerPC.h",
    "llvm/IR/IntrinsicsR600.h",
    "llvm/IR/IntrinsicsRISCV.h",
    "llvm/IR/IntrinsicsS390.h",
    "llvm/IR/IntrinsicsVE.h",
    "llvm/IR/IntrinsicsWebAssembly.h",
    "llvm/IR/IntrinsicsXCore.h",
    "llvm/IR/IntrinsicImpl.inc",
    "llvm/IR/IntrinsicEnums.inc",
    "X86GenRegisterBank.inc",
    "X86GenDAGISel.inc",
    "X86GenCallingConv.inc",
    "X86GenGlobalISel.inc",
    "X86GenEVEX2VEXTables.inc",
    "X86GenInstrInfo.inc",
    "X86GenRegisterInfo.inc",
    "X86GenFastISel.inc",
    "X86GenSubtargetInfo.inc",
    "X86GenMnemonicTables.inc",
]

GENERATED_HEADERS: dict[str, str] = {
    "clang_include_clang_Config_config.h": "",
    "llvm_include_llvm_Config_llvm-config.h": "",
    "llvm_include_llvm_Config_config.h": "",
    "llvm_include_llvm_Config_abi-breaking.h": "",
    "clang_include_clang_Basic_Version.inc": (
        "#define CLANG_VERSION 69.0.0\n"
        '#define CLANG_VERSION_STRING "69.0.0"\n'
        "#define CLANG_VERSION_MAJOR 69\n"
        '#define CLANG_VERSION_MAJOR_STRING "69"\n'
        "#define CLANG_VERSION_MINOR 0\n"
        "#define CLANG_VERSION_PATCHLEVEL 0\n"
    ),
    "clang_lib_Basic_VCSVersion.inc": (
        '#define LLVM_REVISION ""\n'
        '#define LLVM_REPOSITORY ""\n'
        '#define CLANG_REVISION ""\n'
        '#define CLANG_REPOSITORY ""\n'
    ),
    "llvm_include_llvm_Support_VCSRevision.h": (
        '#define LLVM_REVISION ""\n'
        '#define LLVM_REPOSITORY "https://github.com/llvm/llvm-project"\n'
    ),
}

TARGET = "X86"

# (template relative to the LLVM root, flat output name)
TARGET_DEFS: list[tuple[str, str]] = [
    ("llvm/include/llvm/Config/Targets.def.in", "llvm_include_llvm_Config_Targets.def"),
    ("llvm/include/llvm/Config/AsmPrinters.def.in", "llvm_include_llvm_Config_AsmPrinters.def"),
    ("llvm/include/llvm/Config/AsmParsers.def.in", "llvm_include_llvm_Config_AsmParsers.def"),
    ("llvm/include/llvm/Config/Disassemblers.def.in", "llvm_include_llvm_Config_Disassemblers.def"),
    ("llvm/include/llvm/Config/TargetMCAs.def.in", "llvm_include_llvm_Config_TargetMCAs.def"),
]

# Top-level include namespace -> directory it lives under, for flattening
# generator output
CODEGEN_NAMESPACES: dict[str, str] = {
    "clang": "clang/include",
    "llvm": "llvm/include",
}

# Static libraries the generators link against, in link order
GENERATOR_LIBRARIES: list[str] = [
    "llvm_lib_TableGen",
    "clang_lib_Support",
    "llvm_lib_Support",
]

# Generator name -> translation unit prefix
GENERATORS: dict[str, str] = {
    "llvm": "llvm_utils_TableGen",
    "clang": "clang_utils_TableGen",
}

# (generator, input, output, include dirs, arguments)
CODEGEN_JOBS: list[tuple[str, str, str, str, str]] = [
    ("llvm", "clang/include/clang/Driver/Options.td", "clang_include_clang_Driver_Options.inc", "llvm/include", "-gen-opt-parser-defs"),
    ("llvm", "llvm/include/llvm/Frontend/OpenMP/OMP.td", "llvm_include_llvm_Frontend_OpenMP_OMP.h.inc", "llvm/include", "--gen-directive-decl"),
    ("llvm", "llvm/include/llvm/Frontend/OpenMP/OMP.td", "llvm_include_llvm_Frontend_OpenMP_OMP.inc", "llvm/include", "--gen-directive-impl"),
    ("llvm", "llvm/include/llvm/IR/Attributes.td", "llvm_include_llvm_IR_Attributes.inc", "llvm/include", "-gen-attrs"),
    ("llvm", "llvm/include/llvm/IR/Intrinsics.td", "llvm_include_llvm_IR_IntrinsicEnums.inc", "llvm/include", "-gen-intrinsic-enums"),
    ("llvm", "llvm/include/llvm/IR/Intrinsics.td", "llvm_include_llvm_IR_IntrinsicsAArch64.h", "llvm/include", "-gen-intrinsic-enums -intrinsic-prefix=aarch64"),
    ("llvm", "llvm/include/llvm/IR/Intrinsics.td", "llvm_include_llvm_IR_IntrinsicsARM.h", "llvm/include", "-gen-intrinsic-enums -intrinsic-prefix=arm"),
    ("llvm", "llvm/include/llvm/IR/Intrinsics.td", "llvm_include_llvm_IR_IntrinsicsX86.h", "llvm/include", "-gen-intrinsic-enums -intrinsic-prefix=x86"),
    ("llvm", "llvm/include/llvm/IR/Intrinsics.td", "llvm_include_llvm_IR_IntrinsicsWebAssembly.h", "llvm/include", "-gen-intrinsic-enums -intrinsic-prefix=wasm"),
    ("llvm", "llvm/include/llvm/IR/Intrinsics.td", "llvm_include_llvm_IR_IntrinsicsAMDGPU.h", "llvm/include", "-gen-intrinsic-enums -intrinsic-prefix=amdgcn"),
    ("llvm", "llvm/include/llvm/IR/Intrinsics.td", "llvm_include_llvm_IR_IntrinsicsBPF.h", "llvm/include", "-gen-intrinsic-enums -intrinsic-prefix=bpf"),
    ("llvm", "llvm/include/llvm/IR/Intrinsics.td", "llvm_include_llvm_IR_IntrinsicsDirectX.h", "llvm/include", "-gen-intrinsic-enums -intrinsic-prefix=dx"),
    ("llvm", "llvm/include/llvm/IR/Intrinsics.td", "llvm_include_llvm_IR_IntrinsicsHexagon.h", "llvm/include", "-gen-intrinsic-enums -intrinsic-prefix=hexagon"),
    ("llvm", "llvm/include/llvm/IR/Intrinsics.td", "llvm_include_llvm_IR_IntrinsicsMips.h", "llvm/include", "-gen-intrinsic-enums -intrinsic-prefix=mips"),
    ("llvm", "llvm/include/llvm/IR/Intrinsics.td", "llvm_include_llvm_IR_IntrinsicsNVPTX.h", "llvm/include", "-gen-intrinsic-enums -intrinsic-prefix=nvvm"),
    ("llvm", "llvm/include/llvm/IR/Intrinsics.td", "llvm_include_llvm_IR_IntrinsicsPowerPC.h", "llvm/include", "-gen-intrinsic-enums -intrinsic-prefix=ppc"),
    ("llvm", "llvm/include/llvm/IR/Intrinsics.td", "llvm_include_llvm_IR_IntrinsicsR600.h", "llvm/include", "-gen-intrinsic-enums -intrinsic-prefix=r600"),
    ("llvm", "llvm/include/llvm/IR/Intrinsics.td", "llvm_include_llvm_IR_IntrinsicsRISCV.h", "llvm/include", "-gen-intrinsic-enums -intrinsic-prefix=riscv"),
    ("llvm", "llvm/include/llvm/IR/Intrinsics.td", "llvm_include_llvm_IR_IntrinsicsS390.h", "llvm/include", "-gen-intrinsic-enums -intrinsic-prefix=s390"),
    ("llvm", "llvm/include/llvm/IR/Intrinsics.td", "llvm_include_llvm_IR_IntrinsicsVE.h", "llvm/include", "-gen-intrinsic-enums -intrinsic-prefix=ve"),
    ("llvm", "llvm/include/llvm/IR/Intrinsics.td", "llvm_include_llvm_IR_IntrinsicsXCore.h", "llvm/include", "-gen-intrinsic-enums -intrinsic-prefix=xcore"),
    ("llvm", "llvm/include/llvm/IR/Intrinsics.td", "llvm_include_llvm_IR_IntrinsicImpl.inc", "llvm/include", "-gen-intrinsic-impl"),
    ("llvm", "llvm/lib/Target/X86/X86.td", "X86GenRegisterInfo.inc", "llvm/lib/Target/X86 llvm/include", "-gen-register-info"),
    ("llvm", "llvm/lib/Target/X86/X86.td", "X86GenInstrInfo.inc", "llvm/lib/Target/X86 llvm/include", "-gen-instr-info -instr-info-expand-mi-operand-info=0"),
    ("llvm", "llvm/lib/Target/X86/X86.td", "X86GenSubtargetInfo.inc", "llvm/lib/Target/X86 llvm/include", "-gen-subtarget"),
    ("llvm", "llvm/lib/Target/X86/X86.td", "X86GenMnemonicTables.inc", "llvm/lib/Target/X86 llvm/include", "-gen-x86-mnemonic-tables -asmwriternum=1"),
    ("llvm", "llvm/lib/Target/X86/X86.td", "X86GenDAGISel.inc", "llvm/lib/Target/X86 llvm/include", "-gen-dag-isel"),
    ("llvm", "llvm/lib/Target/X86/X86.td", "X86GenRegisterBank.inc", "llvm/lib/Target/X86 llvm/include", "-gen-register-bank"),
    ("llvm", "llvm/lib/Target/X86/X86.td", "X86GenFastISel.inc", "llvm/lib/Target/X86 llvm/include", "-gen-fast-isel"),
    ("llvm", "llvm/lib/Target/X86/X86.td", "X86GenEVEX2VEXTables.inc", "llvm/lib/Target/X86 llvm/include", "-gen-x86-EVEX2VEX-tables"),
    ("llvm", "llvm/lib/Target/X86/X86.td", "X86GenCallingConv.inc", "llvm/lib/Target/X86 llvm/include", "-gen-callingconv"),
    ("llvm", "llvm/lib/Target/X86/X86.td", "X86GenGlobalISel.inc", "llvm/lib/Target/X86 llvm/include", "-gen-global-isel"),
    ("llvm", "llvm/lib/Target/X86/X86.td", "X86GenAsmWriter.inc", "llvm/lib/Target/X86 llvm/include", "-gen-asm-writer"),
    ("llvm", "llvm/lib/Target/X86/X86.td", "X86GenAsmWriter1.inc", "llvm/lib/Target/X86 llvm/include", "-gen-asm-writer -asmwriternum=1"),
    ("clang", "clang/include/clang/Basic/Diagnostic.td", "clang_include_clang_Basic_DiagnosticCommonKinds.inc", "clang/include/clang/Basic", "-gen-clang-diags-defs -clang-component=Common"),
    ("clang", "clang/include/clang/Basic/Diagnostic.td", "clang_include_clang_Basic_DiagnosticDriverKinds.inc", "clang/include/clang/Basic", "-gen-clang-diags-defs -clang-component=Driver"),
    ("clang", "clang/include/clang/Basic/Diagnostic.td", "clang_include_clang_Basic_DiagnosticFrontendKinds.inc", "clang/include/clang/Basic", "-gen-clang-diags-defs -clang-component=Frontend"),
    ("clang", "clang/include/clang/Basic/Diagnostic.td", "clang_include_clang_Basic_DiagnosticLexKinds.inc", "clang/include/clang/Basic", "-gen-clang-diags-defs -clang-component=Lex"),
    ("clang", "clang/include/clang/Basic/Diagnostic.td", "clang_include_clang_Basic_DiagnosticASTKinds.inc", "clang/include/clang/Basic", "-gen-clang-diags-defs -clang-component=AST"),
    ("clang", "clang/include/clang/Basic/Diagnostic.td", "clang_include_clang_Basic_DiagnosticAnalysisKinds.inc", "clang/include/clang/Basic", "-gen-clang-diags-defs -clang-component=Analysis"),
    ("clang", "clang/include/clang/Basic/Diagnostic.td", "clang_include_clang_Basic_DiagnosticCommentKinds.inc", "clang/include/clang/Basic", "-gen-clang-diags-defs -clang-component=Comment"),
    ("clang", "clang/include/clang/Basic/Diagnostic.td", "clang_include_clang_Basic_DiagnosticCrossTUKinds.inc", "clang/include/clang/Basic", "-gen-clang-diags-defs -clang-component=CrossTU"),
    ("clang", "clang/include/clang/Basic/Diagnostic.td", "clang_include_clang_Basic_DiagnosticParseKinds.inc", "clang/include/clang/Basic", "-gen-clang-diags-defs -clang-component=Parse"),
    ("clang", "clang/include/clang/Basic/Diagnostic.td", "clang_include_clang_Basic_DiagnosticSemaKinds.inc", "clang/include/clang/Basic", "-gen-clang-diags-defs -clang-component=Sema"),
    ("clang", "clang/include/clang/Basic/Diagnostic.td", "clang_include_clang_Basic_DiagnosticSerializationKinds.inc", "clang/include/clang/Basic", "-gen-clang-diags-defs -clang-component=Serialization"),
    ("clang", "clang/include/clang/Basic/Diagnostic.td", "clang_include_clang_Basic_DiagnosticRefactoringKinds.inc", "clang/include/clang/Basic", "-gen-clang-diags-defs -clang-component=Refactoring"),
    ("clang", "clang/include/clang/Basic/Diagnostic.td", "clang_include_clang_Basic_DiagnosticGroups.inc", "clang/include/clang/Basic", "-gen-clang-diag-groups"),
    ("clang", "clang/include/clang/Basic/StmtNodes.td", "clang_include_clang_AST_StmtNodes.inc", "clang/include", "-gen-clang-stmt-nodes"),
    ("clang", "clang/include/clang/Basic/Attr.td", "clang_include_clang_Basic_AttrList.inc", "clang/include", "-gen-clang-attr-list"),
    ("clang", "clang/include/clang/Basic/Attr.td", "clang_include_clang_Sema_AttrParsedAttrList.inc", "clang/include", "-gen-clang-attr-parsed-attr-list"),
    ("clang", "clang/include/clang/Basic/Attr.td", "clang_include_clang_Basic_AttrSubMatchRulesList.inc", "clang/include", "-gen-clang-attr-subject-match-rule-list"),
    ("clang", "clang/include/clang/Basic/Attr.td", "clang_include_clang_Basic_AttrHasAttributeImpl.inc", "clang/include", "-gen-clang-attr-has-attribute-impl"),
    ("clang", "clang/include/clang/Basic/Attr.td", "clang_include_clang_Sema_AttrParsedAttrKinds.inc", "clang/include", "-gen-clang-attr-parsed-attr-kinds"),
    ("clang", "clang/include/clang/Basic/Attr.td", "clang_include_clang_Sema_AttrSpellingListIndex.inc", "clang/include", "-gen-clang-attr-spelling-index"),
    ("clang", "clang/include/clang/Basic/TypeNodes.td", "clang_include_clang_AST_TypeNodes.inc", "clang/include", "-gen-clang-type-nodes"),
    ("clang", "clang/include/clang/Basic/DeclNodes.td", "clang_include_clang_AST_DeclNodes.inc", "clang/include", "-gen-clang-decl-nodes"),
    ("clang", "clang/include/clang/AST/CommentCommands.td", "clang_include_clang_AST_CommentCommandList.inc", "clang/include", "-gen-clang-comment-command-list"),
    ("clang", "clang/include/clang/StaticAnalyzer/Checkers/Checkers.td", "clang_include_clang_StaticAnalyzer_Checkers_Checkers.inc", "clang/include/clang/StaticAnalyzer/Checkers", "-gen-clang-sa-checkers"),
    ("clang", "clang/include/clang/Basic/arm_neon.td", "clang_include_clang_Basic_arm_neon.inc", "clang/include/clang/Basic", "-gen-arm-neon-sema"),
    ("clang", "clang/include/clang/Basic/arm_neon.td", "clang_include_clang_Basic_arm_neon.h", "clang/include/clang/Basic", "-gen-arm-neon"),
    ("clang", "clang/include/clang/Basic/arm_fp16.td", "clang_include_clang_Basic_arm_fp16.inc", "clang/include/clang/Basic", "-gen-arm-neon-sema"),
    ("clang", "clang/include/clang/Basic/arm_mve.td", "clang_include_clang_Basic_arm_mve_builtins.inc", "clang/include/clang/Basic", "-gen-arm-mve-builtin-def"),
    ("clang", "clang/include/clang/Basic/arm_cde.td", "clang_include_clang_Basic_arm_cde_builtins.inc", "clang/include/clang/Basic", "-gen-arm-cde-builtin-def"),
    ("clang", "clang/include/clang/Basic/arm_sve.td", "clang_include_clang_Basic_arm_sve_builtins.inc", "clang/include/clang/Basic", "-gen-arm-sve-builtins"),
    ("clang", "clang/include/clang/Basic/riscv_vector.td", "clang_include_clang_Basic_riscv_vector_builtins.inc", "clang/include/clang/Basic", "-gen-riscv-vector-builtins"),
    ("clang", "clang/include/clang/Basic/arm_sve.td", "clang_include_clang_Basic_arm_sve_typeflags.inc", "clang/include/clang/Basic", "-gen-arm-sve-typeflags"),
]

# Built after code generation, in this order
LIBRARIES: list[str] = [
    "llvm_lib_Option",
    "llvm_lib_TargetParser",
    "llvm_lib_MC",
    "llvm_lib_ProfileData",
    "llvm_lib_Demangle",
    "llvm_lib_DebugInfo",
    "llvm_lib_Object",
    "llvm_lib_TextAPI",
    "llvm_lib_BinaryFormat",
    "llvm_lib_IR",
    "llvm_lib_Remarks",
    "llvm_lib_Bitstream",
    "llvm_lib_Bitcode",
    "llvm_lib_IRReader",
    "llvm_lib_AsmParser",
    "llvm_lib_WindowsDriver",
    "llvm_lib_Target",
    "llvm_lib_Analysis",
    "llvm_lib_CodeGen",
    "llvm_lib_Transforms",
    "clang_lib_Driver",
    "clang_lib_Basic",
]

EXECUTABLE_NAME = "clang"
EXECUTABLE_PREFIX = "clang_tools_driver_driver"

# Link order for the final executable (dependents before dependencies)
EXECUTABLE_LIBRARIES: list[str] = [
    "llvm_lib_Target",
    "llvm_lib_CodeGen",
    "llvm_lib_Transforms",
    "llvm_lib_Analysis",
    "clang_lib_Driver",
    "llvm_lib_WindowsDriver",
    "clang_lib_Basic",
    "llvm_lib_TargetParser",
    "llvm_lib_Option",
    "llvm_lib_ProfileData",
    "llvm_lib_DebugInfo",
    "llvm_lib_Object",
    "llvm_lib_MC",
    "llvm_lib_BinaryFormat",
    "llvm_lib_TextAPI",
    "llvm_lib_Bitcode",
    "llvm_lib_IRReader",
    "llvm_lib_IR",
    "llvm_lib_Remarks",
    "llvm_lib_Bitstream",
    "llvm_lib_AsmParser",
    "llvm_lib_Support",
    "llvm_lib_Demangle",
]
