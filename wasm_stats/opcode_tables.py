"""Binary opcode tables: byte / prefixed sub-opcode -> (Opcode, immediate layout).

The tables are static data. The decoder indexes them, and the instruction
classifier derives proposal families (SIMD, atomics) from the prefixed ones.
"""

from __future__ import annotations

from .ir import Imm, Opcode

O = Opcode

OpcodeEntry = tuple[Opcode, Imm]

SINGLE_BYTE_OPCODES: dict[int, OpcodeEntry] = {
    0x00: (O.UNREACHABLE, Imm.NONE),
    0x01: (O.NOP, Imm.NONE),
    0x02: (O.BLOCK, Imm.BLOCK_TYPE),
    0x03: (O.LOOP, Imm.BLOCK_TYPE),
    0x04: (O.IF, Imm.BLOCK_TYPE),
    0x05: (O.ELSE, Imm.NONE),
    0x0B: (O.END, Imm.NONE),
    0x0C: (O.BR, Imm.LABEL),
    0x0D: (O.BR_IF, Imm.LABEL),
    0x0E: (O.BR_TABLE, Imm.BR_TABLE),
    0x0F: (O.RETURN, Imm.NONE),
    0x10: (O.CALL, Imm.FUNC),
    0x11: (O.CALL_INDIRECT, Imm.CALL_INDIRECT),
    0x12: (O.RETURN_CALL, Imm.FUNC),
    0x13: (O.RETURN_CALL_INDIRECT, Imm.CALL_INDIRECT),
    0x1A: (O.DROP, Imm.NONE),
    0x1B: (O.SELECT, Imm.NONE),
    0x1C: (O.SELECT_T, Imm.VALTYPES),
    0x20: (O.LOCAL_GET, Imm.LOCAL),
    0x21: (O.LOCAL_SET, Imm.LOCAL),
    0x22: (O.LOCAL_TEE, Imm.LOCAL),
    0x23: (O.GLOBAL_GET, Imm.GLOBAL),
    0x24: (O.GLOBAL_SET, Imm.GLOBAL),
    0x25: (O.TABLE_GET, Imm.TABLE),
    0x26: (O.TABLE_SET, Imm.TABLE),
    0x28: (O.I32_LOAD, Imm.MEMARG),
    0x29: (O.I64_LOAD, Imm.MEMARG),
    0x2A: (O.F32_LOAD, Imm.MEMARG),
    0x2B: (O.F64_LOAD, Imm.MEMARG),
    0x2C: (O.I32_LOAD8_S, Imm.MEMARG),
    0x2D: (O.I32_LOAD8_U, Imm.MEMARG),
    0x2E: (O.I32_LOAD16_S, Imm.MEMARG),
    0x2F: (O.I32_LOAD16_U, Imm.MEMARG),
    0x30: (O.I64_LOAD8_S, Imm.MEMARG),
    0x31: (O.I64_LOAD8_U, Imm.MEMARG),
    0x32: (O.I64_LOAD16_S, Imm.MEMARG),
    0x33: (O.I64_LOAD16_U, Imm.MEMARG),
    0x34: (O.I64_LOAD32_S, Imm.MEMARG),
    0x35: (O.I64_LOAD32_U, Imm.MEMARG),
    0x36: (O.I32_STORE, Imm.MEMARG),
    0x37: (O.I64_STORE, Imm.MEMARG),
    0x38: (O.F32_STORE, Imm.MEMARG),
    0x39: (O.F64_STORE, Imm.MEMARG),
    0x3A: (O.I32_STORE8, Imm.MEMARG),
    0x3B: (O.I32_STORE16, Imm.MEMARG),
    0x3C: (O.I64_STORE8, Imm.MEMARG),
    0x3D: (O.I64_STORE16, Imm.MEMARG),
    0x3E: (O.I64_STORE32, Imm.MEMARG),
    0x3F: (O.MEMORY_SIZE, Imm.MEMORY),
    0x40: (O.MEMORY_GROW, Imm.MEMORY),
    0x41: (O.I32_CONST, Imm.I32),
    0x42: (O.I64_CONST, Imm.I64),
    0x43: (O.F32_CONST, Imm.F32),
    0x44: (O.F64_CONST, Imm.F64),
    0x45: (O.I32_EQZ, Imm.NONE),
    0x46: (O.I32_EQ, Imm.NONE),
    0x47: (O.I32_NE, Imm.NONE),
    0x48: (O.I32_LT_S, Imm.NONE),
    0x49: (O.I32_LT_U, Imm.NONE),
    0x4A: (O.I32_GT_S, Imm.NONE),
    0x4B: (O.I32_GT_U, Imm.NONE),
    0x4C: (O.I32_LE_S, Imm.NONE),
    0x4D: (O.I32_LE_U, Imm.NONE),
    0x4E: (O.I32_GE_S, Imm.NONE),
    0x4F: (O.I32_GE_U, Imm.NONE),
    0x50: (O.I64_EQZ, Imm.NONE),
    0x51: (O.I64_EQ, Imm.NONE),
    0x52: (O.I64_NE, Imm.NONE),
    0x53: (O.I64_LT_S, Imm.NONE),
    0x54: (O.I64_LT_U, Imm.NONE),
    0x55: (O.I64_GT_S, Imm.NONE),
    0x56: (O.I64_GT_U, Imm.NONE),
    0x57: (O.I64_LE_S, Imm.NONE),
    0x58: (O.I64_LE_U, Imm.NONE),
    0x59: (O.I64_GE_S, Imm.NONE),
    0x5A: (O.I64_GE_U, Imm.NONE),
    0x5B: (O.F32_EQ, Imm.NONE),
    0x5C: (O.F32_NE, Imm.NONE),
    0x5D: (O.F32_LT, Imm.NONE),
    0x5E: (O.F32_GT, Imm.NONE),
    0x5F: (O.F32_LE, Imm.NONE),
    0x60: (O.F32_GE, Imm.NONE),
    0x61: (O.F64_EQ, Imm.NONE),
    0x62: (O.F64_NE, Imm.NONE),
    0x63: (O.F64_LT, Imm.NONE),
    0x64: (O.F64_GT, Imm.NONE),
    0x65: (O.F64_LE, Imm.NONE),
    0x66: (O.F64_GE, Imm.NONE),
    0x67: (O.I32_CLZ, Imm.NONE),
    0x68: (O.I32_CTZ, Imm.NONE),
    0x69: (O.I32_POPCNT, Imm.NONE),
    0x6A: (O.I32_ADD, Imm.NONE),
    0x6B: (O.I32_SUB, Imm.NONE),
    0x6C: (O.I32_MUL, Imm.NONE),
    0x6D: (O.I32_DIV_S, Imm.NONE),
    0x6E: (O.I32_DIV_U, Imm.NONE),
    0x6F: (O.I32_REM_S, Imm.NONE),
    0x70: (O.I32_REM_U, Imm.NONE),
    0x71: (O.I32_AND, Imm.NONE),
    0x72: (O.I32_OR, Imm.NONE),
    0x73: (O.I32_XOR, Imm.NONE),
    0x74: (O.I32_SHL, Imm.NONE),
    0x75: (O.I32_SHR_S, Imm.NONE),
    0x76: (O.I32_SHR_U, Imm.NONE),
    0x77: (O.I32_ROTL, Imm.NONE),
    0x78: (O.I32_ROTR, Imm.NONE),
    0x79: (O.I64_CLZ, Imm.NONE),
    0x7A: (O.I64_CTZ, Imm.NONE),
    0x7B: (O.I64_POPCNT, Imm.NONE),
    0x7C: (O.I64_ADD, Imm.NONE),
    0x7D: (O.I64_SUB, Imm.NONE),
    0x7E: (O.I64_MUL, Imm.NONE),
    0x7F: (O.I64_DIV_S, Imm.NONE),
    0x80: (O.I64_DIV_U, Imm.NONE),
    0x81: (O.I64_REM_S, Imm.NONE),
    0x82: (O.I64_REM_U, Imm.NONE),
    0x83: (O.I64_AND, Imm.NONE),
    0x84: (O.I64_OR, Imm.NONE),
    0x85: (O.I64_XOR, Imm.NONE),
    0x86: (O.I64_SHL, Imm.NONE),
    0x87: (O.I64_SHR_S, Imm.NONE),
    0x88: (O.I64_SHR_U, Imm.NONE),
    0x89: (O.I64_ROTL, Imm.NONE),
    0x8A: (O.I64_ROTR, Imm.NONE),
    0x8B: (O.F32_ABS, Imm.NONE),
    0x8C: (O.F32_NEG, Imm.NONE),
    0x8D: (O.F32_CEIL, Imm.NONE),
    0x8E: (O.F32_FLOOR, Imm.NONE),
    0x8F: (O.F32_TRUNC, Imm.NONE),
    0x90: (O.F32_NEAREST, Imm.NONE),
    0x91: (O.F32_SQRT, Imm.NONE),
    0x92: (O.F32_ADD, Imm.NONE),
    0x93: (O.F32_SUB, Imm.NONE),
    0x94: (O.F32_MUL, Imm.NONE),
    0x95: (O.F32_DIV, Imm.NONE),
    0x96: (O.F32_MIN, Imm.NONE),
    0x97: (O.F32_MAX, Imm.NONE),
    0x98: (O.F32_COPYSIGN, Imm.NONE),
    0x99: (O.F64_ABS, Imm.NONE),
    0x9A: (O.F64_NEG, Imm.NONE),
    0x9B: (O.F64_CEIL, Imm.NONE),
    0x9C: (O.F64_FLOOR, Imm.NONE),
    0x9D: (O.F64_TRUNC, Imm.NONE),
    0x9E: (O.F64_NEAREST, Imm.NONE),
    0x9F: (O.F64_SQRT, Imm.NONE),
    0xA0: (O.F64_ADD, Imm.NONE),
    0xA1: (O.F64_SUB, Imm.NONE),
    0xA2: (O.F64_MUL, Imm.NONE),
    0xA3: (O.F64_DIV, Imm.NONE),
    0xA4: (O.F64_MIN, Imm.NONE),
    0xA5: (O.F64_MAX, Imm.NONE),
    0xA6: (O.F64_COPYSIGN, Imm.NONE),
    0xA7: (O.I32_WRAP_I64, Imm.NONE),
    0xA8: (O.I32_TRUNC_F32_S, Imm.NONE),
    0xA9: (O.I32_TRUNC_F32_U, Imm.NONE),
    0xAA: (O.I32_TRUNC_F64_S, Imm.NONE),
    0xAB: (O.I32_TRUNC_F64_U, Imm.NONE),
    0xAC: (O.I64_EXTEND_I32_S, Imm.NONE),
    0xAD: (O.I64_EXTEND_I32_U, Imm.NONE),
    0xAE: (O.I64_TRUNC_F32_S, Imm.NONE),
    0xAF: (O.I64_TRUNC_F32_U, Imm.NONE),
    0xB0: (O.I64_TRUNC_F64_S, Imm.NONE),
    0xB1: (O.I64_TRUNC_F64_U, Imm.NONE),
    0xB2: (O.F32_CONVERT_I32_S, Imm.NONE),
    0xB3: (O.F32_CONVERT_I32_U, Imm.NONE),
    0xB4: (O.F32_CONVERT_I64_S, Imm.NONE),
    0xB5: (O.F32_CONVERT_I64_U, Imm.NONE),
    0xB6: (O.F32_DEMOTE_F64, Imm.NONE),
    0xB7: (O.F64_CONVERT_I32_S, Imm.NONE),
    0xB8: (O.F64_CONVERT_I32_U, Imm.NONE),
    0xB9: (O.F64_CONVERT_I64_S, Imm.NONE),
    0xBA: (O.F64_CONVERT_I64_U, Imm.NONE),
    0xBB: (O.F64_PROMOTE_F32, Imm.NONE),
    0xBC: (O.I32_REINTERPRET_F32, Imm.NONE),
    0xBD: (O.I64_REINTERPRET_F64, Imm.NONE),
    0xBE: (O.F32_REINTERPRET_I32, Imm.NONE),
    0xBF: (O.F64_REINTERPRET_I64, Imm.NONE),
    0xC0: (O.I32_EXTEND8_S, Imm.NONE),
    0xC1: (O.I32_EXTEND16_S, Imm.NONE),
    0xC2: (O.I64_EXTEND8_S, Imm.NONE),
    0xC3: (O.I64_EXTEND16_S, Imm.NONE),
    0xC4: (O.I64_EXTEND32_S, Imm.NONE),
    0xD0: (O.REF_NULL, Imm.REF_TYPE),
    0xD1: (O.REF_IS_NULL, Imm.NONE),
    0xD2: (O.REF_FUNC, Imm.FUNC),
}

MISC_OPCODES: dict[int, OpcodeEntry] = {
    0: (O.I32_TRUNC_SAT_F32_S, Imm.NONE),
    1: (O.I32_TRUNC_SAT_F32_U, Imm.NONE),
    2: (O.I32_TRUNC_SAT_F64_S, Imm.NONE),
    3: (O.I32_TRUNC_SAT_F64_U, Imm.NONE),
    4: (O.I64_TRUNC_SAT_F32_S, Imm.NONE),
    5: (O.I64_TRUNC_SAT_F32_U, Imm.NONE),
    6: (O.I64_TRUNC_SAT_F64_S, Imm.NONE),
    7: (O.I64_TRUNC_SAT_F64_U, Imm.NONE),
    8: (O.MEMORY_INIT, Imm.DATA_MEMORY),
    9: (O.DATA_DROP, Imm.DATA),
    10: (O.MEMORY_COPY, Imm.MEMORY_PAIR),
    11: (O.MEMORY_FILL, Imm.MEMORY),
    12: (O.TABLE_INIT, Imm.ELEM_TABLE),
    13: (O.ELEM_DROP, Imm.ELEM),
    14: (O.TABLE_COPY, Imm.TABLE_PAIR),
    15: (O.TABLE_GROW, Imm.TABLE),
    16: (O.TABLE_SIZE, Imm.TABLE),
    17: (O.TABLE_FILL, Imm.TABLE),
}

SIMD_OPCODES: dict[int, OpcodeEntry] = {
    0x00: (O.V128_LOAD, Imm.MEMARG),
    0x01: (O.V128_LOAD8X8_S, Imm.MEMARG),
    0x02: (O.V128_LOAD8X8_U, Imm.MEMARG),
    0x03: (O.V128_LOAD16X4_S, Imm.MEMARG),
    0x04: (O.V128_LOAD16X4_U, Imm.MEMARG),
    0x05: (O.V128_LOAD32X2_S, Imm.MEMARG),
    0x06: (O.V128_LOAD32X2_U, Imm.MEMARG),
    0x07: (O.V128_LOAD8_SPLAT, Imm.MEMARG),
    0x08: (O.V128_LOAD16_SPLAT, Imm.MEMARG),
    0x09: (O.V128_LOAD32_SPLAT, Imm.MEMARG),
    0x0A: (O.V128_LOAD64_SPLAT, Imm.MEMARG),
    0x0B: (O.V128_STORE, Imm.MEMARG),
    0x0C: (O.V128_CONST, Imm.V128),
    0x0D: (O.I8X16_SHUFFLE, Imm.SHUFFLE),
    0x0E: (O.I8X16_SWIZZLE, Imm.NONE),
    0x0F: (O.I8X16_SPLAT, Imm.NONE),
    0x10: (O.I16X8_SPLAT, Imm.NONE),
    0x11: (O.I32X4_SPLAT, Imm.NONE),
    0x12: (O.I64X2_SPLAT, Imm.NONE),
    0x13: (O.F32X4_SPLAT, Imm.NONE),
    0x14: (O.F64X2_SPLAT, Imm.NONE),
    0x15: (O.I8X16_EXTRACT_LANE_S, Imm.LANE),
    0x16: (O.I8X16_EXTRACT_LANE_U, Imm.LANE),
    0x17: (O.I8X16_REPLACE_LANE, Imm.LANE),
    0x18: (O.I16X8_EXTRACT_LANE_S, Imm.LANE),
    0x19: (O.I16X8_EXTRACT_LANE_U, Imm.LANE),
    0x1A: (O.I16X8_REPLACE_LANE, Imm.LANE),
    0x1B: (O.I32X4_EXTRACT_LANE, Imm.LANE),
    0x1C: (O.I32X4_REPLACE_LANE, Imm.LANE),
    0x1D: (O.I64X2_EXTRACT_LANE, Imm.LANE),
    0x1E: (O.I64X2_REPLACE_LANE, Imm.LANE),
    0x1F: (O.F32X4_EXTRACT_LANE, Imm.LANE),
    0x20: (O.F32X4_REPLACE_LANE, Imm.LANE),
    0x21: (O.F64X2_EXTRACT_LANE, Imm.LANE),
    0x22: (O.F64X2_REPLACE_LANE, Imm.LANE),
    0x23: (O.I8X16_EQ, Imm.NONE),
    0x24: (O.I8X16_NE, Imm.NONE),
    0x25: (O.I8X16_LT_S, Imm.NONE),
    0x26: (O.I8X16_LT_U, Imm.NONE),
    0x27: (O.I8X16_GT_S, Imm.NONE),
    0x28: (O.I8X16_GT_U, Imm.NONE),
    0x29: (O.I8X16_LE_S, Imm.NONE),
    0x2A: (O.I8X16_LE_U, Imm.NONE),
    0x2B: (O.I8X16_GE_S, Imm.NONE),
    0x2C: (O.I8X16_GE_U, Imm.NONE),
    0x2D: (O.I16X8_EQ, Imm.NONE),
    0x2E: (O.I16X8_NE, Imm.NONE),
    0x2F: (O.I16X8_LT_S, Imm.NONE),
    0x30: (O.I16X8_LT_U, Imm.NONE),
    0x31: (O.I16X8_GT_S, Imm.NONE),
    0x32: (O.I16X8_GT_U, Imm.NONE),
    0x33: (O.I16X8_LE_S, Imm.NONE),
    0x34: (O.I16X8_LE_U, Imm.NONE),
    0x35: (O.I16X8_GE_S, Imm.NONE),
    0x36: (O.I16X8_GE_U, Imm.NONE),
    0x37: (O.I32X4_EQ, Imm.NONE),
    0x38: (O.I32X4_NE, Imm.NONE),
    0x39: (O.I32X4_LT_S, Imm.NONE),
    0x3A: (O.I32X4_LT_U, Imm.NONE),
    0x3B: (O.I32X4_GT_S, Imm.NONE),
    0x3C: (O.I32X4_GT_U, Imm.NONE),
    0x3D: (O.I32X4_LE_S, Imm.NONE),
    0x3E: (O.I32X4_LE_U, Imm.NONE),
    0x3F: (O.I32X4_GE_S, Imm.NONE),
    0x40: (O.I32X4_GE_U, Imm.NONE),
    0x41: (O.F32X4_EQ, Imm.NONE),
    0x42: (O.F32X4_NE, Imm.NONE),
    0x43: (O.F32X4_LT, Imm.NONE),
    0x44: (O.F32X4_GT, Imm.NONE),
    0x45: (O.F32X4_LE, Imm.NONE),
    0x46: (O.F32X4_GE, Imm.NONE),
    0x47: (O.F64X2_EQ, Imm.NONE),
    0x48: (O.F64X2_NE, Imm.NONE),
    0x49: (O.F64X2_LT, Imm.NONE),
    0x4A: (O.F64X2_GT, Imm.NONE),
    0x4B: (O.F64X2_LE, Imm.NONE),
    0x4C: (O.F64X2_GE, Imm.NONE),
    0x4D: (O.V128_NOT, Imm.NONE),
    0x4E: (O.V128_AND, Imm.NONE),
    0x4F: (O.V128_ANDNOT, Imm.NONE),
    0x50: (O.V128_OR, Imm.NONE),
    0x51: (O.V128_XOR, Imm.NONE),
    0x52: (O.V128_BITSELECT, Imm.NONE),
    0x53: (O.V128_ANY_TRUE, Imm.NONE),
    0x54: (O.V128_LOAD8_LANE, Imm.MEMARG_LANE),
    0x55: (O.V128_LOAD16_LANE, Imm.MEMARG_LANE),
    0x56: (O.V128_LOAD32_LANE, Imm.MEMARG_LANE),
    0x57: (O.V128_LOAD64_LANE, Imm.MEMARG_LANE),
    0x58: (O.V128_STORE8_LANE, Imm.MEMARG_LANE),
    0x59: (O.V128_STORE16_LANE, Imm.MEMARG_LANE),
    0x5A: (O.V128_STORE32_LANE, Imm.MEMARG_LANE),
    0x5B: (O.V128_STORE64_LANE, Imm.MEMARG_LANE),
    0x5C: (O.V128_LOAD32_ZERO, Imm.MEMARG),
    0x5D: (O.V128_LOAD64_ZERO, Imm.MEMARG),
    0x5E: (O.F32X4_DEMOTE_F64X2_ZERO, Imm.NONE),
    0x5F: (O.F64X2_PROMOTE_LOW_F32X4, Imm.NONE),
    0x60: (O.I8X16_ABS, Imm.NONE),
    0x61: (O.I8X16_NEG, Imm.NONE),
    0x62: (O.I8X16_POPCNT, Imm.NONE),
    0x63: (O.I8X16_ALL_TRUE, Imm.NONE),
    0x64: (O.I8X16_BITMASK, Imm.NONE),
    0x65: (O.I8X16_NARROW_I16X8_S, Imm.NONE),
    0x66: (O.I8X16_NARROW_I16X8_U, Imm.NONE),
    0x67: (O.F32X4_CEIL, Imm.NONE),
    0x68: (O.F32X4_FLOOR, Imm.NONE),
    0x69: (O.F32X4_TRUNC, Imm.NONE),
    0x6A: (O.F32X4_NEAREST, Imm.NONE),
    0x6B: (O.I8X16_SHL, Imm.NONE),
    0x6C: (O.I8X16_SHR_S, Imm.NONE),
    0x6D: (O.I8X16_SHR_U, Imm.NONE),
    0x6E: (O.I8X16_ADD, Imm.NONE),
    0x6F: (O.I8X16_ADD_SAT_S, Imm.NONE),
    0x70: (O.I8X16_ADD_SAT_U, Imm.NONE),
    0x71: (O.I8X16_SUB, Imm.NONE),
    0x72: (O.I8X16_SUB_SAT_S, Imm.NONE),
    0x73: (O.I8X16_SUB_SAT_U, Imm.NONE),
    0x74: (O.F64X2_CEIL, Imm.NONE),
    0x75: (O.F64X2_FLOOR, Imm.NONE),
    0x76: (O.I8X16_MIN_S, Imm.NONE),
    0x77: (O.I8X16_MIN_U, Imm.NONE),
    0x78: (O.I8X16_MAX_S, Imm.NONE),
    0x79: (O.I8X16_MAX_U, Imm.NONE),
    0x7A: (O.F64X2_TRUNC, Imm.NONE),
    0x7B: (O.I8X16_AVGR_U, Imm.NONE),
    0x7C: (O.I16X8_EXTADD_PAIRWISE_I8X16_S, Imm.NONE),
    0x7D: (O.I16X8_EXTADD_PAIRWISE_I8X16_U, Imm.NONE),
    0x7E: (O.I32X4_EXTADD_PAIRWISE_I16X8_S, Imm.NONE),
    0x7F: (O.I32X4_EXTADD_PAIRWISE_I16X8_U, Imm.NONE),
    0x80: (O.I16X8_ABS, Imm.NONE),
    0x81: (O.I16X8_NEG, Imm.NONE),
    0x82: (O.I16X8_Q15MULR_SAT_S, Imm.NONE),
    0x83: (O.I16X8_ALL_TRUE, Imm.NONE),
    0x84: (O.I16X8_BITMASK, Imm.NONE),
    0x85: (O.I16X8_NARROW_I32X4_S, Imm.NONE),
    0x86: (O.I16X8_NARROW_I32X4_U, Imm.NONE),
    0x87: (O.I16X8_EXTEND_LOW_I8X16_S, Imm.NONE),
    0x88: (O.I16X8_EXTEND_HIGH_I8X16_S, Imm.NONE),
    0x89: (O.I16X8_EXTEND_LOW_I8X16_U, Imm.NONE),
    0x8A: (O.I16X8_EXTEND_HIGH_I8X16_U, Imm.NONE),
    0x8B: (O.I16X8_SHL, Imm.NONE),
    0x8C: (O.I16X8_SHR_S, Imm.NONE),
    0x8D: (O.I16X8_SHR_U, Imm.NONE),
    0x8E: (O.I16X8_ADD, Imm.NONE),
    0x8F: (O.I16X8_ADD_SAT_S, Imm.NONE),
    0x90: (O.I16X8_ADD_SAT_U, Imm.NONE),
    0x91: (O.I16X8_SUB, Imm.NONE),
    0x92: (O.I16X8_SUB_SAT_S, Imm.NONE),
    0x93: (O.I16X8_SUB_SAT_U, Imm.NONE),
    0x94: (O.F64X2_NEAREST, Imm.NONE),
    0x95: (O.I16X8_MUL, Imm.NONE),
    0x96: (O.I16X8_MIN_S, Imm.NONE),
    0x97: (O.I16X8_MIN_U, Imm.NONE),
    0x98: (O.I16X8_MAX_S, Imm.NONE),
    0x99: (O.I16X8_MAX_U, Imm.NONE),
    0x9B: (O.I16X8_AVGR_U, Imm.NONE),
    0x9C: (O.I16X8_EXTMUL_LOW_I8X16_S, Imm.NONE),
    0x9D: (O.I16X8_EXTMUL_HIGH_I8X16_S, Imm.NONE),
    0x9E: (O.I16X8_EXTMUL_LOW_I8X16_U, Imm.NONE),
    0x9F: (O.I16X8_EXTMUL_HIGH_I8X16_U, Imm.NONE),
    0xA0: (O.I32X4_ABS, Imm.NONE),
    0xA1: (O.I32X4_NEG, Imm.NONE),
    0xA3: (O.I32X4_ALL_TRUE, Imm.NONE),
    0xA4: (O.I32X4_BITMASK, Imm.NONE),
    0xA7: (O.I32X4_EXTEND_LOW_I16X8_S, Imm.NONE),
    0xA8: (O.I32X4_EXTEND_HIGH_I16X8_S, Imm.NONE),
    0xA9: (O.I32X4_EXTEND_LOW_I16X8_U, Imm.NONE),
    0xAA: (O.I32X4_EXTEND_HIGH_I16X8_U, Imm.NONE),
    0xAB: (O.I32X4_SHL, Imm.NONE),
    0xAC: (O.I32X4_SHR_S, Imm.NONE),
    0xAD: (O.I32X4_SHR_U, Imm.NONE),
    0xAE: (O.I32X4_ADD, Imm.NONE),
    0xB1: (O.I32X4_SUB, Imm.NONE),
    0xB5: (O.I32X4_MUL, Imm.NONE),
    0xB6: (O.I32X4_MIN_S, Imm.NONE),
    0xB7: (O.I32X4_MIN_U, Imm.NONE),
    0xB8: (O.I32X4_MAX_S, Imm.NONE),
    0xB9: (O.I32X4_MAX_U, Imm.NONE),
    0xBA: (O.I32X4_DOT_I16X8_S, Imm.NONE),
    0xBC: (O.I32X4_EXTMUL_LOW_I16X8_S, Imm.NONE),
    0xBD: (O.I32X4_EXTMUL_HIGH_I16X8_S, Imm.NONE),
    0xBE: (O.I32X4_EXTMUL_LOW_I16X8_U, Imm.NONE),
    0xBF: (O.I32X4_EXTMUL_HIGH_I16X8_U, Imm.NONE),
    0xC0: (O.I64X2_ABS, Imm.NONE),
    0xC1: (O.I64X2_NEG, Imm.NONE),
    0xC3: (O.I64X2_ALL_TRUE, Imm.NONE),
    0xC4: (O.I64X2_BITMASK, Imm.NONE),
    0xC7: (O.I64X2_EXTEND_LOW_I32X4_S, Imm.NONE),
    0xC8: (O.I64X2_EXTEND_HIGH_I32X4_S, Imm.NONE),
    0xC9: (O.I64X2_EXTEND_LOW_I32X4_U, Imm.NONE),
    0xCA: (O.I64X2_EXTEND_HIGH_I32X4_U, Imm.NONE),
    0xCB: (O.I64X2_SHL, Imm.NONE),
    0xCC: (O.I64X2_SHR_S, Imm.NONE),
    0xCD: (O.I64X2_SHR_U, Imm.NONE),
    0xCE: (O.I64X2_ADD, Imm.NONE),
    0xD1: (O.I64X2_SUB, Imm.NONE),
    0xD5: (O.I64X2_MUL, Imm.NONE),
    0xD6: (O.I64X2_EQ, Imm.NONE),
    0xD7: (O.I64X2_NE, Imm.NONE),
    0xD8: (O.I64X2_LT_S, Imm.NONE),
    0xD9: (O.I64X2_GT_S, Imm.NONE),
    0xDA: (O.I64X2_LE_S, Imm.NONE),
    0xDB: (O.I64X2_GE_S, Imm.NONE),
    0xDC: (O.I64X2_EXTMUL_LOW_I32X4_S, Imm.NONE),
    0xDD: (O.I64X2_EXTMUL_HIGH_I32X4_S, Imm.NONE),
    0xDE: (O.I64X2_EXTMUL_LOW_I32X4_U, Imm.NONE),
    0xDF: (O.I64X2_EXTMUL_HIGH_I32X4_U, Imm.NONE),
    0xE0: (O.F32X4_ABS, Imm.NONE),
    0xE1: (O.F32X4_NEG, Imm.NONE),
    0xE3: (O.F32X4_SQRT, Imm.NONE),
    0xE4: (O.F32X4_ADD, Imm.NONE),
    0xE5: (O.F32X4_SUB, Imm.NONE),
    0xE6: (O.F32X4_MUL, Imm.NONE),
    0xE7: (O.F32X4_DIV, Imm.NONE),
    0xE8: (O.F32X4_MIN, Imm.NONE),
    0xE9: (O.F32X4_MAX, Imm.NONE),
    0xEA: (O.F32X4_PMIN, Imm.NONE),
    0xEB: (O.F32X4_PMAX, Imm.NONE),
    0xEC: (O.F64X2_ABS, Imm.NONE),
    0xED: (O.F64X2_NEG, Imm.NONE),
    0xEF: (O.F64X2_SQRT, Imm.NONE),
    0xF0: (O.F64X2_ADD, Imm.NONE),
    0xF1: (O.F64X2_SUB, Imm.NONE),
    0xF2: (O.F64X2_MUL, Imm.NONE),
    0xF3: (O.F64X2_DIV, Imm.NONE),
    0xF4: (O.F64X2_MIN, Imm.NONE),
    0xF5: (O.F64X2_MAX, Imm.NONE),
    0xF6: (O.F64X2_PMIN, Imm.NONE),
    0xF7: (O.F64X2_PMAX, Imm.NONE),
    0xF8: (O.I32X4_TRUNC_SAT_F32X4_S, Imm.NONE),
    0xF9: (O.I32X4_TRUNC_SAT_F32X4_U, Imm.NONE),
    0xFA: (O.F32X4_CONVERT_I32X4_S, Imm.NONE),
    0xFB: (O.F32X4_CONVERT_I32X4_U, Imm.NONE),
    0xFC: (O.I32X4_TRUNC_SAT_F64X2_S_ZERO, Imm.NONE),
    0xFD: (O.I32X4_TRUNC_SAT_F64X2_U_ZERO, Imm.NONE),
    0xFE: (O.F64X2_CONVERT_LOW_I32X4_S, Imm.NONE),
    0xFF: (O.F64X2_CONVERT_LOW_I32X4_U, Imm.NONE),
}

ATOMIC_OPCODES: dict[int, OpcodeEntry] = {
    0x00: (O.MEMORY_ATOMIC_NOTIFY, Imm.MEMARG),
    0x01: (O.MEMORY_ATOMIC_WAIT32, Imm.MEMARG),
    0x02: (O.MEMORY_ATOMIC_WAIT64, Imm.MEMARG),
    0x03: (O.ATOMIC_FENCE, Imm.ZERO_BYTE),
    0x10: (O.I32_ATOMIC_LOAD, Imm.MEMARG),
    0x11: (O.I64_ATOMIC_LOAD, Imm.MEMARG),
    0x12: (O.I32_ATOMIC_LOAD8_U, Imm.MEMARG),
    0x13: (O.I32_ATOMIC_LOAD16_U, Imm.MEMARG),
    0x14: (O.I64_ATOMIC_LOAD8_U, Imm.MEMARG),
    0x15: (O.I64_ATOMIC_LOAD16_U, Imm.MEMARG),
    0x16: (O.I64_ATOMIC_LOAD32_U, Imm.MEMARG),
    0x17: (O.I32_ATOMIC_STORE, Imm.MEMARG),
    0x18: (O.I64_ATOMIC_STORE, Imm.MEMARG),
    0x19: (O.I32_ATOMIC_STORE8, Imm.MEMARG),
    0x1A: (O.I32_ATOMIC_STORE16, Imm.MEMARG),
    0x1B: (O.I64_ATOMIC_STORE8, Imm.MEMARG),
    0x1C: (O.I64_ATOMIC_STORE16, Imm.MEMARG),
    0x1D: (O.I64_ATOMIC_STORE32, Imm.MEMARG),
    0x1E: (O.I32_ATOMIC_RMW_ADD, Imm.MEMARG),
    0x1F: (O.I64_ATOMIC_RMW_ADD, Imm.MEMARG),
    0x20: (O.I32_ATOMIC_RMW8_ADD_U, Imm.MEMARG),
    0x21: (O.I32_ATOMIC_RMW16_ADD_U, Imm.MEMARG),
    0x22: (O.I64_ATOMIC_RMW8_ADD_U, Imm.MEMARG),
    0x23: (O.I64_ATOMIC_RMW16_ADD_U, Imm.MEMARG),
    0x24: (O.I64_ATOMIC_RMW32_ADD_U, Imm.MEMARG),
    0x25: (O.I32_ATOMIC_RMW_SUB, Imm.MEMARG),
    0x26: (O.I64_ATOMIC_RMW_SUB, Imm.MEMARG),
    0x27: (O.I32_ATOMIC_RMW8_SUB_U, Imm.MEMARG),
    0x28: (O.I32_ATOMIC_RMW16_SUB_U, Imm.MEMARG),
    0x29: (O.I64_ATOMIC_RMW8_SUB_U, Imm.MEMARG),
    0x2A: (O.I64_ATOMIC_RMW16_SUB_U, Imm.MEMARG),
    0x2B: (O.I64_ATOMIC_RMW32_SUB_U, Imm.MEMARG),
    0x2C: (O.I32_ATOMIC_RMW_AND, Imm.MEMARG),
    0x2D: (O.I64_ATOMIC_RMW_AND, Imm.MEMARG),
    0x2E: (O.I32_ATOMIC_RMW8_AND_U, Imm.MEMARG),
    0x2F: (O.I32_ATOMIC_RMW16_AND_U, Imm.MEMARG),
    0x30: (O.I64_ATOMIC_RMW8_AND_U, Imm.MEMARG),
    0x31: (O.I64_ATOMIC_RMW16_AND_U, Imm.MEMARG),
    0x32: (O.I64_ATOMIC_RMW32_AND_U, Imm.MEMARG),
    0x33: (O.I32_ATOMIC_RMW_OR, Imm.MEMARG),
    0x34: (O.I64_ATOMIC_RMW_OR, Imm.MEMARG),
    0x35: (O.I32_ATOMIC_RMW8_OR_U, Imm.MEMARG),
    0x36: (O.I32_ATOMIC_RMW16_OR_U, Imm.MEMARG),
    0x37: (O.I64_ATOMIC_RMW8_OR_U, Imm.MEMARG),
    0x38: (O.I64_ATOMIC_RMW16_OR_U, Imm.MEMARG),
    0x39: (O.I64_ATOMIC_RMW32_OR_U, Imm.MEMARG),
    0x3A: (O.I32_ATOMIC_RMW_XOR, Imm.MEMARG),
    0x3B: (O.I64_ATOMIC_RMW_XOR, Imm.MEMARG),
    0x3C: (O.I32_ATOMIC_RMW8_XOR_U, Imm.MEMARG),
    0x3D: (O.I32_ATOMIC_RMW16_XOR_U, Imm.MEMARG),
    0x3E: (O.I64_ATOMIC_RMW8_XOR_U, Imm.MEMARG),
    0x3F: (O.I64_ATOMIC_RMW16_XOR_U, Imm.MEMARG),
    0x40: (O.I64_ATOMIC_RMW32_XOR_U, Imm.MEMARG),
    0x41: (O.I32_ATOMIC_RMW_XCHG, Imm.MEMARG),
    0x42: (O.I64_ATOMIC_RMW_XCHG, Imm.MEMARG),
    0x43: (O.I32_ATOMIC_RMW8_XCHG_U, Imm.MEMARG),
    0x44: (O.I32_ATOMIC_RMW16_XCHG_U, Imm.MEMARG),
    0x45: (O.I64_ATOMIC_RMW8_XCHG_U, Imm.MEMARG),
    0x46: (O.I64_ATOMIC_RMW16_XCHG_U, Imm.MEMARG),
    0x47: (O.I64_ATOMIC_RMW32_XCHG_U, Imm.MEMARG),
    0x48: (O.I32_ATOMIC_RMW_CMPXCHG, Imm.MEMARG),
    0x49: (O.I64_ATOMIC_RMW_CMPXCHG, Imm.MEMARG),
    0x4A: (O.I32_ATOMIC_RMW8_CMPXCHG_U, Imm.MEMARG),
    0x4B: (O.I32_ATOMIC_RMW16_CMPXCHG_U, Imm.MEMARG),
    0x4C: (O.I64_ATOMIC_RMW8_CMPXCHG_U, Imm.MEMARG),
    0x4D: (O.I64_ATOMIC_RMW16_CMPXCHG_U, Imm.MEMARG),
    0x4E: (O.I64_ATOMIC_RMW32_CMPXCHG_U, Imm.MEMARG),
}

PREFIXED_OPCODES: dict[int, dict[int, OpcodeEntry]] = {
    0xFC: MISC_OPCODES,
    0xFD: SIMD_OPCODES,
    0xFE: ATOMIC_OPCODES,
}

SIMD_OPS: frozenset[Opcode] = frozenset(op for op, _ in SIMD_OPCODES.values())
ATOMIC_OPS: frozenset[Opcode] = frozenset(op for op, _ in ATOMIC_OPCODES.values())
