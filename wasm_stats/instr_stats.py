"""Instruction classifier — opcode -> (category, optional proposal) counts.

``CLASSIFICATION`` is total over ``Opcode``: every opcode maps to one
category (tail calls map to two) and at most one proposal.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Sequence

from .decoder import LazyFuncBody
from .ir import Instruction, Opcode
from .opcode_tables import ATOMIC_OPS, SIMD_OPS
from .stats_types import InstructionCategoryStats, InstructionStats, ProposalStats

logger = logging.getLogger(__name__)

O = Opcode


class Category(str, Enum):
    LOAD_STORE = "load_store"
    LOCAL_VAR = "local_var"
    GLOBAL_VAR = "global_var"
    TABLE = "table"
    MEMORY = "memory"
    CONTROL_FLOW = "control_flow"
    DIRECT_CALLS = "direct_calls"
    INDIRECT_CALLS = "indirect_calls"
    CONSTANTS = "constants"
    WAIT_NOTIFY = "wait_notify"
    OTHER = "other"


class Proposal(str, Enum):
    ATOMICS = "atomics"
    REF_TYPES = "ref_types"
    SIMD = "simd"
    TAIL_CALLS = "tail_calls"
    BULK = "bulk"
    MULTI_VALUE = "multi_value"
    NON_TRAPPING_CONV = "non_trapping_conv"
    SIGN_EXTEND = "sign_extend"
    MUTABLE_EXTERNALS = "mutable_externals"
    BIGINT_EXTERNALS = "bigint_externals"


@dataclass(frozen=True)
class Classification:
    categories: tuple[Category, ...]
    proposal: Proposal | None = None


# ── opcode families ──────────────────────────────────────────────

_CONTROL_FLOW = frozenset(
    {
        O.BLOCK,
        O.LOOP,
        O.IF,
        O.ELSE,
        O.END,
        O.UNREACHABLE,
        O.BR,
        O.BR_IF,
        O.BR_TABLE,
        O.RETURN,
        O.SELECT,
        O.SELECT_T,
        O.NOP,
        O.DROP,
    }
)

_NUMERIC_CONSTANTS = frozenset({O.I32_CONST, O.I64_CONST, O.F32_CONST, O.F64_CONST})

_MEMORY_LOAD_STORE = frozenset(
    {
        O.I32_LOAD,
        O.I64_LOAD,
        O.F32_LOAD,
        O.F64_LOAD,
        O.I32_LOAD8_S,
        O.I32_LOAD8_U,
        O.I32_LOAD16_S,
        O.I32_LOAD16_U,
        O.I64_LOAD8_S,
        O.I64_LOAD8_U,
        O.I64_LOAD16_S,
        O.I64_LOAD16_U,
        O.I64_LOAD32_S,
        O.I64_LOAD32_U,
        O.I32_STORE,
        O.I64_STORE,
        O.F32_STORE,
        O.F64_STORE,
        O.I32_STORE8,
        O.I32_STORE16,
        O.I64_STORE8,
        O.I64_STORE16,
        O.I64_STORE32,
    }
)

_BULK_MEMORY = frozenset({O.MEMORY_INIT, O.MEMORY_COPY, O.MEMORY_FILL, O.DATA_DROP})
_BULK_TABLE = frozenset({O.TABLE_INIT, O.TABLE_COPY, O.TABLE_FILL, O.ELEM_DROP})

_SATURATING_TRUNC = frozenset(
    {
        O.I32_TRUNC_SAT_F32_S,
        O.I32_TRUNC_SAT_F32_U,
        O.I32_TRUNC_SAT_F64_S,
        O.I32_TRUNC_SAT_F64_U,
        O.I64_TRUNC_SAT_F32_S,
        O.I64_TRUNC_SAT_F32_U,
        O.I64_TRUNC_SAT_F64_S,
        O.I64_TRUNC_SAT_F64_U,
    }
)

# i64.extend_i32_u is MVP, but has always been tallied with the
# sign-extension operators.
_SIGN_EXTEND = frozenset(
    {
        O.I64_EXTEND_I32_U,
        O.I32_EXTEND8_S,
        O.I32_EXTEND16_S,
        O.I64_EXTEND8_S,
        O.I64_EXTEND16_S,
        O.I64_EXTEND32_S,
    }
)

_SIMD_LOAD_STORE = frozenset(
    {
        O.V128_LOAD,
        O.V128_LOAD8X8_S,
        O.V128_LOAD8X8_U,
        O.V128_LOAD16X4_S,
        O.V128_LOAD16X4_U,
        O.V128_LOAD32X2_S,
        O.V128_LOAD32X2_U,
        O.V128_LOAD8_SPLAT,
        O.V128_LOAD16_SPLAT,
        O.V128_LOAD32_SPLAT,
        O.V128_LOAD64_SPLAT,
        O.V128_LOAD32_ZERO,
        O.V128_LOAD64_ZERO,
        O.V128_STORE,
        O.V128_LOAD8_LANE,
        O.V128_LOAD16_LANE,
        O.V128_LOAD32_LANE,
        O.V128_LOAD64_LANE,
        O.V128_STORE8_LANE,
        O.V128_STORE16_LANE,
        O.V128_STORE32_LANE,
        O.V128_STORE64_LANE,
    }
)

_ATOMIC_WAIT_NOTIFY = frozenset(
    {O.MEMORY_ATOMIC_NOTIFY, O.MEMORY_ATOMIC_WAIT32, O.MEMORY_ATOMIC_WAIT64}
)

_ATOMIC_LOAD_STORE = frozenset(
    {
        O.I32_ATOMIC_LOAD,
        O.I64_ATOMIC_LOAD,
        O.I32_ATOMIC_LOAD8_U,
        O.I32_ATOMIC_LOAD16_U,
        O.I64_ATOMIC_LOAD8_U,
        O.I64_ATOMIC_LOAD16_U,
        O.I64_ATOMIC_LOAD32_U,
        O.I32_ATOMIC_STORE,
        O.I64_ATOMIC_STORE,
        O.I32_ATOMIC_STORE8,
        O.I32_ATOMIC_STORE16,
        O.I64_ATOMIC_STORE8,
        O.I64_ATOMIC_STORE16,
        O.I64_ATOMIC_STORE32,
    }
)

_FAMILIES: tuple[tuple[frozenset[Opcode], Classification], ...] = (
    (_CONTROL_FLOW, Classification((Category.CONTROL_FLOW,))),
    (frozenset({O.CALL}), Classification((Category.DIRECT_CALLS,))),
    (frozenset({O.CALL_INDIRECT}), Classification((Category.INDIRECT_CALLS,))),
    (
        frozenset({O.RETURN_CALL}),
        Classification(
            (Category.CONTROL_FLOW, Category.DIRECT_CALLS), Proposal.TAIL_CALLS
        ),
    ),
    (
        frozenset({O.RETURN_CALL_INDIRECT}),
        Classification(
            (Category.CONTROL_FLOW, Category.INDIRECT_CALLS), Proposal.TAIL_CALLS
        ),
    ),
    (_NUMERIC_CONSTANTS, Classification((Category.CONSTANTS,))),
    (
        frozenset({O.REF_NULL, O.REF_FUNC}),
        Classification((Category.CONSTANTS,), Proposal.REF_TYPES),
    ),
    (frozenset({O.REF_IS_NULL}), Classification((Category.OTHER,), Proposal.REF_TYPES)),
    (
        frozenset({O.LOCAL_GET, O.LOCAL_SET, O.LOCAL_TEE}),
        Classification((Category.LOCAL_VAR,)),
    ),
    (frozenset({O.GLOBAL_GET, O.GLOBAL_SET}), Classification((Category.GLOBAL_VAR,))),
    (frozenset({O.TABLE_GET, O.TABLE_SET}), Classification((Category.TABLE,))),
    (_BULK_TABLE, Classification((Category.TABLE,), Proposal.BULK)),
    (
        frozenset({O.TABLE_GROW, O.TABLE_SIZE}),
        Classification((Category.TABLE,), Proposal.REF_TYPES),
    ),
    (_MEMORY_LOAD_STORE, Classification((Category.LOAD_STORE,))),
    (frozenset({O.MEMORY_SIZE, O.MEMORY_GROW}), Classification((Category.MEMORY,))),
    (_BULK_MEMORY, Classification((Category.MEMORY,), Proposal.BULK)),
    (_SATURATING_TRUNC, Classification((Category.OTHER,), Proposal.NON_TRAPPING_CONV)),
    (_SIGN_EXTEND, Classification((Category.OTHER,), Proposal.SIGN_EXTEND)),
    (_SIMD_LOAD_STORE, Classification((Category.LOAD_STORE,), Proposal.SIMD)),
    (frozenset({O.V128_CONST}), Classification((Category.CONSTANTS,), Proposal.SIMD)),
    (
        SIMD_OPS - _SIMD_LOAD_STORE - {O.V128_CONST},
        Classification((Category.OTHER,), Proposal.SIMD),
    ),
    (_ATOMIC_WAIT_NOTIFY, Classification((Category.WAIT_NOTIFY,), Proposal.ATOMICS)),
    (_ATOMIC_LOAD_STORE, Classification((Category.LOAD_STORE,), Proposal.ATOMICS)),
    (
        ATOMIC_OPS - _ATOMIC_WAIT_NOTIFY - _ATOMIC_LOAD_STORE,
        Classification((Category.OTHER,), Proposal.ATOMICS),
    ),
)

DEFAULT_CLASSIFICATION = Classification((Category.OTHER,))


def _build_table() -> dict[Opcode, Classification]:
    table = {op: DEFAULT_CLASSIFICATION for op in Opcode}
    claimed: set[Opcode] = set()
    for ops, classification in _FAMILIES:
        overlap = claimed & ops
        if overlap:
            names = sorted(o.value for o in overlap)
            raise ValueError(f"Opcodes classified twice: {names}")
        claimed |= ops
        for op in ops:
            table[op] = classification
    return table


CLASSIFICATION: dict[Opcode, Classification] = _build_table()


def classify(instruction: Instruction) -> Classification:
    return CLASSIFICATION[instruction.op]


def count_opcodes(instructions: Sequence[Instruction]) -> dict[Opcode, int]:
    """Return a frequency map of opcodes in the given instruction list."""
    return dict(Counter(inst.op for inst in instructions))


@dataclass
class InstructionTally:
    """Running category/proposal counts across one or more function bodies."""

    total: int = 0
    categories: Counter = field(default_factory=Counter)
    proposals: Counter = field(default_factory=Counter)

    def add_instructions(self, instructions: Sequence[Instruction]) -> None:
        self.total += len(instructions)
        for op, n in count_opcodes(instructions).items():
            classification = CLASSIFICATION[op]
            for category in classification.categories:
                self.categories[category] += n
            if classification.proposal is not None:
                self.proposals[classification.proposal] += n

    def to_model(self) -> InstructionStats:
        return InstructionStats(
            total=self.total,
            proposals=ProposalStats(
                **{p.value: n for p, n in self.proposals.items()}
            ),
            categories=InstructionCategoryStats(
                **{c.value: n for c, n in self.categories.items()}
            ),
        )


def tally_function_bodies(bodies: Iterable[LazyFuncBody]) -> InstructionTally:
    tally = InstructionTally()
    count = 0
    for body in bodies:
        tally.add_instructions(body.contents().expr)
        count += 1
    logger.debug("Classified %d instructions in %d function bodies", tally.total, count)
    return tally


def get_instruction_stats(bodies: Iterable[LazyFuncBody]) -> InstructionStats:
    """Decode and classify every function body; return the instruction stats."""
    return tally_function_bodies(bodies).to_model()
