"""
Qcanon - reversible building blocks for quantum programs.

This package provides operations tagged with the capabilities they support
(adjoint, controlled), combinators that conjugate one operation by another
while deriving the result's capabilities, and a phase-domain integer
increment built on them. Everything runs on a small state-vector simulator.

Modules:
    core         - State-vector workspace (pushQubit, applyGate, measureQubit)
    gates        - Gate matrices and controlled_gate
    operation    - Capability, Operation, gate_operation
    conjugation  - apply_with, apply_with_a, apply_with_c, apply_with_ca, conjugate
    registers    - LittleEndian/BigEndian registers, preparation and readout
    qft          - Quantum Fourier Transform and the qft_le basis change
    increment    - Phase-domain increment by a classical integer
    utils        - State comparison, bit helpers, deprecation

Quick Start:
    >>> from qcanon import *
    >>> reset()
    >>> register = init_register("a", 5, 4)
    >>> increment_by_integer(3)(register)
    >>> measure_register(register)
    8
"""

# Core functionality
from .core import (
    reset,
    get_state,
    get_namestack,
    pushQubit,
    tosQubit,
    applyGate,
    applyControlledGate,
    probQubit,
    measureQubit,
)

# Gates
from .gates import (
    X_gate,
    Z_gate,
    H_gate,
    P_gate,
    CNOT_gate,
    SWAP_gate,
    CP_gate,
    controlled_gate,
)

# Capability-tagged operations
from .operation import (
    Capability,
    CapabilityError,
    Operation,
    gate_operation,
)

# Conjugation
from .conjugation import (
    apply_with,
    apply_with_a,
    apply_with_c,
    apply_with_ca,
    conjugate,
)

# Registers
from .registers import (
    LittleEndian,
    BigEndian,
    big_endian_as_little_endian,
    little_endian_as_big_endian,
    init_register,
    init_phase_register,
    register_state,
    measure_register,
    phase_encoded_state,
)

# QFT
from .qft import (
    QFT,
    QFT_inverse,
    qft_le,
)

# Increment
from .increment import (
    r1_frac,
    increment_phase_by_integer,
    increment_phase_by_integer_be,
    increment_by_integer,
    increment_by_integer_be,
    apply_phase_le_operation_on_le,
    integer_increment_phase_le,
    integer_increment_le,
)

# Utilities
from .utils import (
    DEFAULT_ATOL,
    allclose_up_to_global_phase,
    int_to_bits,
    bits_to_int,
    deprecated,
)

__version__ = "0.1.0"
__all__ = [
    # Core
    "reset",
    "get_state",
    "get_namestack",
    "pushQubit",
    "tosQubit",
    "applyGate",
    "applyControlledGate",
    "probQubit",
    "measureQubit",
    # Gates
    "X_gate",
    "Z_gate",
    "H_gate",
    "P_gate",
    "CNOT_gate",
    "SWAP_gate",
    "CP_gate",
    "controlled_gate",
    # Operations
    "Capability",
    "CapabilityError",
    "Operation",
    "gate_operation",
    # Conjugation
    "apply_with",
    "apply_with_a",
    "apply_with_c",
    "apply_with_ca",
    "conjugate",
    # Registers
    "LittleEndian",
    "BigEndian",
    "big_endian_as_little_endian",
    "little_endian_as_big_endian",
    "init_register",
    "init_phase_register",
    "register_state",
    "measure_register",
    "phase_encoded_state",
    # QFT
    "QFT",
    "QFT_inverse",
    "qft_le",
    # Increment
    "r1_frac",
    "increment_phase_by_integer",
    "increment_phase_by_integer_be",
    "increment_by_integer",
    "increment_by_integer_be",
    "apply_phase_le_operation_on_le",
    "integer_increment_phase_le",
    "integer_increment_le",
    # Utils
    "DEFAULT_ATOL",
    "allclose_up_to_global_phase",
    "int_to_bits",
    "bits_to_int",
    "deprecated",
]
