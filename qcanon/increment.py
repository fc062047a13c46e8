"""
Increment a register by a classical integer using phase rotations.

In the phase representation (see ``qcanon.registers``) qubit j of an n-qubit
little-endian register carries the phase 2π·x/2^(n-j). Adding a constant a
to x therefore only needs one rotation per qubit:

    qubit j  <-  R1(2π·a / 2^(n-j))  =  r1_frac(a, n-1-j)

No carries are computed and no ancilla qubits are used; the result is
(x + a) mod 2^n because each angle is periodic in a.

This is the phase-domain half of the Draper adder. The computational-basis
version wraps it between the QFT and its inverse with ``apply_with_ca``.

References:
- T. G. Draper, "Addition on a Quantum Computer", 2000. arXiv:quant-ph/0008033
- Ruiz-Perez et al., "Quantum arithmetic with the QFT", 2017. arXiv:1411.5949

Complexity:
- n single-qubit rotations for an n-qubit register
- n² + O(n) gates including the basis change
"""

import numpy as np

from .conjugation import apply_with_ca, conjugate
from .core import applyControlledGate, applyGate
from .gates import P_gate
from .operation import Operation
from .qft import qft_le
from .registers import LittleEndian, big_endian_as_little_endian, require_little_endian
from .utils import deprecated


# =============================================================================
# Phase rotation primitive
# =============================================================================

def r1_frac_angle(numerator: int, power: int) -> float:
    """
    Angle π·numerator/2^power, reduced to [0, 2π).

    The reduction uses integer arithmetic so that large numerators do not
    lose precision before the division.
    """
    period = 2 ** (power + 1)
    return np.pi * (numerator % period) / 2 ** power


def r1_frac(numerator: int, power: int) -> Operation:
    """
    Rotation about |1⟩ by the dyadic angle π·numerator/2^power.

    An operation on a single qubit name supporting both capabilities.
    """
    gate = P_gate(r1_frac_angle(numerator, power))
    inverse = P_gate(r1_frac_angle(-numerator, power))

    def body(qubit):
        applyGate(gate, qubit)

    def adjoint(qubit):
        applyGate(inverse, qubit)

    def controlled(controls, qubit):
        applyControlledGate(gate, controls, qubit)

    def controlled_adjoint(controls, qubit):
        applyControlledGate(inverse, controls, qubit)

    return Operation(body, adjoint, controlled, controlled_adjoint,
                     name=f"R1Frac({numerator % 2 ** (power + 1)}, {power})")


# =============================================================================
# Phase-domain increment
# =============================================================================

def increment_phase_by_integer(increment: int, verbose: bool = False) -> Operation:
    """
    Add ``increment`` to a little-endian register in the phase representation.

    Maps the phase representation of x to that of (x + increment) mod 2^n.
    The register must already be in the phase representation (e.g. after
    ``qft_le``); this cannot be checked and is the caller's responsibility.

    Every qubit gets its rotation even when ``increment`` is 0, so the cost
    and the capabilities do not depend on the value. An empty register is
    left untouched.

    The adjoint subtracts ``increment``. The controlled forms gate every
    rotation on the same controls.

    Args:
        increment: Classical integer to add (negative values subtract)
        verbose: If True, print each rotation as it is applied

    Example:
        reset()
        register = init_phase_register("a", 5, 3)
        increment_phase_by_integer(3)(register)
        # register now holds the phase representation of 0
    """
    def rotations(register):
        register = require_little_endian(register)
        n = len(register)
        return [(r1_frac(increment, n - 1 - j), qubit) for j, qubit in enumerate(register)]

    def trace(label, rotation, qubit):
        if verbose:
            print(f"{label} {rotation.name} on {qubit}")

    def body(register):
        for rotation, qubit in rotations(register):
            trace("Apply", rotation, qubit)
            rotation(qubit)

    def adjoint(register):
        for rotation, qubit in reversed(rotations(register)):
            trace("Apply adjoint", rotation, qubit)
            rotation.apply_adjoint(qubit)

    def controlled(controls, register):
        for rotation, qubit in rotations(register):
            trace(f"Apply controlled by {controls}", rotation, qubit)
            rotation.apply_controlled(controls, qubit)

    def controlled_adjoint(controls, register):
        for rotation, qubit in reversed(rotations(register)):
            trace(f"Apply adjoint controlled by {controls}", rotation, qubit)
            rotation.apply_controlled_adjoint(controls, qubit)

    return Operation(body, adjoint, controlled, controlled_adjoint,
                     name=f"IncrementPhaseByInteger({increment:#x})")


def _on_big_endian(op: Operation, name: str) -> Operation:
    """Run a little-endian operation on a BigEndian register by reindexing."""
    def body(register):
        op(big_endian_as_little_endian(register))

    def adjoint(register):
        op.apply_adjoint(big_endian_as_little_endian(register))

    def controlled(controls, register):
        op.apply_controlled(controls, big_endian_as_little_endian(register))

    def controlled_adjoint(controls, register):
        op.apply_controlled_adjoint(controls, big_endian_as_little_endian(register))

    return Operation(body, adjoint, controlled, controlled_adjoint, name=name)


def increment_phase_by_integer_be(increment: int) -> Operation:
    """``increment_phase_by_integer`` for a BigEndian register."""
    return _on_big_endian(increment_phase_by_integer(increment),
                          f"IncrementPhaseByIntegerBE({increment:#x})")


# =============================================================================
# Computational-basis increment
# =============================================================================

def apply_phase_le_operation_on_le(op: Operation) -> Operation:
    """
    Run a phase-representation operation on a computational-basis register.

    Conjugates ``op`` with ``qft_le``; the result keeps every capability
    ``op`` has.
    """
    return conjugate(qft_le, op)


def increment_by_integer(increment: int) -> Operation:
    """
    Add ``increment`` to a little-endian register: |x⟩ → |x + increment mod 2^n⟩.

    Example:
        reset()
        register = init_register("a", 5, 4)
        increment_by_integer(3)(register)
        measure_register(register)  # 8
    """
    return apply_with_ca(qft_le, increment_phase_by_integer(increment))


def increment_by_integer_be(increment: int) -> Operation:
    """``increment_by_integer`` for a BigEndian register."""
    return _on_big_endian(increment_by_integer(increment),
                          f"IncrementByIntegerBE({increment:#x})")


# =============================================================================
# Deprecated names
# =============================================================================

@deprecated("increment_phase_by_integer")
def integer_increment_phase_le(increment: int, register: LittleEndian):
    increment_phase_by_integer(increment)(register)


@deprecated("increment_by_integer")
def integer_increment_le(increment: int, register: LittleEndian):
    increment_by_integer(increment)(register)
