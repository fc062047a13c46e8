"""
Quantum Fourier Transform (QFT), the basis change into the phase representation.

``QFT``/``QFT_inverse`` act on a list of qubit names ordered MSB first.
``qft_le`` packages them as an invertible ``Operation`` on a little-endian
register: it maps |x⟩ to the phase representation of x described in
``qcanon.registers``. It is the outer operation used to run phase-domain
arithmetic on computational-basis registers.
"""

import numpy as np
from typing import List

from .core import applyGate
from .gates import H_gate, SWAP_gate, CP_gate
from .operation import Operation
from .registers import require_little_endian


def QFT(qubits: List[str], verbose: bool = False):
    """
    Quantum Fourier Transform on a list of qubits.

    The QFT transforms the computational basis states as:
    |j⟩ → (1/√N) Σₖ exp(2πijk/N) |k⟩

    Args:
        qubits: List of qubit names, ordered from most significant to least
                significant bit (MSB first, LSB last)
        verbose: If True, print each step
    """
    n = len(qubits)

    if verbose:
        print(f"QFT on {n} qubits: {qubits}")

    # Apply Hadamard and controlled rotations
    for i in range(n):
        applyGate(H_gate, qubits[i])

        if verbose:
            print(f"After H on {qubits[i]}")

        for j in range(i + 1, n):
            # Rotation angle: π/2^(j-i)
            theta = np.pi / (2 ** (j - i))
            applyGate(CP_gate(theta), qubits[j], qubits[i])

            if verbose:
                print(f"After CP(π/{2 ** (j - i)}) controlled by {qubits[j]} on {qubits[i]}")

    # Swap qubits to reverse order
    for i in range(n // 2):
        applyGate(SWAP_gate, qubits[i], qubits[n - 1 - i])
        if verbose:
            print(f"After SWAP({qubits[i]}, {qubits[n - 1 - i]})")

    if verbose:
        print("QFT complete")


def QFT_inverse(qubits: List[str], verbose: bool = False):
    """
    Inverse Quantum Fourier Transform.

    The adjoint of QFT: gate order reversed, phase angles negated.

    Args:
        qubits: List of qubit names, ordered MSB to LSB
        verbose: If True, print each step
    """
    n = len(qubits)

    if verbose:
        print(f"Inverse QFT on {n} qubits: {qubits}")

    for i in range(n // 2):
        applyGate(SWAP_gate, qubits[i], qubits[n - 1 - i])

    for i in range(n - 1, -1, -1):
        for j in range(n - 1, i, -1):
            theta = -np.pi / (2 ** (j - i))
            applyGate(CP_gate(theta), qubits[j], qubits[i])

        # H is its own inverse
        applyGate(H_gate, qubits[i])

    if verbose:
        print("Inverse QFT complete")


def _msb_first(register) -> List[str]:
    return list(reversed(require_little_endian(register).qubits))


def _qft_le(register):
    QFT(_msb_first(register))


def _qft_le_adjoint(register):
    QFT_inverse(_msb_first(register))


# Basis change computational -> phase representation on a LittleEndian register.
# Invertible only: conjugation never needs it controlled.
qft_le = Operation(_qft_le, adjoint=_qft_le_adjoint, name="QFTLE")
