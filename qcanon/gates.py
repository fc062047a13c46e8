"""
Gate matrices used by the operations in this package.

Only the gates needed to build the basis change (H, SWAP, CP) and the phase
rotations (P) live here, together with ``controlled_gate`` which lifts any
gate to its multiply-controlled form.
"""

import numpy as np

# =============================================================================
# Single-qubit gates
# =============================================================================

X_gate = np.array([[0, 1],      # Pauli X gate (NOT gate)
                   [1, 0]])

Z_gate = np.array([[1,  0],     # Pauli Z gate = P(π)
                   [0, -1]])

H_gate = np.array([[1,  1],     # Hadamard gate
                   [1, -1]]) * np.sqrt(1/2)


def P_gate(phi):
    """Phase shift gate P(φ) = diag(1, e^{iφ})"""
    return np.array([[1,              0],
                     [0, np.exp(phi * 1j)]])


# =============================================================================
# Two-qubit gates
# =============================================================================

CNOT_gate = np.array([[1, 0, 0, 0],   # Controlled NOT gate (XOR)
                      [0, 1, 0, 0],
                      [0, 0, 0, 1],
                      [0, 0, 1, 0]])

SWAP_gate = np.array([[1, 0, 0, 0],   # Swap gate
                      [0, 0, 1, 0],
                      [0, 1, 0, 0],
                      [0, 0, 0, 1]])


def CP_gate(theta):
    """Controlled phase gate CP(θ) = diag(1, 1, 1, e^{iθ})"""
    return np.array([[1, 0, 0,               0],
                     [0, 1, 0,               0],
                     [0, 0, 1,               0],
                     [0, 0, 0, np.exp(1j * theta)]])


# =============================================================================
# Controlled gates
# =============================================================================

def controlled_gate(gate: np.ndarray, num_controls: int = 1) -> np.ndarray:
    """
    Gate acting as ``gate`` when all ``num_controls`` controls are |1⟩.

    Controls are the most significant qubits of the result, so the gate block
    sits in the bottom-right corner of an identity matrix.

    Example:
        controlled_gate(X_gate) equals CNOT_gate
        controlled_gate(P_gate(θ)) equals CP_gate(θ)
    """
    if num_controls < 0:
        raise ValueError(f"num_controls must be >= 0, got {num_controls}")
    if num_controls == 0:
        return gate

    dim = gate.shape[0]
    full = np.eye(dim * 2 ** num_controls, dtype=complex)
    full[-dim:, -dim:] = gate
    return full
