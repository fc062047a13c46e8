"""
State-vector workspace that operations are applied to.

Qubits live in a single numpy array and are referenced by name through a
name stack. The qubit on top of the stack (TOS) is the least significant
index of the flattened state; pushing a qubit makes it the new TOS.

Everything in the package acts on this workspace: gates through
``applyGate``/``applyControlledGate``, registers through the helpers in
``qcanon.registers``.
"""

import numpy as np
from typing import List, Sequence

from .gates import controlled_gate

# Global state
workspace: np.ndarray = np.array([[1.0 + 0j]])
namestack: List[str] = []


def reset():
    """Reset the quantum workspace to empty state."""
    global workspace, namestack
    workspace = np.array([[1.0 + 0j]])
    namestack = []


def get_state() -> np.ndarray:
    """Return a copy of the current quantum state as a flat vector."""
    return np.reshape(workspace, -1).copy()


def get_namestack() -> List[str]:
    """Return a copy of the current name stack (bottom first, TOS last)."""
    return namestack.copy()


def pushQubit(name: str, weights: Sequence[complex]):
    """
    Push a new qubit onto the workspace.

    Args:
        name: Unique name for the qubit
        weights: Initial amplitudes [|0⟩ amplitude, |1⟩ amplitude].
                 Complex weights are allowed; they are normalized.
    """
    global workspace, namestack

    if name in namestack:
        raise ValueError(f"Qubit {name!r} is already in the workspace")

    if workspace.shape == (1, 1) and abs(workspace[0, 0] - 1.0) < 1e-10:
        # Workspace is empty, reset name stack
        namestack = []

    namestack.append(name)
    weights = np.array(weights, dtype=complex)
    weights = weights / np.linalg.norm(weights)  # Normalize
    workspace = np.reshape(workspace, (1, -1))
    workspace = np.kron(workspace, weights)


def tosQubit(name: str):
    """
    Move the named qubit to the top of stack (TOS).

    This is done by swapping axes in the workspace array.
    """
    global workspace, namestack

    k = len(namestack) - namestack.index(name)  # Position from TOS
    if k > 1:
        namestack.append(namestack.pop(-k))  # Rotate name stack
        workspace = np.reshape(workspace, (-1, 2, 2 ** (k - 1)))
        workspace = np.swapaxes(workspace, -2, -1)


def applyGate(gate: np.ndarray, *names: str):
    """
    Apply a quantum gate to the specified qubit(s).

    The first name is the most significant qubit of the gate matrix.

    Args:
        gate: The gate matrix (2x2 for single qubit, 4x4 for two qubits, etc.)
        *names: Names of the qubits to apply the gate to (in order)
    """
    global workspace

    if len(names) != len(set(names)):
        raise ValueError("The same qubit cannot occur twice as an argument")
    if gate.shape[0] != 2 ** len(names):
        raise ValueError(
            f"Gate of dimension {gate.shape[0]} does not act on {len(names)} qubit(s)"
        )

    for name in names:
        tosQubit(name)

    workspace = np.reshape(workspace, (-1, gate.shape[0]))
    np.matmul(workspace, gate.T, out=workspace)


def applyControlledGate(gate: np.ndarray, controls: Sequence[str], *names: str):
    """
    Apply ``gate`` to ``names`` only where every control qubit is |1⟩.

    With no controls this is ``applyGate``.
    """
    controls = list(controls)
    applyGate(controlled_gate(gate, len(controls)), *controls, *names)


def probQubit(name: str) -> np.ndarray:
    """
    Get the probabilities of measuring the qubit as |0⟩ or |1⟩.

    Returns:
        Array [P(|0⟩), P(|1⟩)]
    """
    global workspace

    tosQubit(name)
    workspace = np.reshape(workspace, (-1, 2))
    prob = np.linalg.norm(workspace, axis=0) ** 2
    return prob / prob.sum()


def measureQubit(name: str) -> str:
    """
    Measure and remove a qubit from the workspace.

    Returns:
        "0" or "1" indicating the measurement result
    """
    global workspace, namestack

    prob = probQubit(name)
    measurement = np.random.choice(2, p=prob)
    workspace = workspace[:, [measurement]] / np.sqrt(prob[measurement])
    namestack.pop()
    return str(measurement)

