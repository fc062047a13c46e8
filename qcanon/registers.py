"""
Qubit registers interpreted as unsigned integers.

A register is a list of qubit names plus a bit ordering:

    LittleEndian - qubits[0] is the least significant bit
    BigEndian    - qubits[0] is the most significant bit

Converting between the two only reverses the list; the workspace is not
touched. This module also prepares registers in the computational and phase
representations and reads them back for tests.

Phase representation of x on an n-qubit little-endian register:

    qubit j  ->  (|0⟩ + e^{2πi·x/2^(n-j)} |1⟩) / √2

i.e. the register holds Σ_k e^{2πi·x·k/2^n} |k⟩ / √(2^n), the QFT of |x⟩.
"""

import numpy as np
from typing import Iterable, Iterator, List, Union

from .core import get_state, measureQubit, pushQubit, tosQubit
from .utils import bits_to_int, int_to_bits


class _Register:
    def __init__(self, qubits: Iterable[str]):
        self.qubits: List[str] = list(qubits)

    def __len__(self) -> int:
        return len(self.qubits)

    def __iter__(self) -> Iterator[str]:
        return iter(self.qubits)

    def __getitem__(self, index):
        return self.qubits[index]

    def __eq__(self, other) -> bool:
        return type(self) is type(other) and self.qubits == other.qubits

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.qubits!r})"


class LittleEndian(_Register):
    """Register with the least significant qubit first."""


class BigEndian(_Register):
    """Register with the most significant qubit first."""


def big_endian_as_little_endian(register: BigEndian) -> LittleEndian:
    """Reinterpret a big-endian register as little-endian (no state change)."""
    return LittleEndian(reversed(register.qubits))


def little_endian_as_big_endian(register: LittleEndian) -> BigEndian:
    """Reinterpret a little-endian register as big-endian (no state change)."""
    return BigEndian(reversed(register.qubits))


def as_little_endian(register: Union[LittleEndian, BigEndian, Iterable[str]]) -> LittleEndian:
    """
    Little-endian view of ``register``.

    Plain sequences of names are taken to be little-endian already.
    """
    if isinstance(register, LittleEndian):
        return register
    if isinstance(register, BigEndian):
        return big_endian_as_little_endian(register)
    return LittleEndian(register)


def require_little_endian(register: Union[LittleEndian, Iterable[str]]) -> LittleEndian:
    """
    Like ``as_little_endian`` but refuse BigEndian registers.

    Used by operations whose arithmetic depends on the bit order, so that a
    register of the wrong endianness is rejected before any gate is applied.
    """
    if isinstance(register, BigEndian):
        raise TypeError(
            "Expected a LittleEndian register, got BigEndian; "
            "use the *_be variant or big_endian_as_little_endian"
        )
    return as_little_endian(register)


# =============================================================================
# Preparation and readout
# =============================================================================

def init_register(prefix: str, value: int, n_bits: int) -> LittleEndian:
    """
    Push an n-qubit register holding the classical value ``value``.

    Qubits are named f"{prefix}{j}" with j = 0 the least significant bit.
    The most significant qubit is pushed first so that, right after
    preparation, the register occupies the low bits of the state index in
    little-endian order.

    Returns:
        The register as ``LittleEndian``
    """
    if not 0 <= value < 2 ** n_bits:
        raise ValueError(f"value must be in [0, {2 ** n_bits - 1}], got {value}")

    qubits = [f"{prefix}{j}" for j in range(n_bits)]
    bits = int_to_bits(value, n_bits)
    for j in reversed(range(n_bits)):
        pushQubit(qubits[j], [1 - bits[j], bits[j]])
    return LittleEndian(qubits)


def init_phase_register(prefix: str, value: int, n_bits: int) -> LittleEndian:
    """
    Push an n-qubit register holding the phase representation of ``value``.

    The phase representation is a product state, so each qubit is pushed
    with its own weights and no basis change is needed.
    """
    qubits = [f"{prefix}{j}" for j in range(n_bits)]
    for j in reversed(range(n_bits)):
        phase = 2 * np.pi * value / 2 ** (n_bits - j)
        pushQubit(qubits[j], [1, np.exp(1j * phase)])
    return LittleEndian(qubits)


def register_state(register: Union[LittleEndian, BigEndian]) -> np.ndarray:
    """
    State vector with ``register`` moved to the low bits, little-endian.

    Qubits outside the register keep their relative order and form the high
    part of the index, so for a workspace holding only the register the
    amplitude at index k belongs to the register value k.
    """
    register = as_little_endian(register)
    for qubit in reversed(register.qubits):
        tosQubit(qubit)
    return get_state()


def measure_register(register: Union[LittleEndian, BigEndian]) -> int:
    """Measure a register, remove its qubits and return the integer value."""
    register = as_little_endian(register)
    return bits_to_int([int(measureQubit(qubit)) for qubit in register])


def phase_encoded_state(value: int, n_bits: int) -> np.ndarray:
    """Expected state vector of the phase representation of ``value``."""
    N = 2 ** n_bits
    k = np.arange(N)
    return np.exp(2j * np.pi * value * k / N) / np.sqrt(N)
