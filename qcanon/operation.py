"""
Operations tagged with the capabilities they support.

An ``Operation`` wraps a body that acts on a target (a qubit name, a
register, a pair of registers, ...). Besides the plain body it may declare

    ADJOINT     - an inverse body, so the operation can be undone
    CONTROLLED  - a body applied conditionally on a list of control qubits

Combinators check ``capabilities`` before relying on either one, and an
operation never reports a capability it has no body for: the declared set is
always a lower bound on what the operation can actually do.

Example:
    >>> flip = gate_operation(X_gate, name="X")
    >>> flip.capabilities
    <Capability.ADJOINT_CONTROLLED: 3>
    >>> flip.apply_controlled(["c"], "q")   # CNOT from c to q
"""

from enum import Flag
from typing import Any, Callable, List, Optional, Sequence, Union

import numpy as np

from .core import applyControlledGate, applyGate


class Capability(Flag):
    """Capabilities an operation may declare."""
    NONE = 0
    ADJOINT = 1
    CONTROLLED = 2
    ADJOINT_CONTROLLED = 3


class CapabilityError(ValueError):
    """An operation lacks a capability that the caller relies on."""


Body = Callable[[Any], None]
ControlledBody = Callable[[List[str], Any], None]


def _describe(capability: Capability) -> str:
    names = [c.name.lower() for c in (Capability.ADJOINT, Capability.CONTROLLED)
             if c in capability]
    return " and ".join(names) or "nothing"


class Operation:
    """
    A reversible action on a target, with optional adjoint/controlled forms.

    The capability set is derived from the bodies supplied:

        adjoint given             -> ADJOINT
        controlled given          -> CONTROLLED
        both given                -> ADJOINT_CONTROLLED, and
                                     ``controlled_adjoint`` is then required

    Args:
        body: ``body(target)`` applies the operation
        adjoint: ``adjoint(target)`` undoes ``body``
        controlled: ``controlled(controls, target)`` applies ``body`` only
            where every control qubit is |1⟩
        controlled_adjoint: ``controlled_adjoint(controls, target)`` is the
            controlled form of ``adjoint``
        name: Label used in ``repr`` and error messages
    """

    def __init__(
        self,
        body: Body,
        adjoint: Optional[Body] = None,
        controlled: Optional[ControlledBody] = None,
        controlled_adjoint: Optional[ControlledBody] = None,
        name: Optional[str] = None,
    ):
        self.name = name or getattr(body, "__name__", "operation")

        if controlled_adjoint is not None and (adjoint is None or controlled is None):
            raise CapabilityError(
                f"{self.name!r}: a controlled adjoint body needs both an adjoint "
                f"and a controlled body"
            )
        if adjoint is not None and controlled is not None and controlled_adjoint is None:
            raise CapabilityError(
                f"{self.name!r}: declaring adjoint and controlled bodies also "
                f"requires a controlled adjoint body"
            )

        self._body = body
        self._adjoint = adjoint
        self._controlled = controlled
        self._controlled_adjoint = controlled_adjoint

    def __repr__(self) -> str:
        return f"Operation({self.name!r}, {self.capabilities})"

    @property
    def capabilities(self) -> Capability:
        caps = Capability.NONE
        if self._adjoint is not None:
            caps |= Capability.ADJOINT
        if self._controlled is not None:
            caps |= Capability.CONTROLLED
        return caps

    def supports(self, capability: Capability) -> bool:
        """True if every capability in ``capability`` is declared."""
        return capability in self.capabilities

    def require(self, capability: Capability, role: str = "operation"):
        """Raise ``CapabilityError`` unless ``capability`` is declared."""
        missing = capability & ~self.capabilities
        if missing:
            raise CapabilityError(
                f"{role} {self.name!r} does not support {_describe(missing)} "
                f"(declares {_describe(self.capabilities)})"
            )

    # -------------------------------------------------------------------------
    # Application
    # -------------------------------------------------------------------------

    def __call__(self, target):
        self._body(target)

    def apply_adjoint(self, target):
        self.require(Capability.ADJOINT)
        self._adjoint(target)

    def apply_controlled(self, controls: Sequence[str], target):
        self.require(Capability.CONTROLLED)
        self._controlled(list(controls), target)

    def apply_controlled_adjoint(self, controls: Sequence[str], target):
        self.require(Capability.ADJOINT_CONTROLLED)
        self._controlled_adjoint(list(controls), target)

    # -------------------------------------------------------------------------
    # Functors
    # -------------------------------------------------------------------------

    @property
    def adjoint(self) -> "Operation":
        """The inverse operation. It has the same capability set."""
        self.require(Capability.ADJOINT)
        return Operation(
            self._adjoint,
            adjoint=self._body,
            controlled=self._controlled_adjoint,
            controlled_adjoint=self._controlled,
            name=f"Adjoint {self.name}",
        )

    @property
    def controlled(self) -> "Operation":
        """
        The controlled operation, acting on a ``(controls, target)`` pair.

        Controlling it again prepends the new controls, and it is adjointable
        whenever this operation is.
        """
        self.require(Capability.CONTROLLED)

        def lift(apply):
            def body(args):
                controls, target = args
                apply(list(controls), target)
            return body

        def lift_controlled(apply):
            def body(outer_controls, args):
                controls, target = args
                apply(list(outer_controls) + list(controls), target)
            return body

        has_adjoint = self.supports(Capability.ADJOINT)
        return Operation(
            lift(self._controlled),
            adjoint=lift(self._controlled_adjoint) if has_adjoint else None,
            controlled=lift_controlled(self._controlled),
            controlled_adjoint=lift_controlled(self._controlled_adjoint) if has_adjoint else None,
            name=f"Controlled {self.name}",
        )


# =============================================================================
# Operations from gate matrices
# =============================================================================

def _qubit_names(target: Union[str, Sequence[str]]) -> List[str]:
    if isinstance(target, str):
        return [target]
    return list(target)


def gate_operation(gate: np.ndarray, name: Optional[str] = None) -> Operation:
    """
    Wrap a unitary matrix as an operation on one or more named qubits.

    The target is a single qubit name or a sequence of names (first name is
    the most significant qubit of ``gate``). The adjoint applies the
    conjugate transpose; the controlled forms use ``controlled_gate``.
    """
    gate = np.asarray(gate)
    inverse = gate.conj().T

    def body(target):
        applyGate(gate, *_qubit_names(target))

    def adjoint(target):
        applyGate(inverse, *_qubit_names(target))

    def controlled(controls, target):
        applyControlledGate(gate, controls, *_qubit_names(target))

    def controlled_adjoint(controls, target):
        applyControlledGate(inverse, controls, *_qubit_names(target))

    return Operation(body, adjoint, controlled, controlled_adjoint, name=name or "gate")
