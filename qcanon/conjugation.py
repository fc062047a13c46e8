"""
Conjugation combinators: apply an operation "within" another one.

Each constructor takes an ``outer`` operation U and an ``inner`` operation V
and returns a new operation that performs

    U, then V, then U†

on its target. The variants differ only in which capabilities they ask of
V and therefore which ones the result can offer:

    apply_with     outer: adjoint          result: none
    apply_with_a   inner: adjoint          result: adjoint
    apply_with_c   inner: controlled       result: controlled
    apply_with_ca  inner: both             result: both

The derived forms never touch U beyond running it and its adjoint:

    adjoint             U, V†, U†
    controlled(cs)      U, controlled V(cs), U†
    controlled adjoint  U, controlled V†(cs), U†

Only V is gated, because U and U† cancel whether or not the controls are set.
Capabilities are checked when the combined operation is built, so a missing
one raises ``CapabilityError`` before anything touches the workspace.

Example:
    >>> add = apply_with_ca(qft_le, increment_phase_by_integer(3))
    >>> add(register)                         # |x⟩ -> |x + 3⟩
    >>> add.apply_controlled(["c"], register) # only when c is |1⟩
"""

from .operation import Capability, Operation


def _within(outer: Operation, apply_inner):
    """Run ``apply_inner(*args)`` between ``outer`` and its adjoint."""
    def apply(*args):
        target = args[-1]
        outer(target)
        apply_inner(*args)
        outer.apply_adjoint(target)
    return apply


def _name(variant: str, outer: Operation, inner: Operation) -> str:
    return f"{variant}({outer.name}, {inner.name})"


def apply_with(outer: Operation, inner: Operation) -> Operation:
    """U, V, U†. ``outer`` must be invertible; nothing is derived."""
    outer.require(Capability.ADJOINT, "outer operation")

    return Operation(_within(outer, inner), name=_name("ApplyWith", outer, inner))


def apply_with_a(outer: Operation, inner: Operation) -> Operation:
    """U, V, U† with adjoint U, V†, U†."""
    outer.require(Capability.ADJOINT, "outer operation")
    inner.require(Capability.ADJOINT, "inner operation")

    return Operation(
        _within(outer, inner),
        adjoint=_within(outer, inner.apply_adjoint),
        name=_name("ApplyWithA", outer, inner),
    )


def apply_with_c(outer: Operation, inner: Operation) -> Operation:
    """U, V, U† whose controlled form gates only V."""
    outer.require(Capability.ADJOINT, "outer operation")
    inner.require(Capability.CONTROLLED, "inner operation")

    return Operation(
        _within(outer, inner),
        controlled=_within(outer, inner.apply_controlled),
        name=_name("ApplyWithC", outer, inner),
    )


def apply_with_ca(outer: Operation, inner: Operation) -> Operation:
    """U, V, U† with both the adjoint and the controlled forms derived."""
    outer.require(Capability.ADJOINT, "outer operation")
    inner.require(Capability.ADJOINT_CONTROLLED, "inner operation")

    return Operation(
        _within(outer, inner),
        adjoint=_within(outer, inner.apply_adjoint),
        controlled=_within(outer, inner.apply_controlled),
        controlled_adjoint=_within(outer, inner.apply_controlled_adjoint),
        name=_name("ApplyWithCA", outer, inner),
    )


_VARIANTS = {
    Capability.NONE: apply_with,
    Capability.ADJOINT: apply_with_a,
    Capability.CONTROLLED: apply_with_c,
    Capability.ADJOINT_CONTROLLED: apply_with_ca,
}


def conjugate(outer: Operation, inner: Operation) -> Operation:
    """
    U, V, U† carrying every capability ``inner`` allows.

    Picks the ``apply_with*`` variant matching ``inner.capabilities``.
    """
    return _VARIANTS[inner.capabilities](outer, inner)
