"""Tests for gates and the state-vector workspace."""

import numpy as np
import pytest

from qcanon import (
    reset, pushQubit, tosQubit, applyGate, applyControlledGate, measureQubit,
    get_state, get_namestack,
    H_gate, X_gate, Z_gate, CNOT_gate, SWAP_gate, P_gate, CP_gate,
    controlled_gate,
)


class TestSingleQubitGates:
    """Tests for single-qubit gates."""

    def test_x_gate_flips_zero_to_one(self):
        """X gate should flip |0⟩ to |1⟩."""
        reset()
        pushQubit("q", [1, 0])
        applyGate(X_gate, "q")
        assert np.allclose(get_state(), [0, 1])

    def test_h_gate_creates_superposition(self):
        """H gate on |0⟩ should create equal superposition."""
        reset()
        pushQubit("q", [1, 0])
        applyGate(H_gate, "q")
        expected = np.array([1, 1]) / np.sqrt(2)
        assert np.allclose(get_state(), expected)

    def test_h_gate_is_self_inverse(self):
        """H² = I."""
        reset()
        pushQubit("q", [0.6, 0.8])
        original = get_state().copy()
        applyGate(H_gate, "q")
        applyGate(H_gate, "q")
        assert np.allclose(get_state(), original)

    def test_z_gate_flips_phase(self):
        """Z gate should flip phase of |1⟩."""
        reset()
        pushQubit("q", [1, 1])  # Will be normalized
        applyGate(Z_gate, "q")
        expected = np.array([1, -1]) / np.sqrt(2)
        assert np.allclose(get_state(), expected)

    def test_complex_weights_are_kept(self):
        """pushQubit should accept complex amplitudes (used for phase registers)."""
        reset()
        pushQubit("q", [1, 1j])
        expected = np.array([1, 1j]) / np.sqrt(2)
        assert np.allclose(get_state(), expected)


class TestTwoQubitGates:
    """Tests for two-qubit gates."""

    def test_cnot_controlled_flip(self):
        """CNOT should flip target when control is |1⟩."""
        reset()
        pushQubit("control", [0, 1])
        pushQubit("target", [1, 0])
        applyGate(CNOT_gate, "control", "target")
        assert np.allclose(get_state(), [0, 0, 0, 1])

    def test_cnot_no_flip_when_control_zero(self):
        """CNOT should not flip target when control is |0⟩."""
        reset()
        pushQubit("control", [1, 0])
        pushQubit("target", [1, 0])
        applyGate(CNOT_gate, "control", "target")
        assert np.allclose(get_state(), [1, 0, 0, 0])

    def test_swap_gate(self):
        """SWAP should exchange two qubits."""
        reset()
        pushQubit("a", [1, 0])
        pushQubit("b", [0, 1])
        applyGate(SWAP_gate, "a", "b")
        # State should now be |10⟩ (a=1, b=0)
        assert np.allclose(get_state(), [0, 0, 1, 0])

    def test_tos_qubit_reorders_namestack(self):
        """tosQubit should move the named qubit to the top of the stack."""
        reset()
        pushQubit("a", [0, 1])
        pushQubit("b", [1, 0])
        tosQubit("a")
        assert get_namestack() == ["b", "a"]
        # b=0, a=1 -> index 1
        assert np.allclose(get_state(), [0, 1, 0, 0])


class TestControlledGate:
    """Tests for controlled_gate and applyControlledGate."""

    def test_controlled_x_is_cnot(self):
        assert np.allclose(controlled_gate(X_gate), CNOT_gate)

    @pytest.mark.parametrize("theta", [np.pi / 2, np.pi / 4, np.pi / 8, 1.234])
    def test_controlled_phase_is_cp(self, theta: float):
        assert np.allclose(controlled_gate(P_gate(theta)), CP_gate(theta))

    def test_zero_controls_returns_gate(self):
        assert controlled_gate(H_gate, 0) is H_gate

    def test_negative_controls_rejected(self):
        with pytest.raises(ValueError):
            controlled_gate(X_gate, -1)

    def test_double_controlled_x_truth_table(self):
        """Two controls should act as a Toffoli gate."""
        for c1 in [0, 1]:
            for c2 in [0, 1]:
                for t in [0, 1]:
                    reset()
                    pushQubit("c1", [1 - c1, c1])
                    pushQubit("c2", [1 - c2, c2])
                    pushQubit("t", [1 - t, t])
                    applyControlledGate(X_gate, ["c1", "c2"], "t")
                    expected = t ^ (c1 & c2)
                    assert measureQubit("t") == str(expected)

    def test_no_controls_applies_gate(self):
        reset()
        pushQubit("q", [1, 0])
        applyControlledGate(X_gate, [], "q")
        assert np.allclose(get_state(), [0, 1])


class TestWorkspaceErrors:
    """Tests for misuse of the workspace."""

    def test_same_qubit_twice_rejected(self):
        reset()
        pushQubit("a", [1, 0])
        with pytest.raises(ValueError):
            applyGate(CNOT_gate, "a", "a")

    def test_gate_size_mismatch_rejected(self):
        reset()
        pushQubit("a", [1, 0])
        with pytest.raises(ValueError):
            applyGate(CNOT_gate, "a")

    def test_duplicate_name_rejected(self):
        reset()
        pushQubit("a", [1, 0])
        with pytest.raises(ValueError):
            pushQubit("a", [1, 0])


class TestMeasurement:
    """Tests for measurement."""

    def test_measurement_collapses_state(self):
        """Measurement should collapse superposition to basis state."""
        reset()
        pushQubit("q", [1, 0])
        applyGate(H_gate, "q")
        assert measureQubit("q") in ["0", "1"]

    def test_measurement_statistics(self):
        """Measurement statistics should match probabilities."""
        counts = {"0": 0, "1": 0}
        n_trials = 1000

        for _ in range(n_trials):
            reset()
            pushQubit("q", [1, 0])
            applyGate(H_gate, "q")
            counts[measureQubit("q")] += 1

        # Should be approximately 50/50, allow 10% margin
        assert 0.4 < counts["0"] / n_trials < 0.6
        assert 0.4 < counts["1"] / n_trials < 0.6
