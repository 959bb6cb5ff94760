"""Tests for ttreco.math.kinematics module."""

import numpy as np
import pytest

from ttreco.math import delta_phi, delta_r, inv_mass, pt_eta_phi


class TestDeltaPhi:
    """Test the azimuthal difference folding."""

    @pytest.mark.parametrize(
        "phi1, phi2, expected",
        [
            (0.5, 0.2, 0.3),
            (3.0, -3.0, 6.0 - 2 * np.pi),
            (-3.0, 3.0, 2 * np.pi - 6.0),
            (np.pi, -np.pi, 0.0),
        ],
    )
    def test_folding(self, phi1, phi2, expected):
        """Test that the difference is folded into [-pi, pi]."""
        assert delta_phi(phi1, phi2) == pytest.approx(expected, abs=1e-12)

    def test_non_finite(self):
        """Test that a non-finite angle does not hang and returns NaN."""
        assert np.isnan(delta_phi(np.inf, 0.0))
        assert np.isnan(delta_phi(np.nan, 0.0))


class TestDeltaR:
    """Test the angular distance."""

    def test_pythagorean(self):
        """Test a 3-4-5 triangle in the (eta, phi) plane."""
        assert delta_r(0.3, 0.0, 0.0, 0.4) == pytest.approx(0.5)

    def test_symmetric(self):
        """Test that the distance does not depend on the order."""
        assert delta_r(1.0, 2.5, -0.5, -2.9) == pytest.approx(
            delta_r(-0.5, -2.9, 1.0, 2.5)
        )


class TestInvariantMass:
    """Test the signed invariant mass."""

    def test_time_like(self):
        """Test the mass of a time-like vector."""
        assert inv_mass(3.0, 4.0, 0.0, 13.0) == pytest.approx(12.0)

    def test_space_like(self):
        """Test that a space-like vector gets a negative mass."""
        assert inv_mass(3.0, 4.0, 0.0, 3.0) == pytest.approx(-4.0)

    def test_nan(self):
        """Test that NaN components propagate."""
        assert np.isnan(inv_mass(np.nan, 0.0, 0.0, 1.0))


class TestPtEtaPhi:
    """Test the conversion to collider coordinates."""

    def test_transverse(self):
        """Test a purely transverse vector."""
        pt, eta, phi = pt_eta_phi(0.0, 2.0, 0.0)
        assert pt == pytest.approx(2.0)
        assert eta == pytest.approx(0.0)
        assert phi == pytest.approx(np.pi / 2)

    def test_null(self):
        """Test the null vector."""
        assert pt_eta_phi(0.0, 0.0, 0.0) == (0.0, 0.0, 0.0)
