"""
Tests for the scipy linprog backend.
"""

import numpy as np
import pytest

from lpparse import lp_from_text, solve_lp
from lpparse.optimizers import LinprogBackend, LPResult


ADVERTISING = """
    var television;
    var newspaper;
    var radio;

    maximize objective: 100000*television + 40000*newspaper + 18000*radio;

    subject to constraint_1: 20*television + 6*newspaper + 3*radio <= 182;
    subject to constraint_2: newspaper <= 10;
    subject to constraint_3: -1*television + -1*newspaper + radio <= 0;
    subject to constraint_4: -9*television + newspaper + radio <= 0;
"""


class TestLinprogBackend:
    """Test solving built models."""

    def test_backend_info(self):
        """Backend reports its methods."""
        backend = LinprogBackend()
        assert backend.name == "scipy"
        assert backend.is_available()
        assert "highs" in backend.get_methods()

    def test_maximize(self):
        """Small maximization with a known optimum (x=3, y=1)."""
        lp = lp_from_text("""
            var x; var y;
            maximize profit: 3*x + 2*y;
            subject to capacity: x + y <= 4;
            subject to labour: x + 3*y <= 6;
            subject to cap_x: x <= 3;
        """)

        result = solve_lp(lp)

        assert result.success
        assert result.objective_value == pytest.approx(11.0)
        assert result.values["x"] == pytest.approx(3.0)
        assert result.values["y"] == pytest.approx(1.0)

    def test_minimize_with_equality(self):
        """Minimization with >= and == rows."""
        lp = lp_from_text("""
            var a; var b;
            minimize cost: 2*a + 3*b;
            subject to demand: a + b >= 10;
            subject to ratio: a + -1*b == 2;
        """)

        result = LinprogBackend().solve(lp, method="highs-ds")

        assert result.success
        assert result.values["a"] == pytest.approx(6.0)
        assert result.values["b"] == pytest.approx(4.0)
        assert result.objective_value == pytest.approx(24.0)

    def test_advertising_feasible(self):
        """Solution of the advertising example satisfies A x = b."""
        lp = lp_from_text(ADVERTISING)

        result = solve_lp(lp)

        assert result.success
        np.testing.assert_allclose(lp.A @ result.x, lp.b, atol=1e-6)
        assert result.values["newspaper"] <= 10.0 + 1e-9
        assert result.objective_value > 0

    def test_infeasible(self):
        """Infeasible problems return a failure result."""
        lp = lp_from_text("var x; minimize f: x; subject to lo: x >= 5; subject to hi: x <= 1;")

        result = solve_lp(lp)

        assert not result.success
        assert result.x is None
        assert result.to_dict()["x"] is None

    def test_unknown_method(self):
        """Only linprog methods are accepted."""
        lp = lp_from_text("var x; minimize f: x;")
        with pytest.raises(ValueError, match="Unknown linprog method"):
            LinprogBackend().solve(lp, method="simplex-magic")

    def test_unconstrained(self):
        """No rows: bounds alone decide the optimum."""
        result = solve_lp(lp_from_text("var x; minimize f: x;"))
        assert result.success
        assert result.values["x"] == pytest.approx(0.0)

    def test_result_to_dict(self):
        """Results serialize for display."""
        result = LPResult(
            success=True, message="ok", x=np.array([1.0, 2.0]),
            objective_value=3.0, values={"x": 1.0}, n_iterations=2,
        )
        data = result.to_dict()
        assert data["x"] == [1.0, 2.0]
        assert data["values"] == {"x": 1.0}
