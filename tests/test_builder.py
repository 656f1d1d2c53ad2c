"""
Tests for the standard-form builder and lp_from_text / lp_from_file.
"""

import numpy as np
import pytest

from lpparse.builder import BuildError, BuilderBase, Lp, Optimization, StandardFormBuilder
from lpparse.formulation.schema import Constraint, Objective, Relation, WeightedVariable
from lpparse.modeling import (
    MissingObjective,
    build_lp,
    lp_from_file,
    lp_from_text,
    parse_components,
)


ADVERTISING = """
    var television;
    var newspaper;
    var radio;

    maximize objective: 100000.*television + 40000.*newspaper + 18000.*radio;

    subject to constraint_1: 20.*television + 6.*newspaper + 3.*radio <= 182.;
    subject to constraint_2: newspaper <= 10.;
    subject to constraint_3: -1.*television + -1.*newspaper + radio <= 0.;
    subject to constraint_4: -9.*television + newspaper + radio <= 0.;
"""


class RecordingBuilder(BuilderBase):
    """Builder that records the call order."""

    def __init__(self):
        self.calls = []

    def add_variable(self, variable):
        self.calls.append(("variable", variable.name))

    def add_constraint(self, constraint):
        self.calls.append(("constraint", constraint.name))

    def add_objective(self, objective):
        self.calls.append(("objective", objective.name))

    def build(self):
        self.calls.append(("build", None))
        return self.calls


class TestLpFromText:
    """Test parsing straight into matrices."""

    def test_advertising_matrices(self):
        """One slack column per <= constraint."""
        lp = lp_from_text(ADVERTISING)

        expected_A = np.array([
            [20.0,  6.0, 3.0, 1.0, 0.0, 0.0, 0.0],
            [0.0,   1.0, 0.0, 0.0, 1.0, 0.0, 0.0],
            [-1.0, -1.0, 1.0, 0.0, 0.0, 1.0, 0.0],
            [-9.0,  1.0, 1.0, 0.0, 0.0, 0.0, 1.0],
        ])

        np.testing.assert_array_equal(lp.A, expected_A)
        np.testing.assert_array_equal(lp.b, [182.0, 10.0, 0.0, 0.0])
        np.testing.assert_array_equal(lp.c, [100000.0, 40000.0, 18000.0, 0.0, 0.0, 0.0, 0.0])
        assert lp.optimization == Optimization.MAX
        assert lp.variable_names == ["television", "newspaper", "radio"]
        assert lp.slack_names == [f"slack_constraint_{i}" for i in range(1, 5)]

    def test_builder_call_order(self):
        """Variables, then constraints, then objective, then build."""
        calls = lp_from_text(
            "var x; var y; subject to c1: x <= 1; minimize f: x + y; subject to c2: y >= 2;",
            builder=RecordingBuilder(),
        )
        assert calls == [
            ("variable", "x"),
            ("variable", "y"),
            ("constraint", "c1"),
            ("constraint", "c2"),
            ("objective", "f"),
            ("build", None),
        ]

    def test_parse_errors_propagate(self):
        """Nothing is built from an invalid document."""
        builder = RecordingBuilder()
        with pytest.raises(MissingObjective):
            lp_from_text("var x; subject to c: x <= 1;", builder=builder)
        assert builder.calls == []

    def test_build_lp_from_components(self):
        """Parsed components build the same Lp as lp_from_text."""
        calls = build_lp(
            parse_components("var x; maximize f: x; subject to c: x <= 1;"),
            RecordingBuilder(),
        )
        assert calls == [("variable", "x"), ("constraint", "c"), ("objective", "f"), ("build", None)]

        lp = build_lp(parse_components(ADVERTISING))
        np.testing.assert_array_equal(lp.A, lp_from_text(ADVERTISING).A)

    def test_lp_from_file(self, tmp_path):
        """File variant matches the text variant."""
        path = tmp_path / "advertising.lp"
        path.write_text(ADVERTISING, encoding="utf-8")

        lp = lp_from_file(path)

        np.testing.assert_array_equal(lp.A, lp_from_text(ADVERTISING).A)


class TestStandardFormBuilder:
    """Test column layout rules."""

    def _var(self, name, coefficient=0.0):
        return WeightedVariable(name=name, coefficient=coefficient)

    def test_mixed_relations(self):
        """>= gets a -1 slack, == gets no slack."""
        builder = StandardFormBuilder()
        builder.add_variable(self._var("x"))
        builder.add_variable(self._var("y"))
        builder.add_constraint(Constraint(
            name="low", terms=[self._var("x", 1.0), self._var("y", 1.0)],
            constant=1.0, relation=Relation.GREATER_OR_EQUAL,
        ))
        builder.add_constraint(Constraint(
            name="fix", terms=[self._var("x", 1.0)],
            constant=2.0, relation=Relation.EQUAL,
        ))
        builder.add_objective(Objective(
            name="f", terms=[self._var("y", 3.0)], maximize=False,
        ))

        lp = builder.build()

        np.testing.assert_array_equal(lp.A, [[1.0, 1.0, -1.0], [1.0, 0.0, 0.0]])
        np.testing.assert_array_equal(lp.c, [0.0, 3.0, 0.0])
        assert lp.optimization == Optimization.MIN
        assert lp.slack_names == ["slack_low"]
        assert lp.n_columns == 3
        assert lp.column_names == ["x", "y", "slack_low"]

    def test_repeated_terms_add_up(self):
        """Duplicate names in one expression are summed into one cell."""
        lp = lp_from_text("var a; minimize f: a + 2*a; subject to c: a + a <= 4;")
        np.testing.assert_array_equal(lp.A, [[2.0, 1.0]])
        np.testing.assert_array_equal(lp.c, [3.0, 0.0])

    def test_undeclared_variable(self):
        """Terms must reference declared variables."""
        with pytest.raises(BuildError, match="undeclared variable 'z'"):
            lp_from_text("var x; minimize f: x; subject to c: x + z <= 1;")

    def test_duplicate_declaration(self):
        """Each variable is declared once."""
        with pytest.raises(BuildError, match="declared more than once"):
            lp_from_text("var x; var x; minimize f: x;")

    def test_duplicate_constraint_name(self):
        """Two constraints with one name would share a slack column name."""
        with pytest.raises(BuildError, match="Constraint 'c' defined more than once"):
            lp_from_text("var x; minimize f: x; subject to c: x <= 1; subject to c: x >= 0;")

    def test_missing_objective(self):
        """build() requires an objective."""
        builder = StandardFormBuilder()
        builder.add_variable(self._var("x"))
        with pytest.raises(BuildError, match="No objective"):
            builder.build()

    def test_to_dict(self):
        """Lp serializes to plain lists."""
        lp = lp_from_text("var x; maximize f: x; subject to c: x <= 1;")
        data = lp.to_dict()
        assert data["A"] == [[1.0, 1.0]]
        assert data["optimization"] == "max"
        assert isinstance(lp, Lp)
