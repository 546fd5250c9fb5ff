import pytest
import z3

import boxlayout.__main__ as cli


def test_nested_demo_reports_no_unsatisfied(capsys):
    cli.main(["nested", "--count", "3"])

    out = capsys.readouterr().out
    assert "nested[2]:" in out
    assert "Satisfied constraints: 36" in out
    assert "Unsatisfied constraints:\n  (none)" in out


def test_row_demo_distributes_flex_space(capsys):
    cli.main(["row", "--count", "3", "--timeout-ms", "10000"])

    out = capsys.readouterr().out
    assert "box[0]: left=17.500 right=27.500" in out
    assert "box[2]: left=72.500 right=82.500" in out


def test_conflict_demo_lists_unsatisfied_constraints(capsys):
    cli.main(["conflict"])

    out = capsys.readouterr().out
    unsatisfied = out.split("Unsatisfied constraints:\n", 1)[1]
    assert unsatisfied.startswith("  - ")
    assert "(none)" not in unsatisfied


def test_solver_failure_exits_with_error(capsys, monkeypatch):
    monkeypatch.setattr(z3.Optimize, "check", lambda self, *args: z3.unsat)

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["nested", "--count", "1"])

    assert excinfo.value.code == 1
    assert "Layout failed: provided constraints cannot be satisfied" in capsys.readouterr().out


def test_count_must_be_positive():
    with pytest.raises(SystemExit):
        cli.main(["row", "--count", "0"])
