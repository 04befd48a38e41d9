from __future__ import annotations

import pytest

from csf2det.cli.main import HINT, main


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("CSF2DET_VERBOSE", raising=False)
    monkeypatch.delenv("CSF2DET_MAX_DETERMINANTS", raising=False)


def test_no_arguments_prints_hint(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == HINT + "\n"


def test_help_exits_zero(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--help"])
    assert exc.value.code == 0
    out = capsys.readouterr().out
    assert "--stepvec" in out
    assert "--twoms" in out


def test_expansion_output(capsys):
    assert main(["-s", "ud", "-m", "0"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "2 electrons in 2 orbitals",
        "output = phase * C^2 * SD",
        "   +   1/2        | a b |",
        "   -   1/2        | b a |",
    ]


def test_long_options_and_negative_twoms(capsys):
    assert main(["--stepvec", "u", "--twoms", "-1"]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "   +   1/1        | b |"


def test_missing_required_argument(capsys):
    assert main(["-s", "uu"]) == 1
    out = capsys.readouterr().out.splitlines()
    assert out[0].startswith("csf2det: ")
    assert "--twoms" in out[0]
    assert out[-1] == HINT


def test_non_integer_twoms(capsys):
    assert main(["-s", "uu", "-m", "half"]) == 1
    assert capsys.readouterr().out.splitlines()[-1] == HINT


def test_invalid_symbol_diagnostic(capsys):
    assert main(["-s", "2x", "-m", "0"]) == 1
    assert capsys.readouterr().out.splitlines() == [
        "input error: illegal character 'x' in stepvector at position 1",
        "             check the -s or --stepvec input string",
    ]


def test_ud_ordering_diagnostic(capsys):
    assert main(["-s", "du", "-m", "0"]) == 1
    out = capsys.readouterr().out.splitlines()
    assert out[0].startswith("input error: invalid ud ordering")
    assert out[1] == "             check the -s or --stepvec input string"


def test_out_of_range_diagnostic(capsys):
    assert main(["-s", "uu", "-m", "3"]) == 1
    assert capsys.readouterr().out.splitlines() == [
        "input error: exceeded maximum Ms value of",
        "             -/+ 2 half integer units",
        "             check the -m or --twoms input value",
    ]


def test_parity_diagnostic(capsys):
    assert main(["-s", "uu", "-m", "1"]) == 1
    assert capsys.readouterr().out.splitlines() == [
        "input error: Ms should be an EVEN number of half integers",
        "             check the -m or --twoms input value",
    ]


def test_verbose_flag(capsys):
    assert main(["-v", "-s", "u", "-m", "1"]) == 0
    out = capsys.readouterr().out
    assert "CSF: u, Ms: 1/2" in out
    assert "Paldus table:" not in out


def test_verbose_from_environment(capsys, monkeypatch):
    monkeypatch.setenv("CSF2DET_VERBOSE", "5")
    assert main(["-s", "ud", "-m", "0"]) == 0
    assert "Paldus table:" in capsys.readouterr().out


def test_determinant_limit_from_environment(capsys, monkeypatch):
    monkeypatch.setenv("CSF2DET_MAX_DETERMINANTS", "1")
    assert main(["-s", "uu", "-m", "0"]) == 1
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "input error: determinant enumeration exceeded max_determinants=1"


def test_invalid_environment_value(monkeypatch):
    monkeypatch.setenv("CSF2DET_MAX_DETERMINANTS", "many")
    with pytest.raises(SystemExit):
        main(["-s", "uu", "-m", "0"])
