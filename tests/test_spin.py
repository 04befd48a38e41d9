from __future__ import annotations

import pytest

from csf2det.errors import SpinProjectionOutOfRange, SpinProjectionParityMismatch
from csf2det.guga.paldus import build_paldus_table
from csf2det.guga.spin import validate_spin_projection
from csf2det.guga.stepvec import parse_stepvec


def _validate(stepvec, twoms):
    sv = parse_stepvec(stepvec)
    return validate_spin_projection(build_paldus_table(sv), sv, twoms)


def test_spin_parameters():
    spin = _validate("2udu u0", 2)
    assert spin.nelec == 6
    assert spin.twos == 2
    assert spin.n_somo == 4
    assert spin.n_domo == 1
    assert spin.n_alpha == 3
    assert spin.n_beta == 1
    assert spin.ms_label == "1"
    assert spin.s_label == "1"


@pytest.mark.parametrize("twoms,label,n_alpha", [(1, "1/2", 1), (-1, "-1/2", 0)])
def test_doublet(twoms, label, n_alpha):
    spin = _validate("u", twoms)
    assert spin.ms_label == label
    assert spin.n_alpha == n_alpha


def test_closed_shell():
    spin = _validate("2", 0)
    assert spin.n_alpha == 0
    assert spin.n_somo == 0


@pytest.mark.parametrize("twoms", [3, -3, 4])
def test_out_of_range(twoms):
    with pytest.raises(SpinProjectionOutOfRange) as exc:
        _validate("uu", twoms)
    assert exc.value.twos == 2
    assert exc.value.twoms == twoms


def test_out_of_range_checked_before_parity():
    with pytest.raises(SpinProjectionOutOfRange):
        _validate("ud", 1)


@pytest.mark.parametrize("stepvec,twoms,parity", [("uu", 1, "EVEN"), ("u", 0, "ODD"), ("uuu", -2, "ODD")])
def test_parity_mismatch(stepvec, twoms, parity):
    with pytest.raises(SpinProjectionParityMismatch) as exc:
        _validate(stepvec, twoms)
    assert exc.value.parity == parity
    assert parity in str(exc.value)
