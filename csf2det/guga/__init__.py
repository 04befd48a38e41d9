"""GUGA step-vector kernel: parsing, Paldus counters, spin checks and coefficients."""

from csf2det.guga.coefficients import Determinant, csf_coefficient, spin_eigenvalues
from csf2det.guga.combinations import first_combination, iter_alpha_subsets, next_combination
from csf2det.guga.paldus import PaldusTable, build_paldus_table
from csf2det.guga.spin import SpinParameters, validate_spin_projection
from csf2det.guga.stepvec import OCC_SYMBOLS, STEP_ORDER, StepVector, parse_stepvec

__all__ = [
    "Determinant",
    "OCC_SYMBOLS",
    "PaldusTable",
    "STEP_ORDER",
    "SpinParameters",
    "StepVector",
    "build_paldus_table",
    "csf_coefficient",
    "first_combination",
    "iter_alpha_subsets",
    "next_combination",
    "parse_stepvec",
    "spin_eigenvalues",
    "validate_spin_projection",
]
