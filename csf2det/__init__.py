"""csf2det — expand GUGA configuration state functions into Slater determinants."""

from importlib.metadata import PackageNotFoundError, version as _dist_version

from csf2det.config import ExpansionConfig
from csf2det.errors import (
    CSFExpansionError,
    DeterminantLimitExceeded,
    EmptyStepVector,
    InvalidAlphaCount,
    InvalidStepVectorSymbol,
    NegativeSpinCounter,
    SpinProjectionOutOfRange,
    SpinProjectionParityMismatch,
)
from csf2det.guga import (
    Determinant,
    PaldusTable,
    SpinParameters,
    StepVector,
    build_paldus_table,
    csf_coefficient,
    iter_alpha_subsets,
    parse_stepvec,
    validate_spin_projection,
)

# High-level drivers module (import as `from csf2det import drivers`)
from csf2det import drivers
from csf2det.drivers import CSFExpansion, expand_csf, iter_determinants

try:
    __version__ = _dist_version("csf2det")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.1.0"

__all__ = [
    "__version__",
    # Core classes
    "CSFExpansion",
    "Determinant",
    "ExpansionConfig",
    "PaldusTable",
    "SpinParameters",
    "StepVector",
    # Core functions
    "build_paldus_table",
    "csf_coefficient",
    "expand_csf",
    "iter_alpha_subsets",
    "iter_determinants",
    "parse_stepvec",
    "validate_spin_projection",
    # Errors
    "CSFExpansionError",
    "DeterminantLimitExceeded",
    "EmptyStepVector",
    "InvalidAlphaCount",
    "InvalidStepVectorSymbol",
    "NegativeSpinCounter",
    "SpinProjectionOutOfRange",
    "SpinProjectionParityMismatch",
    # High-level drivers
    "drivers",
]
