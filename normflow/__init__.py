"""Min-max normalization with mapping and split-apply-fit helpers.

- normalize.py: normalize / normalize_frame
- validation.py: postcondition checks for normalized output
- mapping.py: map_list / map_dbl / map_df
- sampling.py: seeded random sequences
- models.py: split_frame / fit_ols / fit_by_group / r_squared_by_group
"""

from normflow.exceptions import DegenerateRange, InvalidInput, NormflowError
from normflow.mapping import map_dbl, map_df, map_list
from normflow.models import ModelSummary, fit_by_group, fit_ols, r_squared_by_group, split_frame
from normflow.normalize import normalize, normalize_frame
from normflow.sampling import random_sequences
from normflow.validation import NormalizationCheck, assert_normalized, check_normalized

__version__ = "0.1.0"

__all__ = [
    # Normalizer
    "normalize",
    "normalize_frame",
    "NormalizationCheck",
    "assert_normalized",
    "check_normalized",
    # Errors
    "NormflowError",
    "InvalidInput",
    "DegenerateRange",
    # Mapping
    "map_list",
    "map_dbl",
    "map_df",
    "random_sequences",
    # Models
    "ModelSummary",
    "split_frame",
    "fit_ols",
    "fit_by_group",
    "r_squared_by_group",
]
