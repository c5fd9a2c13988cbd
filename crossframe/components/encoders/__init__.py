from .encoder import TreatmentEncoder, check_columns, check_derived_names, prepare_outcome
from .levels import NA_LEVEL, RARE_LEVEL
from .plan import TreatmentPlan
from .scoring import score_frame
from .treatments import CategoricalTreatment, NumericTreatment

__all__ = [
    "TreatmentEncoder",
    "TreatmentPlan",
    "NumericTreatment",
    "CategoricalTreatment",
    "NA_LEVEL",
    "RARE_LEVEL",
    "check_columns",
    "check_derived_names",
    "prepare_outcome",
    "score_frame",
]
