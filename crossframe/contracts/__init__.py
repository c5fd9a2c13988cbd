"""Configuration and result contracts.

Pydantic models and Literal-based choice types used to validate configuration
payloads across the engine and backend.

Keep module imports explicit in most of the codebase:
    from crossframe.contracts.run_config import CrossFrameConfig
"""

from crossframe.contracts.choices import ALL_CODES, FoldMode, OutcomeKind, TreatmentCode
from crossframe.contracts.fold_configs import FoldModel
from crossframe.contracts.treatment_configs import TreatmentModel
from crossframe.contracts.run_config import CrossFrameConfig, DataModel

__all__ = [
    "ALL_CODES",
    "FoldMode",
    "OutcomeKind",
    "TreatmentCode",
    "FoldModel",
    "TreatmentModel",
    "DataModel",
    "CrossFrameConfig",
]
