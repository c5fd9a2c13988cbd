from __future__ import annotations

from typing import Optional

from crossframe.components.encoders.encoder import TreatmentEncoder
from crossframe.contracts.treatment_configs import TreatmentModel


def make_encoder(cfg: Optional[TreatmentModel] = None) -> TreatmentEncoder:
    return TreatmentEncoder(cfg=cfg if cfg is not None else TreatmentModel())
