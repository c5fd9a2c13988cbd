from __future__ import annotations

from typing import Literal, TypeAlias

# Fold assignment
FoldMode: TypeAlias = Literal["kfold", "stratified", "grouped"]

# Outcome handling
OutcomeKind: TypeAlias = Literal["numeric", "binary"]

# Treatment codes produced per input variable
TreatmentCode: TypeAlias = Literal["clean", "isBAD", "catN", "catB", "catP", "lev"]

ALL_CODES: tuple[str, ...] = ("clean", "isBAD", "catN", "catB", "catP", "lev")
