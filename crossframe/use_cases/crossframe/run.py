from __future__ import annotations

import logging
from typing import Optional

import pandas as pd

from crossframe.components.encoders.encoder import prepare_outcome
from crossframe.components.encoders.scoring import SCORE_COLUMNS, score_frame
from crossframe.components.interfaces import VariableEncoder
from crossframe.contracts.run_config import CrossFrameConfig
from crossframe.core.progress import ProgressCallback
from crossframe.errors import ConfigurationError
from crossframe.factories.encoder_factory import make_encoder
from crossframe.factories.split_factory import make_splitter
from crossframe.runtime.random.rng import RngManager

from .assemble import assemble_cross_frame
from .folds import run_folds
from .types import CrossFrameResult
from .validation import validate_request

logger = logging.getLogger(__name__)


def cross_frame_experiment(
    dataset: pd.DataFrame,
    cfg: CrossFrameConfig,
    *,
    encoder: Optional[VariableEncoder] = None,
    progress: Optional[ProgressCallback] = None,
) -> CrossFrameResult:
    """Build a treatment plan and a cross frame for ``dataset``.

    All-or-nothing: any configuration, data or fold failure raises and no
    partial cross frame is returned.
    """

    # --- Checks (before any fold work) --------------------------------------
    validate_request(dataset, cfg)
    columns = list(cfg.input_columns)
    outcome_column = cfg.outcome_column

    # --- RNG ----------------------------------------------------------------
    rngm = RngManager(cfg.seed)
    seed = rngm.root

    enc = encoder if encoder is not None else make_encoder(cfg.treatment)
    y = prepare_outcome(dataset, outcome_column, cfg.treatment)

    # --- Full-data plan (the only long-lived encoding) ----------------------
    plan = enc.fit(dataset, columns, outcome_column)

    # --- Folds ----------------------------------------------------------------
    splitter = make_splitter(cfg.folds, seed=rngm.fold_seed())
    groups = None
    if cfg.folds.mode == "grouped":
        groups = dataset[cfg.folds.group_column].to_numpy(dtype=object)
    folds = splitter.assign(int(dataset.shape[0]), outcome=y, groups=groups)

    logger.info(
        "building cross frame: %d rows, %d %s folds %s, seed=%d",
        dataset.shape[0],
        folds.n_folds,
        cfg.folds.mode,
        folds.fold_sizes(),
        seed,
    )

    outputs = run_folds(
        encoder=enc,
        dataset=dataset,
        columns=columns,
        outcome_column=outcome_column,
        reference=plan,
        folds=folds,
        n_jobs=cfg.n_jobs,
        progress=progress,
    )

    # --- Merge ------------------------------------------------------------------
    cross = assemble_cross_frame(outputs, dataset.index)
    if outcome_column in cross.columns:
        raise ConfigurationError(f"Encoder produced a column named like the outcome ({outcome_column!r})")
    cross[outcome_column] = dataset[outcome_column].to_numpy()

    notes = []
    if hasattr(plan, "derived"):
        scores = score_frame(cross, plan, y)
    else:
        scores = pd.DataFrame(columns=SCORE_COLUMNS)
        notes.append("Score frame skipped: encoder plan does not describe its derived columns.")

    sizes = folds.fold_sizes()
    if cfg.folds.mode == "grouped" and (max(sizes) - min(sizes)) > 1:
        notes.append(f"Grouped fold sizes are unbalanced: {sizes}")

    return CrossFrameResult(
        plan=plan,
        cross_frame=cross,
        folds=folds,
        score_frame=scores,
        seed=seed,
        fold_mode=cfg.folds.mode,
        outcome_column=outcome_column,
        notes=notes,
    )
