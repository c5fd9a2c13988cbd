from .facade import (
    apply_treatments,
    build_cross_frame,
    cache_plan,
    cross_frame_experiment,
    design_treatments,
    get_cached_plan,
    load_plan,
    load_plan_bytes_to_cache,
    run_cross_frame_from_cfg,
    save_plan,
    save_plan_bytes_from_cache,
)

__all__ = [
    "build_cross_frame",
    "cross_frame_experiment",
    "run_cross_frame_from_cfg",
    "design_treatments",
    "apply_treatments",
    "save_plan",
    "load_plan",
    "cache_plan",
    "get_cached_plan",
    "save_plan_bytes_from_cache",
    "load_plan_bytes_to_cache",
]
