from .plan_cache import CachedPlan, PlanCache, plan_cache

__all__ = ["CachedPlan", "PlanCache", "plan_cache"]
