from .synthetic import make_high_cardinality_frame

__all__ = ["make_high_cardinality_frame"]
