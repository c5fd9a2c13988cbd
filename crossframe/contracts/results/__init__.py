from .crossframe import CrossFrameSummary, Record, ResultModel, ScoreRow, TreatedRecords

__all__ = [
    "Record",
    "ResultModel",
    "ScoreRow",
    "CrossFrameSummary",
    "TreatedRecords",
]
