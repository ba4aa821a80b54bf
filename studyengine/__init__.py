"""studyengine - schedule normalization and recurrence resolution for study plans."""

__version__ = "0.1.0"
