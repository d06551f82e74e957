from .activity import ActivityItemRead, SummaryLineRead

__all__ = [
    "ActivityItemRead",
    "SummaryLineRead",
]
