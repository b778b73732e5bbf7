# ABOUTME: Insights package: descriptive statistics and the behaviour profile.
# ABOUTME: Everything here is a pure function over Book lists.

from nextread.insights.buckets import Era, LengthBucket, ReadingTime
from nextread.insights.metrics import LibraryMetrics, compute_metrics
from nextread.insights.profile import BehaviourProfile, build_profile

__all__ = [
    "BehaviourProfile",
    "Era",
    "LengthBucket",
    "LibraryMetrics",
    "ReadingTime",
    "build_profile",
    "compute_metrics",
]
