"""Core domain models: targets, statuses and batches."""

from ramenwatch.models.core.status import (
    BatchResult,
    PollFailure,
    PollOutcome,
    TargetStatus,
    outcome_to_status,
)
from ramenwatch.models.core.target import RegistryError, Target, TargetRegistry

__all__ = [
    "BatchResult",
    "PollFailure",
    "PollOutcome",
    "RegistryError",
    "Target",
    "TargetRegistry",
    "TargetStatus",
    "outcome_to_status",
]
