"""Run execution domain exports."""

from .generation_run_use_case import RunExecutionError, execute_reference_generation
from .run_contracts import GenerationOutcome, GenerationRequest, PageOutcome, PageStatus

__all__ = [
    "GenerationRequest",
    "GenerationOutcome",
    "PageOutcome",
    "PageStatus",
    "RunExecutionError",
    "execute_reference_generation",
]
