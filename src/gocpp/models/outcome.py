from dataclasses import dataclass


@dataclass(frozen=True)
class PhaseOutcome:
    ok: bool
    error: Exception | None = None
