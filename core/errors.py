# ═══════════════════════════════════════════════════════════════════════════════
# Carbon Intelligence Core — Error Taxonomy
# © 2026 Aparajita Parihar. All rights reserved.
#
#   ValidationError:          malformed project input, raised before any work
#   MissingCoefficientError:  unresolvable (category, type) material key
#   RegionalFallbackWarning:  non-fatal, a documented regional default applied
#   CalculationError:         any other failure mid-pipeline, names the stage
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

from typing import Iterable, Optional


class CarbonIntelligenceError(Exception):
    """Base class for every fatal error raised by the pipeline."""


class ValidationError(CarbonIntelligenceError, ValueError):
    """Project input failed validation. Carries every problem found."""

    def __init__(self, problems: Iterable[str] | str):
        if isinstance(problems, str):
            problems = [problems]
        self.problems: list[str] = list(problems)
        super().__init__("Project validation failed: " + "; ".join(self.problems))


class MissingCoefficientError(CarbonIntelligenceError, LookupError):
    def __init__(self, category: str, type_id: str):
        self.category = category
        self.type_id = type_id
        super().__init__(f"No carbon coefficient for material '{category}/{type_id}'")


class CalculationError(CarbonIntelligenceError):
    """Wraps an unexpected failure inside one pipeline stage."""

    def __init__(self, project_id: str, stage: str, cause: Optional[BaseException] = None):
        self.project_id = project_id
        self.stage = stage
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Calculation failed for project '{project_id}' at stage '{stage}'{detail}")


class RegionalFallbackWarning(UserWarning):
    """A location could not be resolved and a documented default was used."""

    def __init__(self, field: str, requested: object, fallback: object, reason: str = ""):
        self.field = field
        self.requested = requested
        self.fallback = fallback
        self.reason = reason
        message = f"{field}: '{requested}' unresolved, using default '{fallback}'"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RegionalFallbackWarning):
            return NotImplemented
        return (self.field, self.requested, self.fallback, self.reason) == (
            other.field, other.requested, other.fallback, other.reason,
        )

    def __hash__(self) -> int:
        return hash((self.field, str(self.requested), str(self.fallback), self.reason))
