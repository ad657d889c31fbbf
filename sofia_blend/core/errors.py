"""Error Hierarchy: typed, categorized exceptions for every blend-engine failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Caller contract violations are 400/404; catalog defects are 500 (INTERNAL)
    - to_response() produces the REST envelope used by the API error handlers
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with SofiaError base: FastAPI global handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    recipe_name: str | None = None
    parameter_key: str | None = None
    debug_info: dict[str, Any] | None = None


class SofiaError(Exception):
    """Base exception for all blend-engine errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "recipe_name": self.context.recipe_name,
                    "parameter_key": self.context.parameter_key,
                },
            }
        }


# ─── Caller Contract Errors (400-level) ─────────────────────────

class UnknownRecipeError(SofiaError):
    """Recipe name absent from the catalog."""
    def __init__(self, recipe_name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.recipe_name = recipe_name
        super().__init__(
            f"Recipe '{recipe_name}' not found",
            "UNKNOWN_RECIPE", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.recipe_name = recipe_name


class EmptyVoteListError(SofiaError):
    """Selector called without a single vote."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "At least one questionnaire vote is required to select a recipe.",
            "EMPTY_VOTE_LIST", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )


class InvalidBirthDateError(SofiaError):
    """Birth date out of range or not a real calendar day."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_BIRTH_DATE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class InvalidAnswerError(SofiaError):
    """Questionnaire answers do not match the question list."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_ANSWER", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )


# ─── Catalog Defects (500-level) ────────────────────────────────

class IncompleteProfileError(SofiaError):
    """A recipe requires a parameter key the profile cannot resolve."""
    def __init__(
        self, parameter_key: str, recipe_name: str | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.parameter_key = parameter_key
        ctx.recipe_name = recipe_name
        super().__init__(
            f"Parameter '{parameter_key}' cannot be resolved from the profile",
            "INCOMPLETE_PROFILE", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.parameter_key = parameter_key


class OilProfileMissingError(SofiaError):
    """Oil table has no entry for a parameter value."""
    def __init__(self, value: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.debug_info = {"value": value}
        super().__init__(
            f"No oil profile for parameter value {value}",
            "OIL_PROFILE_MISSING", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.value = value
