"""
SimpleForm Backend: Submission Validation
==========================================

What:  Field rules for a form submission, applied before every create and update.
How:   `validate_submission()` collects every violation, raises one
       ValidationError listing them all, or returns a `ResponseFields` value
       that the store accepts.
Who:   Called by the create and update route handlers.

Rules:
    - name, email, feedback: required, must contain a non-blank string
    - rating: optional; when present, an integer in [RATING_MIN, RATING_MAX]
    - email format is not checked
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional

from simpleform.exceptions import ValidationError
from simpleform.schemas.response import ResponseIn

REQUIRED_FIELDS = ("name", "email", "feedback")
RATING_MIN = 1
RATING_MAX = 5


@dataclass(frozen=True)
class ResponseFields:
    """The four writable fields of a record, already validated."""
    name: str
    email: str
    feedback: str
    rating: Optional[int] = None

    def as_columns(self) -> Dict[str, Any]:
        return asdict(self)


def validate_submission(submission: ResponseIn) -> ResponseFields:
    """
    Check a submission against the record constraints.

    Args:
        submission: Parsed request body

    Returns:
        ResponseFields ready to be written

    Raises:
        ValidationError: one or more constraints failed; `fields` names them
    """
    problems: List[str] = []
    bad_fields: List[str] = []

    for field in REQUIRED_FIELDS:
        value = getattr(submission, field)
        if value is None or not value.strip():
            problems.append(f"{field} is required")
            bad_fields.append(field)

    rating = submission.rating
    if rating is not None and not RATING_MIN <= rating <= RATING_MAX:
        problems.append(
            f"rating must be between {RATING_MIN} and {RATING_MAX}, got {rating}"
        )
        bad_fields.append("rating")

    if problems:
        raise ValidationError(
            message="Response validation failed: " + ", ".join(problems),
            fields=bad_fields,
        )

    return ResponseFields(
        name=submission.name,
        email=submission.email,
        feedback=submission.feedback,
        rating=rating,
    )
