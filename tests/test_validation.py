"""
SimpleForm Backend: Submission Validation Unit Tests
=====================================================

What we test:
    ✅ Valid submissions pass, with and without rating
    ✅ Missing, empty and blank required fields are rejected
    ✅ Rating bounds (1 and 5 accepted, 0 and 6 rejected)
    ✅ All violations are reported together
"""

import pytest

from simpleform.exceptions import ValidationError
from simpleform.schemas.response import ResponseIn
from simpleform.services.validation import ResponseFields, validate_submission


def make(**overrides):
    body = {"name": "Ann", "email": "a@x.com", "feedback": "Great", "rating": 5}
    body.update(overrides)
    return ResponseIn(**body)


class TestValidSubmissions:

    def test_full_submission(self):
        fields = validate_submission(make())
        assert fields == ResponseFields(name="Ann", email="a@x.com", feedback="Great", rating=5)

    def test_rating_is_optional(self):
        fields = validate_submission(make(rating=None))
        assert fields.rating is None

    @pytest.mark.parametrize("rating", [1, 5])
    def test_rating_bounds_inclusive(self, rating):
        assert validate_submission(make(rating=rating)).rating == rating

    def test_email_format_not_checked(self):
        assert validate_submission(make(email="not-an-email")).email == "not-an-email"

    def test_as_columns(self):
        columns = validate_submission(make(rating=3)).as_columns()
        assert columns == {"name": "Ann", "email": "a@x.com", "feedback": "Great", "rating": 3}


class TestRejectedSubmissions:

    @pytest.mark.parametrize("field", ["name", "email", "feedback"])
    def test_empty_required_field(self, field):
        with pytest.raises(ValidationError, match=f"{field} is required") as exc_info:
            validate_submission(make(**{field: ""}))
        assert exc_info.value.fields == [field]

    @pytest.mark.parametrize("field", ["name", "email", "feedback"])
    def test_missing_required_field(self, field):
        with pytest.raises(ValidationError, match=f"{field} is required"):
            validate_submission(make(**{field: None}))

    def test_blank_required_field(self):
        with pytest.raises(ValidationError, match="name is required"):
            validate_submission(make(name="   "))

    @pytest.mark.parametrize("rating", [0, 6, -1, 100])
    def test_rating_out_of_range(self, rating):
        with pytest.raises(ValidationError, match="rating must be between 1 and 5") as exc_info:
            validate_submission(make(rating=rating))
        assert exc_info.value.context == {"fields": ["rating"]}

    def test_every_problem_reported(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_submission(ResponseIn(rating=9))
        assert exc_info.value.fields == ["name", "email", "feedback", "rating"]
        assert exc_info.value.message.startswith("Response validation failed: ")
