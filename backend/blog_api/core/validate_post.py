"""Post Constraint Checks — composable field rules producing field -> message maps.

Invariants:
    - Every constraint is PURE: value in, message (or None) out
    - Lengths are measured after stripping surrounding whitespace
    - Only the FIRST violation per field is reported
    - Update values are normalized, never validated: blank means "no change"

Design Decisions:
    - Rules are plain tuples of callables so a field's checks read top to bottom
      and run in that order (required before length)
"""

from collections.abc import Callable, Mapping, Sequence

from blog_api.core.errors import PostValidationError

Constraint = Callable[[str | None], str | None]

TITLE_MIN_LENGTH: int = 5
TITLE_MAX_LENGTH: int = 50
CONTENT_MIN_LENGTH: int = 10
CONTENT_MAX_LENGTH: int = 5000


def required(field: str) -> Constraint:
    """Reject None and whitespace-only values."""
    def check(value: str | None) -> str | None:
        if value is None or not value.strip():
            return f"{field} is required"
        return None
    return check


def length_between(field: str, min_length: int, max_length: int) -> Constraint:
    """Reject values whose trimmed length is outside [min_length, max_length]."""
    def check(value: str | None) -> str | None:
        if value is None:
            return None
        if not min_length <= len(value.strip()) <= max_length:
            return (
                f"{field} must be between {min_length} and {max_length} characters"
            )
        return None
    return check


POST_CREATE_RULES: dict[str, Sequence[Constraint]] = {
    "title": (
        required("title"),
        length_between("title", TITLE_MIN_LENGTH, TITLE_MAX_LENGTH),
    ),
    "content": (
        required("content"),
        length_between("content", CONTENT_MIN_LENGTH, CONTENT_MAX_LENGTH),
    ),
}


def collect_violations(
    values: Mapping[str, str | None],
    rules: Mapping[str, Sequence[Constraint]],
) -> dict[str, str]:
    """Run each field's constraints in order; keep the first message per field."""
    violations: dict[str, str] = {}
    for field, constraints in rules.items():
        for constraint in constraints:
            message = constraint(values.get(field))
            if message is not None:
                violations[field] = message
                break
    return violations


def check_post_create(title: str | None, content: str | None) -> None:
    """Raise PostValidationError when a new post's fields break the rules."""
    violations = collect_violations(
        {"title": title, "content": content}, POST_CREATE_RULES,
    )
    if violations:
        raise PostValidationError(violations)


def normalize_update_field(value: str | None) -> str | None:
    """None for absent or blank values, otherwise the value unchanged."""
    if value is None or not value.strip():
        return None
    return value
