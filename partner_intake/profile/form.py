"""Form state helpers: defaults, camelCase round-trip and immutable field edits."""
from typing import Any, Dict, Tuple

from pydantic import BaseModel

from partner_intake.profile.models import ApplicantProfile, Languages
from partner_intake.score.scorer import score_profile


def initial_form() -> ApplicantProfile:
    """Starting state of a blank intake form."""
    return ApplicantProfile(
        role="distributor",
        country="Canada",
        languages=Languages(english=True),
    )


def from_form(data: Dict[str, Any]) -> ApplicantProfile:
    """
    Build a profile from form data.

    Args:
        data: Nested dict with camelCase (or snake_case) keys

    Returns:
        Validated profile

    Raises:
        pydantic.ValidationError: If a value has the wrong type or is negative
    """
    return ApplicantProfile.model_validate(data)


def to_form(profile: ApplicantProfile) -> Dict[str, Any]:
    """Serialize a profile back to the form's camelCase shape."""
    return profile.model_dump(by_alias=True, mode="json")


def get_field(model: BaseModel, path: str) -> Any:
    """Read a dotted attribute path such as ``logistics.cold_chain``."""
    value = model
    for part in path.split("."):
        value = getattr(value, part)
    return value


def set_field(model: BaseModel, path: str, value: Any) -> BaseModel:
    """
    Return a copy of the model with one dotted-path field replaced.

    The changed group is re-validated, so form strings and floats are coerced
    the same way as on initial load. The original model is left untouched.

    Args:
        model: Profile (or profile group)
        path: Dotted snake_case path, e.g. ``network_counts.chains``
        value: New value

    Raises:
        KeyError: If a path segment is not a field
        pydantic.ValidationError: If the value does not fit the field
    """
    head, _, rest = path.partition(".")
    if head not in type(model).model_fields:
        raise KeyError(f"Unknown profile field: {path}")

    if rest:
        child = set_field(getattr(model, head), rest, value)
        return model.model_copy(update={head: child})

    data = model.model_dump()
    data[head] = value
    return type(model).model_validate(data)


def toggle(model: BaseModel, path: str) -> BaseModel:
    """Flip a boolean field."""
    return set_field(model, path, not get_field(model, path))


def live_score(profile: ApplicantProfile) -> Tuple[int, str]:
    """(score, tier) for instant feedback while the form is being filled."""
    return score_profile(profile)
