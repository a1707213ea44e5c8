"""Validation utilities for Imajinasi UI inputs."""

import logging

from imajinasi.core.models import ImageParameters

from .models import SUBJECT_REQUIRED_MESSAGE

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """User-friendly validation error.

    This exception is raised when user input fails validation.
    The message is intended to be displayed directly to the user.
    """

    pass


def validate_parameters(params: ImageParameters) -> None:
    """Validate the form before a request is dispatched.

    Args:
        params: Image parameters to validate

    Raises:
        ValidationError: If the required subject is empty
    """
    if not params.has_subject():
        raise ValidationError(SUBJECT_REQUIRED_MESSAGE)


def validate_field_name(name: str) -> str:
    """Ensure a field name maps to an ImageParameters text field.

    Args:
        name: Field name coming from a UI binding

    Returns:
        The field name unchanged

    Raises:
        ValidationError: If the field does not exist
    """
    if name not in ImageParameters.text_fields():
        logger.warning(f"Rejected unknown field binding: {name!r}")
        raise ValidationError(f"Unknown field: {name}")
    return name
