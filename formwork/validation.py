"""
Validation functions take form data and return it, possibly with validation
errors attached under `VALIDATION_ERRORS`:

.. code-block:: python

    def validate_album(data):
        data = non_empty(data, 'name', 'artist')
        if data.get('year') and not str(data['year']).isdigit():
            data = add_validation_error(data, 'year', 'year must be a number')
        return data

Errors are a mapping of field name to a list of messages. Errors that are
about the whole submission are stored under `FORM_ERRORS`.
"""
from formwork.base import (
    items,
    normalize_key,
)

VALIDATION_ERRORS = '_validation_errors'
FORM_ERRORS = 'form'


def validation_errors(result):
    """
    The errors a validation function attached to its result, or `None`. A
    field with an empty list of messages has no error.
    """
    if not result:
        return None
    errors = {k: list(v) for k, v in items(result.get(VALIDATION_ERRORS) or {}) if v}
    return errors or None


def without_validation_errors(data):
    return {k: v for k, v in items(data) if k != VALIDATION_ERRORS}


def add_validation_error(data, field_name, message):
    """
    Return a copy of `data` with `message` appended to the errors of
    `field_name`. Use `FORM_ERRORS` as field name for errors about the whole
    form.
    """
    field_name = normalize_key(field_name)
    errors = {k: list(v) for k, v in items(data.get(VALIDATION_ERRORS) or {})}
    errors.setdefault(field_name, []).append(message)
    return {**data, VALIDATION_ERRORS: errors}


def is_blank(value):
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple)):
        return not value
    return False


def non_empty(data, *field_names, messages=None):
    """
    Add a "<name> cannot be blank!" error for each named field that is
    missing, `None` or only whitespace. `messages` may override the message
    per field with the key `"<name>-blank"`.
    """
    messages = messages or {}
    for field_name in field_names:
        field_name = normalize_key(field_name)
        if is_blank(data.get(field_name)):
            message = messages.get(f'{field_name}-blank', f'{field_name} cannot be blank!')
            data = add_validation_error(data, field_name, message)
    return data


def build_validator(*validators):
    """
    Chain validation functions, left to right. Each one gets the result of
    the previous one, so errors accumulate.
    """

    def validate(data):
        for validator in validators:
            data = validator(data)
        return data

    return validate
