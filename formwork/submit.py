import logging
from collections.abc import Mapping

from tri_struct import Struct

from formwork._web_compat import HttpResponseRedirect
from formwork.base import (
    items,
    normalize_key,
)
from formwork.field import (
    CANCEL_BUTTON,
    Hidden,
    is_button,
)
from formwork.flash import SessionFlash
from formwork.validation import (
    validation_errors,
    without_validation_errors,
)

log = logging.getLogger(__name__)

CANCEL_MARKER = '_cancel'


class SubmitResponse:
    """
    The three outcomes of a submission. Each method returns a response, or a
    function of the request that returns one.
    """

    def canceled(self, data):
        raise NotImplementedError()  # pragma: no cover

    def failure(self, data, errors):
        raise NotImplementedError()  # pragma: no cover

    def success(self, data):
        raise NotImplementedError()  # pragma: no cover


class SubmitProcessor:
    """
    One stage of submission processing. `process_submit` gets the response
    and the status, a `Struct` with the keys `request`, `data` and `result`,
    and returns a new status. Filter control values out of `data`, and to
    end the processing set `result` to the outcome.
    """

    def process_submit(self, response, status):
        raise NotImplementedError()  # pragma: no cover


class Control:
    """
    Adds hidden control fields when a form is rendered. `add_control` takes
    and returns a response map, a `Struct` with the keys `fields` and
    `response`. The `response` is merged into the result of the render. To
    read the control fields back when the form is submitted, also implement
    `SubmitProcessor`.
    """

    def add_control(self, request, response_map):
        raise NotImplementedError()  # pragma: no cover


def process_form_submit(response, processors, status):
    """
    Run the processors in order until one of them sets `result`, or until
    there are no processors left. The processors after the one that set
    `result` are not called. A status without `result` has no outcome yet.
    """
    status = Struct(dict(result=None), **status)
    for processor in processors:
        if status.result is not None:
            break
        new_status = processor.process_submit(response, status)
        if not isinstance(new_status, Mapping):
            raise TypeError(f'{processor!r}.process_submit must return the status, got {new_status!r}')
        status = Struct(dict(result=None), **new_status)
        if status.result is not None:
            log.debug('Submission processing ended by %r', processor)
    return status


def is_pressed(value):
    return value is not None and value is not False


class CancelControl(Control, SubmitProcessor):
    """
    Makes cancel buttons work. When rendering, a hidden `_cancel` field with
    the name of the cancel button is added for each cancel button. When the
    form is submitted and the button with that name was pressed, the
    submission ends as canceled, without validation.
    """

    def __repr__(self):
        return f'{type(self).__name__}()'

    def add_control(self, request, response_map):
        cancel_buttons = [
            descriptor
            for descriptor in (field.describe() for field in response_map.fields if is_button(field))
            if descriptor.type == CANCEL_BUTTON
        ]
        return Struct(
            response_map,
            fields=list(response_map.fields) + [Hidden(CANCEL_MARKER, descriptor.name) for descriptor in cancel_buttons],
        )

    def process_submit(self, response, status):
        data = status.data
        cancel_names = data.get(CANCEL_MARKER)
        if cancel_names is None:
            cancel_names = []
        elif not isinstance(cancel_names, list):
            cancel_names = [cancel_names]
        cancel_names = {normalize_key(name) for name in cancel_names}

        canceled = any(is_pressed(data.get(name)) for name in cancel_names)
        data = {k: v for k, v in items(data) if k != CANCEL_MARKER and k not in cancel_names}

        if canceled:
            return Struct(status, data=data, result=response.canceled(data))
        return Struct(status, data=data)


class FunctionValidate(SubmitProcessor):
    """
    Wraps a validation function, see `formwork.validation`. The submission
    fails if the function attaches errors to the data.
    """

    def __init__(self, validate):
        assert callable(validate), f'validate must be callable, got {validate!r}'
        self.validate = validate

    def __repr__(self):
        return f'{type(self).__name__}({self.validate!r})'

    def process_submit(self, response, status):
        data = status.data
        errors = validation_errors(self.validate(data))
        if errors:
            return Struct(status, result=response.failure(without_validation_errors(data), errors))
        return status


def identity(data):
    return data


def validator_function(validate):
    return FunctionValidate(validate)


def as_submit_processor(validator):
    """
    `None` validates nothing, a `SubmitProcessor` is used as is and a plain
    function is wrapped in `FunctionValidate`. Anything else is a
    configuration error.
    """
    if validator is None:
        return validator_function(identity)
    if isinstance(validator, SubmitProcessor):
        return validator
    if callable(validator):
        return validator_function(validator)
    raise TypeError(f'validator must be a function of the form data or a SubmitProcessor, got {validator!r}')


class RedirectResponse(SubmitResponse):
    """
    Post/redirect/get responses:

    * canceled: redirect to `cancel_url`
    * success: redirect to `success(data)`, a url (or a ready response)
    * failure: put the errors and the rejected data in the flash under the
      form's unique id and redirect back to the referring page, where the
      form is rendered again with them
    """

    def __init__(self, form, cancel_url, success, flash=None):
        self.form_id = form if isinstance(form, str) else form.unique_id()
        self.cancel_url = cancel_url
        self.success_url = success
        self.flash = flash if flash is not None else SessionFlash()

    def canceled(self, data):
        return HttpResponseRedirect(self.cancel_url)

    def failure(self, data, errors):
        def redirect_back(request):
            self.flash.write(request, self.form_id, errors=errors, data=data)
            return HttpResponseRedirect(request.META.get('HTTP_REFERER') or request.path)

        return redirect_back

    def success(self, data):
        target = self.success_url(data) if callable(self.success_url) else self.success_url
        if isinstance(target, str):
            return HttpResponseRedirect(target)
        return target
