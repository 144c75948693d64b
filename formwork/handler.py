import logging

from tri_struct import Struct

from formwork.base import (
    CSRF_FIELD,
    marshal,
    method_override_field,
    normalize_keys,
)
from formwork.data import (
    as_data_source,
    as_defaults,
    static_or_computed,
)
from formwork.field import Field
from formwork.flash import SessionFlash
from formwork.submit import (
    as_submit_processor,
    CancelControl,
    process_form_submit,
)

log = logging.getLogger(__name__)


class FormHandler:
    """
    Processes a complete form request. Depending on the implementation the
    result is a response, or a `Struct` to be used as an intermediate result.
    """

    def process_request(self, request):
        raise NotImplementedError()  # pragma: no cover


def check_fields(fields):
    for field in fields:
        if not isinstance(field, Field):
            raise TypeError(f'Form fields must be Field instances, got {field!r}')
    return fields


class EmbeddedFormHandler(FormHandler):
    """
    Renders a form. The form data comes from, in order of precedence:

    1. the flash, if the previous submission of this form failed
    2. the data source
    3. the defaults

    The result is a `Struct` with `body`, optionally `title`, and `errors`
    when the flash had errors for this form.
    """

    def __init__(self, form, fields, controls, data_source, defaults, labels=None, flash=None):
        self.form = form
        if not callable(fields):
            fields = check_fields(list(fields))
        self.fields = static_or_computed(fields)
        self.controls = list(controls)
        self.data_source = as_data_source(data_source)
        self.defaults = as_defaults(defaults)
        self.labels = normalize_keys(labels)
        self.flash = flash if flash is not None else SessionFlash()

    def form_data(self, request, flashed):
        if flashed.get('errors') and flashed.get('data') is not None:
            log.debug('Form %s: data from flash', self.form.unique_id())
            return flashed['data']

        data = self.data_source.load_form_data(request)
        if data is not None:
            log.debug('Form %s: data from data source', self.form.unique_id())
            return data

        log.debug('Form %s: data from defaults', self.form.unique_id())
        return self.defaults.default_form_data(request)

    def process_request(self, request):
        form_id = self.form.unique_id()
        flashed = self.flash.read(request, form_id) or {}
        errors = flashed.get('errors')
        data = normalize_keys(self.form_data(request, flashed)) or {}

        env = Struct(errors=errors) if errors else Struct()
        if self.labels:
            env.labels = self.labels

        response_map = Struct(
            fields=check_fields(list(self.fields.resolve(request))),
            response=Struct(),
        )
        for control in self.controls:
            response_map = control.add_control(request, response_map)

        result = Struct(response_map.response, **self.form.render(request, response_map.fields, data, env))
        if errors:
            result.errors = errors
        return result


def submitted_payload(request):
    data = marshal(request.GET)
    data.update(marshal(request.POST))
    data.pop(CSRF_FIELD, None)
    data.pop(method_override_field(), None)
    return data


class SubmitHandler(FormHandler):
    """
    Processes a form submission: the controls run first, in order, then the
    validator. The first one to produce an outcome ends the processing. If
    none does, the outcome is `response.success(data)`.
    """

    def __init__(self, response, controls, validator):
        self.response = response
        self.controls = list(controls)
        self.validator = validator

    def process_request(self, request):
        status = process_form_submit(
            self.response,
            self.controls + [self.validator],
            Struct(
                request=request,
                data=submitted_payload(request),
                result=None,
            ),
        )
        if status.get('result') is not None:
            return status.result
        return self.response.success(status.data)


def cancel_control():
    return CancelControl()


def embedded_form(form, fields, *, data_source=None, defaults=None, controls=None, labels=None, flash=None):
    """
    Create a handler that renders `form`.

    `fields` is a list of fields, or a function of the request returning
    one. `data_source` and `defaults` can be a mapping or a function of the
    request. `labels` maps field names to display labels. `controls`
    defaults to a single cancel control.
    """
    return EmbeddedFormHandler(
        form=form,
        fields=fields,
        controls=controls if controls is not None else [cancel_control()],
        data_source=data_source,
        defaults=defaults if defaults is not None else {},
        labels=labels,
        flash=flash,
    )


def submit_handler(response, *, controls=None, validator=None):
    """
    Create a handler that processes submissions of a form. `validator` is a
    validation function (see `formwork.validation`) or a `SubmitProcessor`.
    """
    return SubmitHandler(
        response=response,
        controls=controls if controls is not None else [cancel_control()],
        validator=as_submit_processor(validator),
    )
