"""
Where form data comes from when a form is rendered.

Two capabilities are pluggable: `DataSource` loads the data of an existing
entity ("edit" flows), `Defaults` computes the data of a fresh form. Both are
given either as a static mapping or as a function of the request. This is
resolved once, when the form handler is built, into `Static` or `Computed`.
"""
from collections.abc import Mapping

from formwork.base import normalize_keys


class DataSource:
    def load_form_data(self, request):
        raise NotImplementedError()  # pragma: no cover


class Defaults:
    def default_form_data(self, request):
        raise NotImplementedError()  # pragma: no cover


class Static(DataSource, Defaults):
    def __init__(self, value):
        self.value = value

    def __repr__(self):
        return f'Static({self.value!r})'

    def resolve(self, request):
        return self.value

    def load_form_data(self, request):
        return self.resolve(request)

    def default_form_data(self, request):
        return self.resolve(request)


class Computed(DataSource, Defaults):
    def __init__(self, function):
        self.function = function

    def __repr__(self):
        return f'Computed({self.function!r})'

    def resolve(self, request):
        return self.function(request)

    def load_form_data(self, request):
        return self.resolve(request)

    def default_form_data(self, request):
        return self.resolve(request)


NO_DATA = Static(None)


def static_or_computed(value):
    """
    `None` stays `Static(None)`, a callable becomes `Computed`, anything else
    is a static value. Already resolved values are returned as is.
    """
    if isinstance(value, (Static, Computed)):
        return value
    if callable(value):
        return Computed(value)
    return Static(value)


def _as_data_provider(value, capability, what):
    if value is None:
        return NO_DATA
    if isinstance(value, capability):
        return value
    if callable(value):
        return Computed(value)
    if isinstance(value, Mapping):
        return Static(normalize_keys(value))
    raise TypeError(f'{what} must be None, a mapping, a function of the request or a {capability.__name__}, got {value!r}')


def as_data_source(value):
    return _as_data_provider(value, DataSource, 'data_source')


def as_defaults(value):
    return _as_data_provider(value, Defaults, 'defaults')
