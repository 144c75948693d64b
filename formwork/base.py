from collections.abc import Mapping

from django.conf import settings

DEFAULT_FLASH_SESSION_KEY = 'formwork_flash'
DEFAULT_METHOD_OVERRIDE_FIELD = '_method'
DEFAULT_TEXTFIELD_SIZE = 35

CSRF_FIELD = 'csrfmiddlewaretoken'


def flash_session_key():
    return getattr(settings, 'FORMWORK_FLASH_SESSION_KEY', DEFAULT_FLASH_SESSION_KEY)


def method_override_field():
    return getattr(settings, 'FORMWORK_METHOD_OVERRIDE_FIELD', DEFAULT_METHOD_OVERRIDE_FIELD)


def textfield_size():
    return getattr(settings, 'FORMWORK_TEXTFIELD_SIZE', DEFAULT_TEXTFIELD_SIZE)


# Turns out len(x) is a good idea, and x.values() is a bad idea. Let's do it the way it should be done.
def values(container):
    return type(container).values(container)


def items(container):
    return type(container).items(container)


def keys(container):
    return type(container).keys(container)


def normalize_key(key):
    """
    Field names are plain `str`. Keys coming from a submitted payload may be
    bytes (WSGI environ parsing) or other non-str values from hand written
    defaults, e.g. integers.
    """
    if isinstance(key, bytes):
        return key.decode('utf8')
    return str(key)


def normalize_keys(data):
    if data is None:
        return None
    assert isinstance(data, Mapping), f'Form data must be a mapping, got {type(data).__name__}'
    return {normalize_key(k): v for k, v in items(data)}


def marshal(params):
    """
    Turn a submitted payload into form data. A `QueryDict` (or anything else
    with `lists()`) gives one list per key: single values are unwrapped, real
    multi-values stay lists.
    """
    if hasattr(params, 'lists'):
        result = {}
        for key, value_list in params.lists():
            result[normalize_key(key)] = value_list[0] if len(value_list) == 1 else list(value_list)
        return result
    return normalize_keys(params)


def route_parameters(request):
    url_params = getattr(request, 'url_params', None)
    if url_params is not None:
        return url_params
    resolver_match = getattr(request, 'resolver_match', None)
    if resolver_match is not None:
        return resolver_match.kwargs
    return {}


def request_uri(request):
    return getattr(request, 'path', '')
