import pytest

from formwork.data import (
    as_data_source,
    as_defaults,
    Computed,
    DataSource,
    Defaults,
    NO_DATA,
    Static,
    static_or_computed,
)
from tests.helpers import req


def test_static_or_computed():
    assert static_or_computed('Title').resolve(req('get')) == 'Title'
    assert static_or_computed(None).resolve(req('get')) is None
    assert static_or_computed(lambda request: request.path).resolve(req('get', url='/foo/')) == '/foo/'

    static = Static('x')
    assert static_or_computed(static) is static


def test_as_data_source():
    request = req('get')
    assert as_data_source(None) is NO_DATA
    assert as_data_source(None).load_form_data(request) is None
    assert as_data_source({'name': 'Ann'}).load_form_data(request) == {'name': 'Ann'}
    assert as_data_source({b'name': 'Ann'}).load_form_data(request) == {'name': 'Ann'}
    assert as_data_source(lambda request: {'path': request.path}).load_form_data(request) == {'path': '/'}


def test_as_defaults():
    request = req('get')
    assert as_defaults(None).default_form_data(request) is None
    assert as_defaults({'age': 10}).default_form_data(request) == {'age': 10}
    assert isinstance(as_defaults(lambda request: {}), Computed)


def test_custom_capabilities_are_used_as_is():
    class AlbumSource(DataSource):
        def load_form_data(self, request):
            return {'name': 'Mob Rules'}

    class AlbumDefaults(Defaults):
        def default_form_data(self, request):
            return {'year': 1981}

    source = AlbumSource()
    defaults = AlbumDefaults()
    assert as_data_source(source) is source
    assert as_defaults(defaults) is defaults


def test_invalid_configuration_fails_fast():
    with pytest.raises(TypeError) as e:
        as_data_source(42)
    assert str(e.value) == 'data_source must be None, a mapping, a function of the request or a DataSource, got 42'

    with pytest.raises(TypeError):
        as_defaults('name=Ann')


def test_repr():
    assert repr(Static({'a': 1})) == "Static({'a': 1})"
