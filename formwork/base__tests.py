from django.http import QueryDict
from django.test import override_settings

from formwork.base import (
    marshal,
    method_override_field,
    normalize_key,
    normalize_keys,
    route_parameters,
    textfield_size,
)
from tests.helpers import req


def test_normalize_key():
    assert normalize_key('age') == 'age'
    assert normalize_key(b'age') == 'age'
    assert normalize_key(7) == '7'


def test_normalize_keys():
    assert normalize_keys(None) is None
    assert normalize_keys({b'age': '10', 'name': 'Ann'}) == {'age': '10', 'name': 'Ann'}


def test_marshal_query_dict():
    params = QueryDict('age=10&roles=admin&roles=user&empty=')
    assert marshal(params) == {
        'age': '10',
        'roles': ['admin', 'user'],
        'empty': '',
    }


def test_marshal_plain_mapping():
    assert marshal({'age': '10'}) == {'age': '10'}


def test_route_parameters():
    assert route_parameters(req('get')) == {}
    assert route_parameters(req('get', url_params={'id': '7'})) == {'id': '7'}


def test_settings():
    assert method_override_field() == '_method'
    assert textfield_size() == 35
    with override_settings(FORMWORK_METHOD_OVERRIDE_FIELD='_verb', FORMWORK_TEXTFIELD_SIZE=20):
        assert method_override_field() == '_verb'
        assert textfield_size() == 20
