import pytest

from formwork.attrs import (
    render_attrs,
    render_class,
    render_style,
)


def test_render_attrs():
    assert render_attrs(None) == ''
    assert render_attrs({}) == ''
    assert render_attrs({'foo': 'bar', 'baz': 'quux'}) == ' baz="quux" foo="bar"'


def test_render_attrs_skips_none_and_false():
    assert render_attrs({'foo': None, 'bar': False}) == ''
    assert render_attrs({'disabled': True, 'foo': None}) == ' disabled'


def test_render_attrs_escapes_values():
    assert render_attrs({'value': '"Ann" & <Bob>'}) == ' value="&quot;Ann&quot; &amp; &lt;Bob&gt;"'


def test_render_attrs_non_standard_types():
    assert render_attrs({'size': 35}) == ' size="35"'


def test_render_class():
    assert render_class({'foo': True, 'bar': False, 'baz': True}) == 'baz foo'
    assert render_attrs({'class': {'foo': True, 'bar': True}}) == ' class="bar foo"'
    assert render_attrs({'class': {'foo': False}}) == ''


def test_render_style():
    assert render_style({'display': 'none', 'color': 'red'}) == 'color: red; display: none'
    assert render_attrs({'style': {'display': 'none'}}) == ' style="display: none"'


def test_render_attrs_raises_for_some_common_pitfall_types():
    with pytest.raises(TypeError) as e:
        render_attrs({'foo': {'a': 1}})
    assert str(e.value) == "Only the class and style attributes can be dicts, you sent {'a': 1} for key foo"

    with pytest.raises(TypeError) as e:
        render_attrs({'foo': ['a']})
    assert str(e.value) == "Attributes can't be of type list, you sent ['a'] for key foo"

    with pytest.raises(TypeError):
        render_attrs({'foo': lambda: 1})
