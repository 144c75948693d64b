import pytest

from tests.helpers import (
    extract_form_data,
    reindent,
    remove_csrf,
)


@pytest.mark.parametrize(
    'content, pressed, expected',
    [
        ('<input name="foo" value="bar">', None, dict(foo='bar')),
        ('<input name="foo">', None, dict(foo='')),
        ('<input name="foo" type="submit" value="Save">', None, dict()),
        ('<input name="foo" type="submit" value="Save">', 'foo', dict(foo='Save')),
    ]
)
def test_extract_form_data(content, pressed, expected):
    assert extract_form_data(content, pressed=pressed) == expected


def test_remove_csrf():
    assert remove_csrf('<form><input name="csrfmiddlewaretoken" type="hidden" value="abc"><p></p></form>') == '<form><p></p></form>'


def test_reindent():

    before = """\
_foo
__bar
_boink__
"""

    after = """\
--foo
----bar
--boink__"""

    assert reindent(before, before="_", after="--") == after
