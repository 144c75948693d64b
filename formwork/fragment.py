from formwork._web_compat import format_html
from formwork.attrs import render_attrs

# https://html.spec.whatwg.org/multipage/syntax.html#void-elements
_void_elements = [
    'area',
    'base',
    'br',
    'col',
    'embed',
    'hr',
    'img',
    'input',
    'link',
    'meta',
    'param',
    'source',
    'track',
    'wbr',
]


def flatten_children(children):
    for child in children:
        if child is None:
            continue
        if isinstance(child, (list, tuple)):
            yield from flatten_children(child)
        else:
            yield child


class Fragment:
    """
    A node in a markup tree: a tag, its attributes and its children. Children
    can be other fragments, safe strings (rendered as is) or plain values
    (escaped). `None` children are dropped and nested lists are flattened,
    so a list of rendered fields can be passed straight in.

    .. code-block:: python

        Fragment('div', {'class': 'buttons'}, [html.input(attrs=dict(type='submit'))])

    A fragment without a tag renders only its children.
    """

    def __init__(self, tag=None, attrs=None, children=None):
        self.tag = tag
        self.attrs = attrs or {}
        self.children = list(flatten_children(children or []))

    def __repr__(self):
        return f'<{self.__class__.__name__} tag:{self.tag} attrs:{dict(self.attrs)!r}>'

    def __html__(self):
        return render_fragment(self)

    def __str__(self):
        return self.__html__()


def render_fragment(fragment):
    rendered_children = format_html('{}' * len(fragment.children), *fragment.children)

    if not fragment.tag:
        return rendered_children

    is_void_element = fragment.tag in _void_elements
    if rendered_children:
        assert not is_void_element, f'{fragment.tag} is a void element, but it has children: {rendered_children}'
        return format_html(
            '<{tag}{attrs}>{children}</{tag}>',
            tag=fragment.tag,
            attrs=render_attrs(fragment.attrs),
            children=rendered_children,
        )
    return format_html(
        '<{tag}{attrs}>' if is_void_element else '<{tag}{attrs}></{tag}>',
        tag=fragment.tag,
        attrs=render_attrs(fragment.attrs),
    )


class Html:
    """
    Builder for fragments: `html.div('Hello', attrs={'class': 'greeting'})`.
    """

    def __getattr__(self, tag):
        def fragment_constructor(*children, attrs=None):
            return Fragment(tag=tag, attrs=attrs, children=children)

        return fragment_constructor


html = Html()
