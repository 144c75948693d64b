from tri_struct import Struct

from formwork._web_compat import mark_safe
from formwork.data import static_or_computed
from formwork.field import is_button
from formwork.fragment import html


class Layout:
    """
    Lays out form fields and renders them. `render` returns a `Struct` with
    the key `body` holding the markup. Layouts may add other keys, like
    `title`.
    """

    def render(self, request, fields, data, env):
        raise NotImplementedError()  # pragma: no cover


class GridLayout(Layout):
    """
    All fields stacked in one table cell, with the buttons in a row below.
    """

    def __init__(self, title=''):
        self.title = static_or_computed(title)

    def render(self, request, fields, data, env):
        buttons = [field for field in fields if is_button(field)]
        fields = [field for field in fields if not is_button(field)]

        body = html.table(
            html.tr(
                html.td(
                    html.div([mark_safe(field.render(data, env)) for field in fields]),
                    html.div(
                        html.span([mark_safe(b.render(data, env)) for b in buttons], attrs={'class': 'basic-buttons'}),
                        attrs={'class': 'buttons'},
                    ),
                )
            )
        )

        result = Struct(body=body.__html__())
        title = self.title.resolve(request)
        if title:
            result.title = title
        return result


def grid_layout(title=None):
    return GridLayout(title=title or '')
