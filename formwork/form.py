from tri_struct import Struct

from formwork._web_compat import (
    csrf_token,
    mark_safe,
)
from formwork.base import (
    CSRF_FIELD,
    items,
    method_override_field,
    request_uri,
    route_parameters,
)
from formwork.fragment import html
from formwork.layout import grid_layout

NATIVE_METHODS = ('GET', 'POST')


class Form:
    """
    Renders the form tag around a layout.
    """

    def unique_id(self):
        raise NotImplementedError()  # pragma: no cover

    def render(self, request, fields, data, env):
        """
        Return a `Struct` containing `body` and the other keys the layout produced.
        """
        raise NotImplementedError()  # pragma: no cover


class HtmlForm(Form):
    def __init__(self, name, action_method, layout, attrs=None):
        self.name = name
        self.action_method = action_method
        self.layout = layout
        self.attrs = dict(attrs or {})

    def __repr__(self):
        return f'<{type(self).__name__} {self.name}>'

    def unique_id(self):
        return self.name

    def render(self, request, fields, data, env):
        action, method = self.action_method(request)
        method = str(method).upper()
        result = self.layout.render(request, fields, data, env)

        children = []
        if method in NATIVE_METHODS:
            form_method = method
        else:
            form_method = 'POST'
            children.append(html.input(attrs={'type': 'hidden', 'name': method_override_field(), 'value': method}))
        if form_method != 'GET' and request is not None:
            children.append(html.input(attrs={'type': 'hidden', 'name': CSRF_FIELD, 'value': csrf_token(request)}))
        children.append(mark_safe(result.body))

        form_tag = html.form(children, attrs={**self.attrs, 'method': form_method, 'action': action})
        return Struct(result, body=html.div(form_tag, attrs={'class': 'formwork-form'}).__html__())


def replace_params(route_params, s):
    """
    Replace each `:name` placeholder in `s` with the value of the route parameter `name`.

        >>> replace_params({'id': 7}, '/album/:id/edit')
        '/album/7/edit'
    """
    for key, value in items(route_params):
        s = s.replace(f':{key}', str(value), 1)
    return s


def _evaluate_action(action, request):
    return action(request) if callable(action) else action


def action_method_resolver(*, create_method=None, update_method=None, create_action=None, update_action=None):
    """
    Build the function of the request that returns `(action, method)`. When
    the route has an `id` parameter the form updates an existing entity, else
    it creates one. Without configuration the form posts back to the current
    path.
    """

    def action_method(request):
        route_params = route_parameters(request)
        is_update = route_params.get('id') is not None
        update = _evaluate_action(update_action, request)
        create = _evaluate_action(create_action, request)

        if is_update and update:
            action = update
        elif create:
            action = create
        else:
            action = request_uri(request)

        if is_update and update_method:
            method = update_method
        elif create_method:
            method = create_method
        else:
            method = 'post'

        return replace_params(route_params, action), method

    return action_method


def form(name, *, create_method=None, update_method=None, create_action=None, update_action=None, layout=None, **attrs):
    """
    Create a form. All keyword arguments not listed are passed through as
    attributes of the form tag, except `method` and `action` which are
    always resolved from the request:

    .. code-block:: python

        form(
            'album',
            create_action='/album/new',
            update_action='/album/:id',
            update_method='put',
            layout=grid_layout(title='Album'),
            **{'class': 'album-form'},
        )
    """
    assert name, 'A form needs a name, it is used to identify it between requests'
    return HtmlForm(
        name=name,
        action_method=action_method_resolver(
            create_method=create_method,
            update_method=update_method,
            create_action=create_action,
            update_action=update_action,
        ),
        layout=layout if layout is not None else grid_layout(),
        attrs=attrs,
    )
