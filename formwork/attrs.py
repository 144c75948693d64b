from formwork._web_compat import (
    conditional_escape,
    mark_safe,
)
from formwork.base import items


def render_attrs(attrs):
    """
    Render HTML attributes, or return '' if no attributes needs to be rendered.
    """
    if not attrs:
        return ''

    def parts():
        for key, value in sorted(items(attrs)):
            if value is None or value is False:
                continue
            if value is True:
                yield f'{key}'
                continue
            if isinstance(value, dict):
                if key == 'class':
                    value = render_class(value)
                elif key == 'style':
                    value = render_style(value)
                else:
                    raise TypeError(f'Only the class and style attributes can be dicts, you sent {value} for key {key}')
                if not value:
                    continue
            elif isinstance(value, (list, tuple)):
                raise TypeError(f"Attributes can't be of type {type(value).__name__}, you sent {value} for key {key}")
            elif callable(value):
                raise TypeError(f"Attributes can't be callable, you sent {value} for key {key}")
            yield f'{key}="{conditional_escape(value)}"'

    r = mark_safe(' %s' % ' '.join(parts()))
    return '' if r == ' ' else r


def render_class(class_dict):
    return ' '.join(sorted(name for name, flag in items(class_dict) if flag))


def render_style(style_dict):
    return '; '.join(sorted(f'{k}: {v}' for k, v in items(style_dict) if v))
