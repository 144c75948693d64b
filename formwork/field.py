from tri_declarative import (
    dispatch,
    EMPTY,
    Namespace,
)
from tri_struct import Struct

from formwork._web_compat import mark_safe
from formwork.base import (
    normalize_key,
    textfield_size,
)
from formwork.fragment import html

TEXTFIELD = 'textfield'
HIDDEN = 'hidden'
SUBMIT_BUTTON = 'submit_button'
CANCEL_BUTTON = 'cancel_button'

BUTTON_TYPES = frozenset({SUBMIT_BUTTON, CANCEL_BUTTON})

CANCEL = 'cancel'


class Field:
    """
    Base class of all field variants. A field knows its name and can

    * describe itself: `describe(data)` returns a `Struct` with the keys
      `type`, `name` and `value`, where the value is taken from the form data
    * render itself: `render(data, env)` returns safe markup for the field

    `env` is the render environment, a mapping with the optional keys
    `errors` (field name to a list of messages) and `labels` (field name to
    display string). Fields only read from it.

    Fields are built once when a form is declared and shared between
    requests, so they must not keep any per-request state.
    """

    type = None

    def __init__(self, name):
        self.name = normalize_key(name)

    def __repr__(self):
        return f'<{type(self).__module__}.{type(self).__name__} {self.name}>'

    def describe(self, data=None):
        raise NotImplementedError()  # pragma: no cover

    def render(self, data, env):
        raise NotImplementedError()  # pragma: no cover


def is_button(field):
    return field.describe().type in BUTTON_TYPES


_field_label_by_type = {}
_field_cell_by_type = {}


def register_field_label(field_type, renderer):
    _field_label_by_type[field_type] = renderer


def register_field_cell(field_type, renderer):
    _field_cell_by_type[field_type] = renderer


def default_field_label(descriptor):
    required_marker = html.span('*', attrs={'class': 'required'}) if descriptor.get('required') else None
    return html.div(descriptor.get('label'), required_marker, attrs={'class': 'field-label'})


def default_field_cell(descriptor):
    # Only the first message is shown, even though a field can carry several.
    errors = descriptor.get('errors')
    error_message = errors[0] if errors else None
    error_attrs = {'class': 'field-error-message'}
    if error_message is None:
        error_attrs['style'] = {'display': 'none'}

    return html.div(
        field_label(descriptor),
        html.div(error_message, attrs=error_attrs),
        descriptor.html,
        attrs={'class': 'field-cell'},
    )


def field_label(descriptor):
    """
    Label fragment for a field descriptor, dispatched on the descriptor's type.
    """
    return _field_label_by_type.get(descriptor.type, default_field_label)(descriptor)


def field_cell(descriptor):
    """
    Wrap the already rendered field (`descriptor.html`) with its label and
    an error message slot. Dispatched on the descriptor's type; use
    `register_field_cell` to customize a type.
    """
    return _field_cell_by_type.get(descriptor.type, default_field_cell)(descriptor)


def lookup(env, slot, name):
    return ((env or {}).get(slot) or {}).get(name)


class Textfield(Field):
    type = TEXTFIELD

    def __init__(self, name, *, label=None, required=False, attrs=None):
        super(Textfield, self).__init__(name)
        self.label = label
        self.required = required
        self.attrs = Namespace(attrs or {})

    def describe(self, data=None):
        value = (data or {}).get(self.name)
        return Struct(
            type=self.type,
            name=self.name,
            value='' if value is None or value is False else value,
        )

    def render(self, data, env):
        descriptor = self.describe(data)
        descriptor.label = self.label if self.label is not None else lookup(env, 'labels', self.name)
        descriptor.errors = lookup(env, 'errors', self.name)
        descriptor.required = self.required
        descriptor.id = self.attrs.get('id')
        descriptor.html = html.input(attrs=self.input_attrs(descriptor.value))
        return mark_safe(field_cell(descriptor).__html__())

    def input_attrs(self, value):
        attrs = {
            'type': 'text',
            'name': self.name,
            'value': value,
            **self.attrs,
        }
        classes = self.attrs.get('class')
        if classes is None:
            attrs['class'] = 'textfield'
        elif isinstance(classes, dict):
            attrs['class'] = {'textfield': True, **classes}
        return attrs


class Hidden(Field):
    type = HIDDEN

    def __init__(self, name, value=None):
        super(Hidden, self).__init__(name)
        self.value = value

    def describe(self, data=None):
        value = (data or {}).get(self.name)
        if value is None:
            value = self.value
        return Struct(
            type=self.type,
            name=self.name,
            value='' if value is None or value is False else value,
        )

    def render(self, data, env):
        return html.input(
            attrs={
                'type': 'hidden',
                'name': self.name,
                'value': self.describe(data).value,
            }
        ).__html__()


class Button(Field):
    """
    A submit input. The button named `cancel` is a cancel button, every
    other name makes a submit button. The value is the fixed label, it is
    never read from the form data.
    """

    def __init__(self, name, label):
        super(Button, self).__init__(name)
        self.label = label

    @property
    def type(self):
        return CANCEL_BUTTON if self.name == CANCEL else SUBMIT_BUTTON

    def describe(self, data=None):
        return Struct(
            type=self.type,
            name=self.name,
            value=self.label,
        )

    def render(self, data, env):
        return html.input(
            attrs={
                'class': 'formwork-button',
                'type': 'submit',
                'name': self.name,
                'value': self.label,
            }
        ).__html__()


@dispatch(
    attrs=EMPTY,
)
def textfield(name, *, label=None, required=False, attrs, **options):
    """
    Create a text field. `label` and `required` are recognized, every other
    keyword argument ends up as an HTML attribute on the input:

    .. code-block:: python

        textfield('age')
        textfield('age', label='Age', required=True)
        textfield('age', label='Age', size=50)
        textfield('age', id='age', attrs__class__wide=True)

    The `size` attribute defaults to `settings.FORMWORK_TEXTFIELD_SIZE` (35).
    """
    return Textfield(
        name,
        label=label,
        required=required,
        attrs=Namespace(dict(size=textfield_size()), options, attrs),
    )


def hidden(name, value=None):
    return Hidden(name, value)


BUTTON_LABELS = {
    'save': 'Save',
    'cancel': 'Cancel',
}


def button(kind, label=None):
    if label is None:
        label = BUTTON_LABELS.get(normalize_key(kind), 'Submit')
    return Button(kind, label)
