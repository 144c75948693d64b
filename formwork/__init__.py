__version__ = '1.0.0'

from formwork.data import (
    Computed,
    DataSource,
    Defaults,
    Static,
)
from formwork.field import (
    button,
    Button,
    Field,
    field_cell,
    field_label,
    hidden,
    Hidden,
    register_field_cell,
    register_field_label,
    textfield,
    Textfield,
)
from formwork.flash import SessionFlash
from formwork.form import (
    form,
    Form,
    HtmlForm,
)
from formwork.fragment import (
    Fragment,
    html,
)
from formwork.handler import (
    cancel_control,
    embedded_form,
    EmbeddedFormHandler,
    FormHandler,
    submit_handler,
    SubmitHandler,
)
from formwork.layout import (
    grid_layout,
    GridLayout,
    Layout,
)
from formwork.submit import (
    CancelControl,
    Control,
    FunctionValidate,
    process_form_submit,
    RedirectResponse,
    SubmitProcessor,
    SubmitResponse,
    validator_function,
)
from formwork.validation import (
    add_validation_error,
    build_validator,
    FORM_ERRORS,
    non_empty,
    validation_errors,
)
from formwork.views import form_view

__all__ = [
    'add_validation_error',
    'build_validator',
    'button',
    'Button',
    'cancel_control',
    'CancelControl',
    'Computed',
    'Control',
    'DataSource',
    'Defaults',
    'embedded_form',
    'EmbeddedFormHandler',
    'Field',
    'field_cell',
    'field_label',
    'form',
    'Form',
    'FORM_ERRORS',
    'form_view',
    'FormHandler',
    'Fragment',
    'FunctionValidate',
    'grid_layout',
    'GridLayout',
    'hidden',
    'Hidden',
    'html',
    'HtmlForm',
    'Layout',
    'non_empty',
    'process_form_submit',
    'RedirectResponse',
    'register_field_cell',
    'register_field_label',
    'SessionFlash',
    'Static',
    'submit_handler',
    'SubmitHandler',
    'SubmitProcessor',
    'SubmitResponse',
    'textfield',
    'Textfield',
    'validation_errors',
    'validator_function',
]
