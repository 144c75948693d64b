from django.http import (
    HttpResponse,  # noqa: F401
    HttpResponseRedirect,  # noqa: F401
)
from django.http.response import HttpResponseBase  # noqa: F401
from django.middleware.csrf import get_token
from django.shortcuts import render  # noqa: F401
from django.utils.html import (
    conditional_escape,  # noqa: F401
    format_html as django_format_html,
)
from django.utils.safestring import mark_safe


def format_html(s, *args, **kwargs):
    if not args and not kwargs:
        return mark_safe(s)
    return django_format_html(s, *args, **kwargs)


def csrf_token(request):
    return None if request is None else get_token(request)
