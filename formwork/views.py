from formwork._web_compat import (
    HttpResponse,
    HttpResponseBase,
    render,
)

RENDER_METHODS = ('GET', 'HEAD')


def render_result(request, result, template):
    if template is None:
        return HttpResponse(result.body)
    return render(request, template, context=dict(result))


def form_view(embedded, submit, *, template=None):
    """
    Build a Django view from a pair of form handlers. GET and HEAD requests
    render the form with `embedded`, every other method is a submission and
    goes to `submit`.

    .. code-block:: python

        urlpatterns = [
            path('album/new', form_view(album_form, album_submit)),
            path('album/<int:id>/edit', form_view(album_form, album_submit)),
        ]

    Without `template` the response content is the rendered form. A
    template gets the keys of the render result (`body`, `title`,
    `errors`) as context.

    A GET request always renders, also when its query string carries field
    values. A form whose method resolves to GET is therefore not submitted
    through this view: route its action to a view that calls
    `submit.process_request` directly.
    """

    def view(request, **url_params):
        request.url_params = url_params

        if request.method in RENDER_METHODS:
            return render_result(request, embedded.process_request(request), template)

        result = submit.process_request(request)
        if not isinstance(result, HttpResponseBase) and callable(result):
            result = result(request)
        if not isinstance(result, HttpResponseBase):
            raise TypeError(f'The submit response must produce an HttpResponse, got {result!r}')
        return result

    view.__name__ = 'form_view'
    view.formwork_handlers = (embedded, submit)
    return view
