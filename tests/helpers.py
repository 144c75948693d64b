import re

from bs4 import BeautifulSoup
from django.test import RequestFactory

from formwork.submit import SubmitResponse


def reindent(s, before=" ", after="    "):
    def reindent_line(line):
        m = re.match(r'^((' + re.escape(before) + r')*)(.*)', line)
        return after * (len(m.group(1)) // len(before)) + m.group(3)

    return "\n".join(reindent_line(line) for line in s.splitlines())


def remove_csrf(html_code):
    csrf_regex = r'<input[^>]+csrfmiddlewaretoken[^>]+>'
    return re.sub(csrf_regex, '', html_code)


def verify_html(*, actual_html: str, find=None, expected_html: str = None):
    if expected_html is None:
        expected_html = '<html/>'

    expected_soup = BeautifulSoup(expected_html, 'html.parser')
    actual_soup = BeautifulSoup(actual_html, 'html.parser')

    if find is not None:
        actual_soup = actual_soup.find(**find)
        assert actual_soup, f"Couldn't find selector {find} in actual output"
        expected_soup = expected_soup.find(**find)

    prettified_actual = reindent(actual_soup.prettify()).strip()
    prettified_expected = reindent(expected_soup.prettify()).strip()
    if prettified_actual != prettified_expected:  # pragma: no cover
        print("Expected")
        print(prettified_expected)
        print("Actual")
        print(prettified_actual)

    assert prettified_actual == prettified_expected


def req(method, url='/', url_params=None, session=None, **data):
    request = getattr(RequestFactory(HTTP_REFERER='/referer/'), method.lower())(url, data=data)
    request.session = {} if session is None else session
    if url_params is not None:
        request.url_params = url_params
    return request


class RecordingResponse(SubmitResponse):
    """
    A submit response that returns its outcome as a tuple, so tests can compare outcomes.
    """

    def canceled(self, data):
        return 'canceled', data

    def failure(self, data, errors):
        return 'failure', data, errors

    def success(self, data):
        return 'success', data


def extract_form_data(content, pressed=None):
    """
    The data a browser would post for the rendered form in `content`: every
    input except the submit buttons, plus the submit button named `pressed`.
    """
    soup = BeautifulSoup(content, 'html.parser')

    r = {}
    for input in soup.find_all('input'):
        if input.get('type') == 'submit' and input.get('name') != pressed:
            continue
        r[input.get('name')] = input.get('value', '')
    return r
