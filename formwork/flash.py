from formwork.base import flash_session_key


class SessionFlash:
    """
    Flash store kept in `request.session`: a failed submission writes the
    errors and the rejected data under the form's unique id, and the next
    render of the same form reads (and removes) them.
    """

    def read(self, request, form_id):
        session = getattr(request, 'session', None)
        if session is None:
            return None
        flashed = session.get(flash_session_key())
        if not flashed or form_id not in flashed:
            return None
        flashed = dict(flashed)
        entry = flashed.pop(form_id)
        session[flash_session_key()] = flashed
        return entry

    def write(self, request, form_id, *, errors=None, data=None):
        session = getattr(request, 'session', None)
        assert session is not None, 'Writing to the flash needs request.session, is SessionMiddleware enabled?'
        flashed = dict(session.get(flash_session_key()) or {})
        flashed[form_id] = {'errors': errors, 'data': data}
        session[flash_session_key()] = flashed
