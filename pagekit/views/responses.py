"""Fixed responses for results that do not render a template."""

from http import HTTPStatus

from starlette.responses import PlainTextResponse, RedirectResponse, Response

from pagekit.result import Disposition, Result

BAD_REQUEST_BODY = "Bad request"
UNAUTHORIZED_BODY = HTTPStatus.UNAUTHORIZED.phrase
NOT_FOUND_BODY = "Not Found"
INTERNAL_ERROR_BODY = "Internal server error."


def internal_error_response() -> Response:
    return PlainTextResponse(INTERNAL_ERROR_BODY, status_code=HTTPStatus.INTERNAL_SERVER_ERROR)


def error_response(result: Result) -> Response:
    """Build the response for a non-OK result.

    Only the disposition (and, for redirects, the target) is looked at;
    data and error details never reach the client. Anything unrecognized,
    including a redirect without a target, is answered as an internal error.
    """
    disposition = result.disposition
    if disposition == Disposition.NOT_FOUND:
        return PlainTextResponse(NOT_FOUND_BODY, status_code=HTTPStatus.NOT_FOUND)
    if disposition == Disposition.BAD_REQUEST:
        return PlainTextResponse(BAD_REQUEST_BODY, status_code=HTTPStatus.BAD_REQUEST)
    if disposition == Disposition.UNAUTHORIZED:
        return PlainTextResponse(UNAUTHORIZED_BODY, status_code=HTTPStatus.UNAUTHORIZED)
    if disposition == Disposition.REDIRECT and result.next:
        return RedirectResponse(result.next, status_code=HTTPStatus.SEE_OTHER)
    return internal_error_response()
