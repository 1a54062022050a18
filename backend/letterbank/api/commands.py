from flask import Blueprint, Response, current_app, request
from letterbank.channel import Command


commands = Blueprint('commands', __name__)

# Every method reaches the view so anything but GET gets a 405 from us
_ANY_METHOD = ['GET', 'HEAD', 'POST', 'PUT', 'PATCH', 'DELETE', 'OPTIONS']


class BadCommandPath(ValueError):
    pass


def parse_replace_path(path: str) -> Command:
    """Parse "/replace/<X>/with/<Y>" into an uppercase Command.

    Empty segments are ignored, keywords are case-insensitive and each
    letter must be a single ASCII letter.
    """
    segments = [s for s in path.split('/') if s]
    if (
        len(segments) != 4
        or segments[0].lower() != 'replace'
        or len(segments[1]) != 1
        or segments[2].lower() != 'with'
        or len(segments[3]) != 1
    ):
        raise BadCommandPath('Bad request (check your URL format)\n')

    replace, replacement = segments[1], segments[3]
    for c in (replace, replacement):
        if not (c.isascii() and c.isalpha()):
            raise BadCommandPath('Bad request (invalid letter)\n')
    return Command(replace.upper(), replacement.upper())


def _text_response(body: str, status: int) -> Response:
    return Response(body, status=status, mimetype='text/plain')


def _method_not_allowed() -> Response:
    current_app.logger.info(f"[method-not-allowed] method={request.method} path={request.path}")
    res = _text_response('Method not allowed\n', 405)
    res.headers['Allow'] = 'GET'
    return res


@commands.app_errorhandler(405)
def handle_method_not_allowed(e):
    # Methods outside _ANY_METHOD (TRACE, WebDAV verbs) fail in routing
    return _method_not_allowed()


@commands.route('/', defaults={'path': ''}, methods=_ANY_METHOD, provide_automatic_options=False)
@commands.route('/<path:path>', methods=_ANY_METHOD, provide_automatic_options=False)
def replace_letter(path):
    if request.method != 'GET':
        return _method_not_allowed()

    # request.path is percent-decoded, so %41 counts as the letter A
    try:
        command = parse_replace_path(request.path)
    except BadCommandPath as exc:
        current_app.logger.info(f"[bad-request] path={request.path}")
        return _text_response(str(exc), 400)

    # Fire and forget: the 200 only means the command was queued
    current_app.extensions['command_sender'].send(command)
    current_app.logger.info(f"[command-queued] replace={command.replace} with={command.replacement}")
    return _text_response('', 200)
