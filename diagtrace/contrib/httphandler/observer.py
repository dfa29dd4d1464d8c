from ...constants import HTTP_HANDLER_LISTENER_NAME
from ...settings.options import HttpHandlerDiagnosticOptions
from ..observer import DiagnosticObserver


class HttpHandlerDiagnostics(DiagnosticObserver):
    listener_name = HTTP_HANDLER_LISTENER_NAME
    options_type = HttpHandlerDiagnosticOptions
