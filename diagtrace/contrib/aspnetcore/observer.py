from ...constants import ASPNETCORE_LISTENER_NAME
from ...settings.options import AspNetCoreDiagnosticOptions
from ..observer import DiagnosticObserver


class AspNetCoreDiagnostics(DiagnosticObserver):
    listener_name = ASPNETCORE_LISTENER_NAME
    options_type = AspNetCoreDiagnosticOptions
