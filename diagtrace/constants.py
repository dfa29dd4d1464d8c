ASPNETCORE_LISTENER_NAME = "Microsoft.AspNetCore"
HTTP_HANDLER_LISTENER_NAME = "HttpHandlerDiagnosticListener"

# Logger categories silenced for the span event log handler
HOSTING_LOG_CATEGORY = "Microsoft.AspNetCore.Hosting"
HOST_FRAMEWORK_LOG_CATEGORY = "Microsoft.AspNetCore"
ORM_LOG_CATEGORY = "Microsoft.EntityFrameworkCore"

COMPONENT_KEY = "component"
EVENT_KEY = "event"
