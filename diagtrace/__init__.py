from ._logger import configure_diagtrace_logger


# configure diagtrace logger before other modules log
configure_diagtrace_logger()  # noqa: E402

from ._builder import TracingBuilder  # noqa: E402
from ._builder import add_aspnetcore  # noqa: E402
from ._builder import add_default_instrumentation  # noqa: E402
from ._builder import add_generic_diagnostics  # noqa: E402
from ._builder import add_http_handler  # noqa: E402
from ._builder import add_logger_provider  # noqa: E402
from ._builder import configure_aspnetcore  # noqa: E402
from ._builder import configure_generic_diagnostics  # noqa: E402
from ._builder import configure_http_handler  # noqa: E402
from ._builder import remove_generic_diagnostics  # noqa: E402
from ._manager import DiagnosticManager  # noqa: E402
from .internal._exceptions import DiagtraceError  # noqa: E402
from .internal._exceptions import InvalidArgumentError  # noqa: E402
from .internal._exceptions import OptionsFrozenError  # noqa: E402
from .settings import OptionStore  # noqa: E402
from .settings import config  # noqa: E402
from .version import __version__  # noqa: E402


__all__ = [
    "DiagnosticManager",
    "DiagtraceError",
    "InvalidArgumentError",
    "OptionStore",
    "OptionsFrozenError",
    "TracingBuilder",
    "__version__",
    "add_aspnetcore",
    "add_default_instrumentation",
    "add_generic_diagnostics",
    "add_http_handler",
    "add_logger_provider",
    "config",
    "configure_aspnetcore",
    "configure_generic_diagnostics",
    "configure_http_handler",
    "remove_generic_diagnostics",
]
