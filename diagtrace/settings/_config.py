import typing as t

from envier import Env


DEFAULT_FILE_SIZE_BYTES = 15 << 20  # 15 MB


def parse_listener_names(value: t.Union[str, None]) -> t.List[str]:
    if not isinstance(value, str):
        return []

    fragments = [s.strip() for s in value.split(",")]
    return [f for f in fragments if f != ""]


class DiagtraceConfig(Env):
    """Process-wide settings read from ``DIAGTRACE_*`` environment variables.

    Module options are not configured here: they are layered onto each module
    through :class:`diagtrace.TracingBuilder`. These settings only cover the
    ambient behavior of the library (logging) and the defaults used by
    :func:`diagtrace.add_default_instrumentation`.
    """

    __prefix__ = "diagtrace"

    debug = Env.var(bool, "debug", default=False)
    logging_rate = Env.var(int, "logging_rate", default=60)
    log_file = Env.var(t.Optional[str], "log_file", default=None)
    log_file_level = Env.var(str, "log_file_level", default="DEBUG", parser=str.upper)
    log_file_size_bytes = Env.var(int, "log_file_size_bytes", default=DEFAULT_FILE_SIZE_BYTES)
    log_stream_handler = Env.var(bool, "log_stream_handler", default=True)

    generic_diagnostics_enabled = Env.var(bool, "generic_diagnostics_enabled", default=True)
    ignored_listener_names = Env.var(list, "ignored_listener_names", parser=parse_listener_names, default=[])


config = DiagtraceConfig()
