"""
The HTTP handler integration turns the events of the
``HttpHandlerDiagnosticListener`` diagnostic listener, emitted for outgoing
HTTP requests, into spans.


Enabling
~~~~~~~~

Use :func:`diagtrace.add_http_handler`::

    builder.add_http_handler()

Options may be configured before the integration is enabled, with
:func:`diagtrace.configure_http_handler`; they are kept and used once it is.


Configuration
~~~~~~~~~~~~~

.. py:data:: HttpHandlerDiagnosticOptions["start_root_spans"]

   Whether spans are created for requests sent outside of any trace.

   Default: ``True``

.. py:data:: HttpHandlerDiagnosticOptions["operation_name_resolver"]

   Called with ``(event_name, payload)`` to name the span.

   Default: ``None``, the event name is used.
"""
from .observer import HttpHandlerDiagnostics


__all__ = ["HttpHandlerDiagnostics"]
