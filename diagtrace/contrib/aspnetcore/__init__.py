"""
The ASP.NET Core integration turns the events of the ``Microsoft.AspNetCore``
diagnostic listener into spans.


Enabling
~~~~~~~~

Use :func:`diagtrace.add_aspnetcore` to enable the integration::

    from diagtrace import TracingBuilder

    builder = TracingBuilder().add_aspnetcore()

Enabling it also removes ``Microsoft.AspNetCore`` from the listeners handled
by the generic integration, whether that one is enabled before, after or
not at all.


Configuration
~~~~~~~~~~~~~

.. py:data:: AspNetCoreDiagnosticOptions["start_root_spans"]

   Whether spans are created for requests without an incoming trace.

   Default: ``False`` once the integration is enabled.

.. py:data:: AspNetCoreDiagnosticOptions["ignore_patterns"]

   Predicates called with ``(event_name, payload)``; events matching any of
   them are dropped.

   Default: ``[]``

Options can be set when enabling the integration, or later with
:func:`diagtrace.configure_aspnetcore`::

    def configure(options):
        options.start_root_spans = True

    builder.add_aspnetcore(configure)
"""
from .observer import AspNetCoreDiagnostics


__all__ = ["AspNetCoreDiagnostics"]
