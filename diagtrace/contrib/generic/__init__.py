"""
The generic integration subscribes to every diagnostic listener that does not
have a dedicated integration.


Enabling
~~~~~~~~

The integration is enabled by :func:`diagtrace.add_default_instrumentation`
unless ``DIAGTRACE_GENERIC_DIAGNOSTICS_ENABLED=false``. It can also be enabled
with :func:`diagtrace.add_generic_diagnostics` and removed with
:func:`diagtrace.remove_generic_diagnostics`.


Configuration
~~~~~~~~~~~~~

.. py:data:: GenericDiagnosticOptions["ignored_listener_names"]

   Listeners the integration never subscribes to. Every dedicated integration
   adds its own listener here when enabled.

   This option can also be seeded with the ``DIAGTRACE_IGNORED_LISTENER_NAMES``
   environment variable (comma separated).

   Default: ``set()``

.. py:data:: GenericDiagnosticOptions["ignored_events"]

   Event names dropped per listener; use
   ``GenericDiagnosticOptions.ignore_event(listener_name, event_name)``.
"""
from .observer import GenericDiagnostics


__all__ = ["GenericDiagnostics"]
