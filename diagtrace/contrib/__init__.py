from .observer import DiagnosticObserver


__all__ = ["DiagnosticObserver"]
