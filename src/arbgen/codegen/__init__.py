"""Dart code generation for classified string tables.

Submodules:
    dart      - DartEmitter and emit_dart
    templates - Fixed Dart fragments (imports, base class header, delegate)

Python 3.13+. Zero external dependencies.
"""

from .dart import DartEmitter, emit_dart

__all__ = ["DartEmitter", "emit_dart"]
