"""
powerups - include and variable preprocessor for marked-up documents

Expands ``<!-- include "file" -->`` directives in XML-like documents, wraps
each expansion in traceable markers, and strips those markers back out on
request.
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
