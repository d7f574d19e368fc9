"""Core resolution engine for capresolve."""
