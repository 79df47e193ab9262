"""Type model, indentation preprocessing, generic substitution and Go type rendering for melt."""

__version__ = "0.1.0"
__all__ = ["types", "indent", "replace", "preprocess", "gocode"]