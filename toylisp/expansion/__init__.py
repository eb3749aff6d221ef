from toylisp.expansion.expander import expand, expand_all

__all__ = ["expand", "expand_all"]
