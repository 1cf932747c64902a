"""Building blocks of a small command shell: environment, lexer, parser, builtins and redirections."""

__version__ = "0.1.0"