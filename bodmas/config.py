"""Default settings; the command line overrides some of them."""

__version__ = "1.0.0"

# Diagnostics
LEXER_CONFIG = {
    "snippet_context": 5,  # characters shown on each side of a bad character
}

PARSER_CONFIG = {
    "max_nesting": 512,  # pending '(' before the line is rejected
}

EVALUATOR_CONFIG = {
    "stack_capacity": 32,
}

# Line source
SOURCE_CONFIG = {
    "prompt": "> ",
    "max_line_size": 1024,
}

LOGGING_CONFIG = {
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}

BANNER = "A BODMAS calculator.\nVersion {version}.\n"
