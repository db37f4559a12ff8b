from .validators import SyntaxValidator, ValidationResult, parse_sql, tokenize

__all__ = ["SyntaxValidator", "ValidationResult", "parse_sql", "tokenize"]
