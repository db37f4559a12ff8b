import logging
from typing import Iterable, Optional

from sqlsyntax.validators import SyntaxValidator, ValidationResult, to_upper
from .accumulator import LineAccumulator

logger = logging.getLogger(__name__)

PROMPT = "SQL> "
EXIT_COMMAND = "EXIT;"


class ValidatorSession:
    def __init__(self, validator: Optional[SyntaxValidator] = None, show_tokens: bool = True):
        self.validator = validator or SyntaxValidator()
        self.show_tokens = show_tokens
        self.accumulator = LineAccumulator()

    def print_banner(self):
        print("📘 SQL Syntax Validator")
        print("Enter your SQL query (end with a semicolon `;`) or type 'exit;' to quit:")

    def process_line(self, line: str) -> bool:
        """Feed one input line. Returns False once the exit command is seen."""
        statement = self.accumulator.push_line(line)
        if statement is None:
            return True

        if to_upper(statement) == EXIT_COMMAND:
            print("Goodbye! 👋")
            return False

        self.report(self.validator.validate(statement))
        return True

    def report(self, result: ValidationResult):
        if self.show_tokens:
            print("\n🔍 Tokens:")
            print(" ".join(f"[{token}]" for token in result.tokens))

        if result:
            print("✅ Query is VALID")
        else:
            logger.info("%s", result)
            print("❌ Query is INVALID")

    def run_lines(self, lines: Iterable[str]):
        """Run the session over pre-read lines, e.g. from a script file."""
        for line in lines:
            if not self.process_line(line.rstrip("\r\n")):
                return

        if self.accumulator.pending:
            logger.warning("Ignoring unterminated statement at end of input")

    def interactive_session(self):
        """Run an interactive session on standard input."""
        self.print_banner()

        try:
            while True:
                line = input(f"\n{PROMPT}")
                if not self.process_line(line):
                    break
        except (EOFError, KeyboardInterrupt):
            print("\nGoodbye! 👋")
