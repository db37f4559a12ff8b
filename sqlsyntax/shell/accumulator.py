from typing import Optional

DELIMITER = ";"
TRIM_CHARS = " \t\r\n"


class LineAccumulator:
    """Collects input lines until one of them contains the statement delimiter."""

    def __init__(self):
        self.saved_input = ""

    def push_line(self, line: str) -> Optional[str]:
        """
        Add a line of input.

        Returns the trimmed accumulated text once the line contains the
        delimiter, otherwise None. Text after the delimiter on the same line
        stays part of the returned statement.
        """
        self.saved_input += line + " "
        if DELIMITER not in line:
            return None

        statement = self.saved_input.strip(TRIM_CHARS)
        self.saved_input = ""
        return statement

    @property
    def pending(self) -> bool:
        return bool(self.saved_input.strip(TRIM_CHARS))
