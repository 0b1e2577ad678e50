"""Input handler for reading encoded ciphertext from files, arguments or stdin"""
import sys
from pathlib import Path
from typing import List, Optional, TextIO, Tuple

from xorcrack.error_handling import ErrorContext, InputError, create_error
from xorcrack.utils.codec import decode_base16, decode_base64_lines

FORMATS = ('hex', 'base64')


class InputHandler:
    """Reads text input and decodes it into ciphertext bytes"""

    def __init__(self, stdin: Optional[TextIO] = None):
        """
        Initialize input handler.

        Args:
            stdin: Stream used when no file is given (default: sys.stdin)
        """
        self.stdin = stdin

    def read_from_file(self, filepath: str) -> str:
        """
        Read text from a file.

        Args:
            filepath: Path to the file

        Returns:
            File contents

        Raises:
            InputError: If the file is missing, unreadable or empty
        """
        path = Path(filepath)

        if not path.is_file():
            raise create_error("file_not_found", path=filepath,
                               context=ErrorContext(source=filepath))

        try:
            content = path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            raise InputError(f"Cannot read file: {filepath}",
                             context=ErrorContext(source=filepath),
                             original_exception=e) from e

        if not content.strip():
            raise create_error("empty_input", source=filepath,
                               context=ErrorContext(source=filepath))

        return content

    def read_from_stdin(self) -> Tuple[str, dict]:
        """
        Read text from standard input.

        Returns:
            Tuple of (content, stats_dict)

        Raises:
            InputError: If stdin is empty
        """
        stream = self.stdin if self.stdin is not None else sys.stdin
        content = stream.read()

        if not content.strip():
            raise create_error("empty_input", source='stdin',
                               context=ErrorContext(source='stdin'))

        stats = {
            'lines': len(content.strip().split('\n')),
            'bytes': len(content),
            'source': 'stdin'
        }

        return content, stats

    def read_text(self, value: Optional[str] = None, filepath: Optional[str] = None) -> str:
        """Return value if given, else the contents of filepath, else stdin"""
        if value is not None:
            return value
        if filepath is not None:
            return self.read_from_file(filepath)
        content, _ = self.read_from_stdin()
        return content

    def read_lines(self, filepath: Optional[str] = None) -> List[str]:
        """Read non-empty, stripped lines from a file or stdin"""
        content = self.read_text(filepath=filepath)
        return [line.strip() for line in content.splitlines() if line.strip()]

    def read_ciphertext(self, filepath: Optional[str] = None, fmt: str = 'base64',
                        value: Optional[str] = None) -> bytes:
        """
        Read encoded ciphertext and decode it.

        Hex input may be split across lines; base-64 input may be wrapped.

        Raises:
            InputError: on unreadable input or an unknown format
            MalformedInputError: if the text does not decode
        """
        if fmt not in FORMATS:
            raise InputError(f"Unknown input format: {fmt}",
                             suggestion=f"Use one of: {', '.join(FORMATS)}")

        content = self.read_text(value=value, filepath=filepath)
        lines = [line.strip() for line in content.splitlines()]

        if fmt == 'hex':
            return decode_base16(''.join(lines))
        return decode_base64_lines(lines)
