"""Output formatter for XOR analysis results"""
from typing import List, Optional

from xorcrack.config import AnalysisConfig
from xorcrack.detectors.xor_analyzer import (
    DetectionResult,
    KeyLengthResult,
    RepeatingKeyXORResult,
    SingleByteXORResult,
)
from xorcrack.utils.codec import encode_base16


class OutputFormatter:
    """Formats analysis results as plain-text reports"""

    def __init__(self, config: Optional[AnalysisConfig] = None):
        self.config = config or AnalysisConfig()

    def _text(self, data: bytes, full: bool = False) -> str:
        text = data.decode('utf-8', errors='replace')
        limit = self.config.preview_length
        if full or len(text) <= limit:
            return text
        return text[:limit] + '...'

    def format_single_byte(self, result: SingleByteXORResult, full: bool = True) -> str:
        """Report a single-byte XOR break"""
        lines = [
            "# Single-byte XOR",
            f"Key:       0x{result.key:02x} ({chr(result.key)!r})",
            f"Score:     {result.score:.4f}",
            "Plaintext:",
            self._text(result.plaintext, full),
        ]
        return '\n'.join(lines)

    def format_ranking(self, results: List[SingleByteXORResult]) -> str:
        """Report the best few single-byte keys, one per line"""
        lines = ["# Single-byte XOR candidates"]
        for rank, result in enumerate(results, 1):
            lines.append(f"{rank:2d}. 0x{result.key:02x}  {result.score:.4f}  "
                         f"{self._text(result.plaintext)!r}")
        return '\n'.join(lines)

    def format_key_length(self, result: KeyLengthResult) -> str:
        """Report a key length estimate"""
        return '\n'.join([
            "# Repeating-key length",
            f"Length:    {result.key_length}",
            f"Distance:  {result.distance:.4f}",
        ])

    def format_repeating_key(self, result: RepeatingKeyXORResult, full: bool = True) -> str:
        """Report a repeating-key XOR break"""
        lines = [
            "# Repeating-key XOR",
            f"Key:       {result.key.decode('utf-8', errors='replace')!r}",
            f"Key (hex): {encode_base16(result.key)}",
            f"Length:    {result.key_length} (distance {result.distance:.4f})",
            f"Score:     {result.score:.4f}",
            "Plaintext:",
            self._text(result.plaintext, full),
        ]
        return '\n'.join(lines)

    def format_detection(self, detection: Optional[DetectionResult]) -> str:
        """Report which candidate was single-byte XOR encrypted"""
        if detection is None:
            return "# Single-byte XOR detection\nNo candidates given"

        result = detection.result
        return '\n'.join([
            "# Single-byte XOR detection",
            f"Line:       {detection.index + 1}",
            f"Ciphertext: {encode_base16(detection.ciphertext)}",
            f"Key:        0x{result.key:02x}",
            f"Score:      {result.score:.4f}",
            "Plaintext:",
            self._text(result.plaintext, full=True),
        ])
