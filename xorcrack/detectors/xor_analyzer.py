#!/usr/bin/env python3
"""
XORAnalyzer for xorcrack

Wraps the XOR cryptanalysis functions in xorcrack.utils.xor_tools and returns
result objects carrying the recovered key, its score and the decrypted text.
Also finds the one ciphertext, among many, that was single-byte XOR encrypted.
"""

import logging
from dataclasses import dataclass
from itertools import repeat
from typing import Iterable, List, Optional

from xorcrack.config import AnalysisConfig
from xorcrack.utils.xor_tools import (
    englishness,
    find_repeating_key_xor_key,
    find_repeating_key_xor_key_length,
    find_single_byte_xor_key,
    repeating_key_xor,
    xor,
)

logger = logging.getLogger(__name__)


def _preview(data: bytes, limit: int = 50) -> str:
    return data[:limit].decode('utf-8', errors='replace')


@dataclass
class SingleByteXORResult:
    """Best single-byte XOR key for a ciphertext"""
    key: int
    score: float
    plaintext: bytes

    def __str__(self) -> str:
        return (f"Key: 0x{self.key:02X} | Score: {self.score:.4f} | "
                f"Preview: {_preview(self.plaintext)!r}")


@dataclass
class KeyLengthResult:
    """Estimated repeating-key length and its normalised Hamming distance"""
    key_length: int
    distance: float

    def __str__(self) -> str:
        return f"Key length: {self.key_length} | Distance: {self.distance:.4f}"


@dataclass
class RepeatingKeyXORResult:
    """Recovered repeating XOR key and the decrypted text"""
    key: bytes
    key_length: int
    distance: float
    plaintext: bytes
    score: float

    def __str__(self) -> str:
        return (f"Key: {_preview(self.key, len(self.key))!r} "
                f"(length: {self.key_length}) | Score: {self.score:.4f} | "
                f"Preview: {_preview(self.plaintext)!r}")


@dataclass
class DetectionResult:
    """The ciphertext most likely to be single-byte XOR encrypted"""
    index: int
    ciphertext: bytes
    result: SingleByteXORResult

    def __str__(self) -> str:
        return f"Candidate #{self.index} | {self.result}"


class XORAnalyzer:
    """
    Breaks single-byte and repeating-key XOR.

    All methods are pure over their inputs; the analyzer only holds its
    configuration.
    """

    def __init__(self, config: Optional[AnalysisConfig] = None):
        self.config = config or AnalysisConfig()

    def break_single_byte(self, ciphertext: bytes) -> SingleByteXORResult:
        """Find the best single-byte key and decrypt with it"""
        ciphertext = bytes(ciphertext)
        key, score = find_single_byte_xor_key(ciphertext)
        result = SingleByteXORResult(
            key=key,
            score=score,
            plaintext=xor(ciphertext, repeat(key)),
        )
        logger.debug("Single-byte XOR over %d bytes: %s", len(ciphertext), result)
        return result

    def estimate_key_length(self, ciphertext: bytes) -> KeyLengthResult:
        """Estimate the repeating-key length"""
        length, distance = find_repeating_key_xor_key_length(
            ciphertext, self.config.max_key_length
        )
        result = KeyLengthResult(key_length=length, distance=distance)
        logger.debug("Key length estimate: %s", result)
        return result

    def break_repeating_key(self, ciphertext: bytes) -> RepeatingKeyXORResult:
        """Recover the repeating key and decrypt with it"""
        ciphertext = bytes(ciphertext)
        estimate = self.estimate_key_length(ciphertext)
        key = find_repeating_key_xor_key(ciphertext, self.config.max_key_length)
        plaintext = repeating_key_xor(ciphertext, key)

        result = RepeatingKeyXORResult(
            key=key,
            key_length=estimate.key_length,
            distance=estimate.distance,
            plaintext=plaintext,
            score=englishness(plaintext),
        )
        logger.debug("Repeating-key XOR over %d bytes: %s", len(ciphertext), result)
        return result

    def detect_single_byte_xor(self, ciphertexts: Iterable[bytes]) -> Optional[DetectionResult]:
        """
        Pick the ciphertext whose best single-byte decryption is most English.

        Only a strictly higher score replaces the current best, so the
        earliest candidate wins ties.

        Returns:
            DetectionResult, or None if ciphertexts is empty
        """
        best: Optional[DetectionResult] = None
        checked = 0

        for index, ciphertext in enumerate(ciphertexts):
            checked += 1
            result = self.break_single_byte(ciphertext)
            if best is None or result.score > best.result.score:
                best = DetectionResult(index=index, ciphertext=bytes(ciphertext), result=result)

        logger.debug("Checked %d candidates for single-byte XOR", checked)
        return best

    def rank_single_byte_keys(self, ciphertext: bytes, top_n: int = 5) -> List[SingleByteXORResult]:
        """
        Score every single-byte key and return the best top_n.

        Sorting is stable, so equal scores keep ascending key order.
        """
        ciphertext = bytes(ciphertext)
        results = []

        for key in range(256):
            plaintext = xor(ciphertext, repeat(key))
            results.append(SingleByteXORResult(key=key, score=englishness(plaintext),
                                               plaintext=plaintext))

        results.sort(key=lambda r: r.score, reverse=True)
        return results[:top_n]
