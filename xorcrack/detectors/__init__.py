"""Detectors package for XOR cryptanalysis"""

from .xor_analyzer import (
    XORAnalyzer,
    SingleByteXORResult,
    KeyLengthResult,
    RepeatingKeyXORResult,
    DetectionResult,
)

__all__ = [
    'XORAnalyzer',
    'SingleByteXORResult',
    'KeyLengthResult',
    'RepeatingKeyXORResult',
    'DetectionResult',
]
