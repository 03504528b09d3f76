"""
Format Detection Module.

Classifies a byte buffer by its binary signature (magic number) into
one of a closed set of format tags. Filename extensions are never used.
"""

from email_extractor.detection.classifier import classify, identify

__all__ = [
    "classify",
    "identify",
]
