"""
ALL genomic risk classifier: Ph-like pathway and IKZF1 PLUS decision rules.
"""
__version__ = "1.0.0"
