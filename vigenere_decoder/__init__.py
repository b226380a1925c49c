"""Vigenère Decoder Package: ASCII repeating-key shift decoding with an HTTP shell.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
