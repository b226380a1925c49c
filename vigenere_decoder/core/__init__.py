"""Core Layer: pure decoding logic, no IO, no async, no HTTP.

Invariants:
    - No module in core/ imports from api/, schemas/, infrastructure/ or config
    - Only decoder.MessageDecoder holds mutable lifecycle state
"""
