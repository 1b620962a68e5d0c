"""Core — pure domain logic: errors, validation rules, types, protocols.

Invariants:
    - Core never imports from api/ or infrastructure/
"""
