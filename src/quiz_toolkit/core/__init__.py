"""
Core package: quiz models, payload schema validation and serialization.
"""
