"""
Adapters layer: concrete implementations of domain ports.
"""
