"""
zirnevis - subtitle timing and Persian text engine for community translation
"""
__version__ = "0.1.0"
