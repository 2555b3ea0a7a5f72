"""
Validators package.

- input: CLI path validation and directory expansion
"""

from .input import InputValidator

__all__ = ['InputValidator']
