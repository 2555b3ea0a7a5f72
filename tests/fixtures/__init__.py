"""
Centralized test fixtures for the ontology table test suite.

Usage:
    from fixtures import PIZZA_TTL, CLASS_A_TTL

Or use the pytest fixtures in conftest.py which import from here.
"""

from .ttl_fixtures import (
    EX,
    # Turtle content
    CLASS_A_TTL,
    PIZZA_TTL,
    BLANK_NODE_TTL,
    NO_ONTOLOGY_TTL,
    DUBLIN_CORE_ONTOLOGY_TTL,
    EMPTY_TTL,
    MALFORMED_TTL,
    # Other serializations
    SIMPLE_NT,
    SIMPLE_NQ,
    SIMPLE_TRIG,
)

__all__ = [
    'EX',
    'CLASS_A_TTL',
    'PIZZA_TTL',
    'BLANK_NODE_TTL',
    'NO_ONTOLOGY_TTL',
    'DUBLIN_CORE_ONTOLOGY_TTL',
    'EMPTY_TTL',
    'MALFORMED_TTL',
    'SIMPLE_NT',
    'SIMPLE_NQ',
    'SIMPLE_TRIG',
]
