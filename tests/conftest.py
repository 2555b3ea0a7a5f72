"""
Pytest configuration and fixtures for the test suite.

Defines markers for selective test execution:
    pytest -m unit          # Fast unit tests
    pytest -m integration   # Filesystem and CLI tests

Fixtures are centralized in tests/fixtures/ for reuse across all test modules.
"""

import os
import sys

import pytest

# Add src to path for imports
src_dir = os.path.join(os.path.dirname(__file__), '..', 'src')
if src_dir not in sys.path:
    sys.path.insert(0, src_dir)

# Add tests directory to path for fixtures import
tests_dir = os.path.dirname(__file__)
if tests_dir not in sys.path:
    # Ensure src directory stays ahead of tests for module resolution
    sys.path.insert(1, tests_dir)

from fixtures import (
    CLASS_A_TTL,
    PIZZA_TTL,
    BLANK_NODE_TTL,
    NO_ONTOLOGY_TTL,
)

from ontology_table.constants import RDFFormat
from ontology_table.core import build_element_table_model
from ontology_table.formats.rdf import parse_rdf_text_to_store


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Fast unit tests")
    config.addinivalue_line("markers", "integration: Filesystem and CLI tests")


# =============================================================================
# Store Fixtures
# =============================================================================

@pytest.fixture
def class_a_store():
    """Store with a single labelled owl:Class."""
    return parse_rdf_text_to_store(CLASS_A_TTL, RDFFormat.TURTLE)


@pytest.fixture
def pizza_store():
    """Store with an ontology header, classes, properties and an individual."""
    return parse_rdf_text_to_store(PIZZA_TTL, RDFFormat.TURTLE)


@pytest.fixture
def blank_node_store():
    """Store with a restriction and an anonymous class."""
    return parse_rdf_text_to_store(BLANK_NODE_TTL, RDFFormat.TURTLE)


@pytest.fixture
def no_ontology_store():
    """Store with elements but no owl:Ontology declaration."""
    return parse_rdf_text_to_store(NO_ONTOLOGY_TTL, RDFFormat.TURTLE)


@pytest.fixture
def pizza_table(pizza_store):
    """Element table model of the pizza ontology."""
    return build_element_table_model(pizza_store)


# =============================================================================
# File Fixtures
# =============================================================================

@pytest.fixture
def pizza_file(tmp_path):
    """Pizza ontology written to a temporary .ttl file."""
    path = tmp_path / "pizza.ttl"
    path.write_text(PIZZA_TTL, encoding="utf-8")
    return path
