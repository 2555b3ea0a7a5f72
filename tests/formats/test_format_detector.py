"""
Tests for serialization hint detection.

Run with: python -m pytest tests/formats/test_format_detector.py -v
"""

import pytest

from ontology_table.constants import RDFFormat
from ontology_table.formats.rdf import detect_rdf_format, is_rdf_filename, rdflib_parser_name


@pytest.mark.unit
class TestDetectRdfFormat:
    """Filename to serialization hint"""

    @pytest.mark.parametrize("filename,expected", [
        ("pizza.ttl", RDFFormat.TURTLE),
        ("pizza.n3", RDFFormat.TURTLE),
        ("pizza.nt", RDFFormat.N_TRIPLES),
        ("pizza.nq", RDFFormat.N_QUADS),
        ("pizza.trig", RDFFormat.TRIG),
    ])
    def test_known_extensions(self, filename, expected):
        assert detect_rdf_format(filename) == expected

    @pytest.mark.parametrize("filename", ["pizza.TTL", "pizza.Ttl", "PIZZA.tTl"])
    def test_case_insensitive(self, filename):
        assert detect_rdf_format(filename) == detect_rdf_format("pizza.ttl")

    def test_uppercase_quads(self):
        assert detect_rdf_format("DATA.NQ") == RDFFormat.N_QUADS

    @pytest.mark.parametrize("filename", [None, "", "README", "pizza.owl", "pizza.json", "ttl"])
    def test_unknown_defaults_to_turtle(self, filename):
        """Detection never fails; anything unrecognised is Turtle"""
        assert detect_rdf_format(filename) == RDFFormat.TURTLE

    def test_path_with_directories(self):
        assert detect_rdf_format("/data/ontologies/wine.nt") == RDFFormat.N_TRIPLES

    @pytest.mark.parametrize("filename", [
        None, "", "a.ttl", "a.NQ", "weird.name.trig", "x.rdf", "no_extension",
    ])
    def test_total_over_hints(self, filename):
        assert detect_rdf_format(filename) in RDFFormat.ALL


@pytest.mark.unit
class TestParserNames:
    """Hint to rdflib plugin name"""

    def test_every_hint_has_parser(self):
        for hint in RDFFormat.ALL:
            assert rdflib_parser_name(hint)

    def test_unknown_hint_raises(self):
        with pytest.raises(KeyError):
            rdflib_parser_name("application/rdf+xml")

    def test_is_rdf_filename(self):
        assert is_rdf_filename("a.TriG")
        assert not is_rdf_filename("notes.txt")
