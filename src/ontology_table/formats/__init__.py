"""
Input format support.

Only RDF serializations are handled; see ``formats.rdf``.
"""
