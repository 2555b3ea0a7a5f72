"""Application front ends."""
