"""Senet against an expectiminimax computer opponent."""
