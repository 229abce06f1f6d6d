"""Presentation layer: public entry points."""
