"""Marshmallow schemas of the wire formats."""
