"""Attribute lines added by a code change to work categories."""
