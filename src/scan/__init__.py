"""Descriptor file discovery."""

from scan.files import find_descriptor_candidates, find_descriptor_file

__all__ = ["find_descriptor_candidates", "find_descriptor_file"]
