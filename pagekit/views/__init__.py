"""Template loading and response building for pages.

Templates are read and compiled once when a page is built; responses for
non-OK results are fixed, generic bodies that never carry error details.
"""
