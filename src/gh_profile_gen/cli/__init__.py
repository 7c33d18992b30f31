"""
Command line interface for gh-profile-gen.
"""
