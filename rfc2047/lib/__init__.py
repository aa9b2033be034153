"""
Library modules that are not specific to the encoded-word grammar: configuration, logging, optional
third-party dependencies and small helpers.
"""
