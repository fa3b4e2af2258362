"""
Assistant core: parser, dispatcher, error taxonomy, reply texts and ports.
"""
