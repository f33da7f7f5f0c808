"""
extrng core: selectors, snapshot model and settings.
"""
