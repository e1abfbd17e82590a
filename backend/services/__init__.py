"""
Host-side collaborators for the snake engine: renderers, clocks and the
session loop that ties them together.
"""
