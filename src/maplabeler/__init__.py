"""
Map Labeler - Bible map labels from Paratext term renderings

Derives the map form of each place name from a project's biblical term
renderings, classifies the vernacular label text placed on a map, and
tallies the verses where the renderings were found.
"""

__version__ = "0.1.0"
__author__ = "Map Labeler Contributors"
