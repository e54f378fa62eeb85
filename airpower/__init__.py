"""
Air-Power Mastery Engine

Computes air-power (mastery) scores for ships and air-bases carrying
aircraft, in sortie and air-defense modes.
"""

__version__ = "1.0.0"
