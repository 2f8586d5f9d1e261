"""
bikemonkey: race results classification and ranking.

Loads a batch of timing records, classifies each rider's route into a
course/gender category and answers ranking and rider lookup queries.
"""

__version__ = "0.3.0"
