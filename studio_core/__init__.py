"""
Studio Core - calendar and dashboard aggregation for a photography studio

Turns project and financial records fetched from the studio backend into
a day-indexed calendar of shoot start/end events and fixed-length monthly
series for dashboard charts.
"""

__version__ = "0.1.0"
__author__ = "Studio Core Team"
