"""
Helper utility functions for Maze Survival
"""


def clamp(value, min_value, max_value):
    """Clamp a value between min and max"""
    return max(min_value, min(value, max_value))


def distance_sq(x1, y1, x2, y2):
    """Squared distance, for comparisons that don't need the root"""
    dx = x2 - x1
    dy = y2 - y1
    return dx * dx + dy * dy


def circles_touch(x1, y1, size1, x2, y2, size2):
    """Check if two entities (diameter = size) overlap"""
    reach = size1 + size2
    return distance_sq(x1, y1, x2, y2) < reach * reach / 4


def format_score(score):
    """Format score as a six digit counter"""
    return f"{score:06d}"
