def ordered(items):
    """Items as a list, sorted when the values can be compared, else in iteration order."""
    items = list(items)
    try:
        return sorted(items)
    except TypeError:
        return items
