"""
Small helpers shared by the printer and the reporting code.
"""


def unsigned_sort(values) -> list:
    """
    Sort integers by absolute value, ascending. Stable: ties keep input order.

        [-3, 1, -2, 4]  ->  [1, -2, -3, 4]

    Used to list a clause's literals alphabetically by variable letter.
    """
    return sorted(values, key=abs)
