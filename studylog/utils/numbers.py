import math


def round_half_up(value) -> int:
    # round() in Python is banker's rounding; 2.5 must become 3 here
    return int(math.floor(value + 0.5))
