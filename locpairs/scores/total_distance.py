from typing import Sequence

def calculate_total_distance(left_list:Sequence[int], right_list:Sequence[int])->int:
    # both columns are sorted independently, so original row pairing doesn't matter
    # zip stops at the shorter list if lengths differ
    return sum(abs(l - r) for l, r in zip(sorted(left_list), sorted(right_list)))
