from typing import Sequence
from collections import Counter

def calculate_similarity_score(left_list:Sequence[int], right_list:Sequence[int])->int:
    """Each value in left_list, duplicates included, adds value times its count in right_list."""
    right_counts = Counter(right_list)
    # Counter returns 0 for missing keys so absent values add nothing
    return sum(num * right_counts[num] for num in left_list)
