from typing import Iterable, Iterator, List, Optional, Tuple
from dataclasses import dataclass
import re

# Reads two-column integer files. A line is kept only when exactly two of its
# whitespace separated tokens are valid int32 values, other tokens are dropped.

INT32_MIN = -2**31
INT32_MAX = 2**31 - 1

_INT_TOKEN = re.compile(r'[+-]?[0-9]+')

@dataclass
class LineStats:
    lines_read: int = 0
    lines_kept: int = 0
    lines_skipped: int = 0
    lines_undecodable: int = 0

def parse_int32(token:str)->Optional[int]:
    """Returns the token as int if it is a decimal integer in int32 range, else None.

    Only ASCII digits with an optional sign are accepted, so '1_000', '1.0'
    and non-ASCII digits which int() would otherwise accept are rejected.
    """
    if not _INT_TOKEN.fullmatch(token):
        return None
    val = int(token)
    if val < INT32_MIN or val > INT32_MAX:
        return None
    return val

def parse_pair(line:str)->Optional[Tuple[int, int]]:
    numbers = [n for n in (parse_int32(t) for t in line.split()) if n is not None]
    if len(numbers) == 2:
        return numbers[0], numbers[1]
    return None

def iter_pairs(lines:Iterable[str], stats:Optional[LineStats]=None)->Iterator[Tuple[int, int]]:
    for line in lines:
        pair = parse_pair(line)
        if stats is not None:
            stats.lines_read += 1
            if pair is None:
                stats.lines_skipped += 1
            else:
                stats.lines_kept += 1
        if pair is not None:
            yield pair

def _decoded_lines(f, stats:Optional[LineStats])->Iterator[str]:
    # lines that are not valid utf-8 are skipped like any other malformed line
    for raw in f:
        try:
            yield raw.decode('utf-8')
        except UnicodeDecodeError:
            if stats is not None:
                stats.lines_read += 1
                stats.lines_skipped += 1
                stats.lines_undecodable += 1

def read_data_from_file(filepath:str, stats:Optional[LineStats]=None)->Tuple[List[int], List[int]]:
    """Reads left and right columns from the file at filepath.

    Raises OSError if the file cannot be opened or read, in which case no
    partial lists are returned.
    """
    left_list:List[int] = []
    right_list:List[int] = []

    with open(filepath, 'rb') as f:
        for left, right in iter_pairs(_decoded_lines(f, stats), stats):
            left_list.append(left)
            right_list.append(right)

    return left_list, right_list
