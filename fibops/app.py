# fibops/app.py
# Closest-Fibonacci demo driver
#
# Prints "<value>.closest_fibonacci => <result>" for a fixed set of sample
# values, one line per value. Takes no arguments and reads no environment:
# it calls nearest_fibonacci directly, so the CLOSEST_FIB_MAX_BITS payload
# cap never applies here.

import sys
from typing import List

from .closest_fibonacci import nearest_fibonacci


SAMPLE_VALUES: List[int] = [-100, -1, 0, 1, 144, 156, 99, 2000000]
# expected:               [   0,  0, 0, 1, 144, 144, 89, 1346269]


def main() -> int:
    for value in SAMPLE_VALUES:
        print(f"{value}.closest_fibonacci => {nearest_fibonacci(value)}", flush=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())
