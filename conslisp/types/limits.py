# Integers are signed 64-bit, both as literals and as arithmetic results
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1
# Decimal digits in INT64_MIN, the longest in-range literal
INT64_MAX_DIGITS = 19
