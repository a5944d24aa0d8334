HALF_BITS = 128
WORD_BITS = 2 * HALF_BITS
WORD_BYTES = WORD_BITS // 8

U128_MAX = 2 ** HALF_BITS - 1
U256_MAX = 2 ** WORD_BITS - 1

HALF_MASK = U128_MAX
