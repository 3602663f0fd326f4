"""Fixed parameters of the satoshi-scaled amount type.

The scale is a module constant, never per-instance state, so every
CryptoUnit shares the same 8 fractional digits.
"""

# Number of fractional decimal digits carried by every amount
DECIMALS = 8

# Magnitude of one whole unit (1 BTC = 100_000_000 satoshi)
SCALE = 10**DECIMALS

# Width of the sortable binary key (big-endian, unsigned)
BUFFER_SIZE = 8

# Largest magnitude that fits in BUFFER_SIZE bytes
BUFFER_MAX = 2 ** (8 * BUFFER_SIZE) - 1

# Radix bounds accepted by to_string()
MIN_RADIX = 2
MAX_RADIX = 36

# Largest positive exponent accepted in a decimal literal; beyond this the
# literal would expand into an unreasonably long digit string
MAX_EXPONENT = 100_000
