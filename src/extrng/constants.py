"""
extrng Constants - TigerStyle

All limits are explicit, named with units, big-endian naming convention.
Category comes first, specifics last: SEED_WORD_MASK not MASK_SEED_WORD.
"""

# =============================================================================
# Word Arithmetic
# =============================================================================

WORD_BITS_COUNT: int = 32
WORD_MASK: int = 0xFFFFFFFF  # unsigned 32-bit state words
WORD_LOW16_MASK: int = 0xFFFF

# =============================================================================
# Uniform Scaling
# =============================================================================

UNIFORM_SCALE_32M1: float = 2.328306437080797e-10  # 1 / (2^32 - 1)
UNIFORM_SCALE_KNUTH: float = 9.31322574615479e-10  # 2^-30
UNIFORM_SCALE_MT: float = 2.3283064365386963e-10  # 2^-32
UNIFORM_SCALE_LECUYER: float = 2.328306549295727688e-10  # 1 / (m1 + 1)

# =============================================================================
# Seeding
# =============================================================================

SEED_LCG_MULTIPLIER: int = 69069
SEED_LCG_INCREMENT: int = 1
SEED_SCRAMBLE_ROUNDS_COUNT: int = 50  # initial scrambling before filling words
SEED_KNUTH_MODULUS: int = 1073741821  # Knuth seeds must stay below 2^30 - 3

# =============================================================================
# Wichmann-Hill
# =============================================================================

WH_MODULI: tuple[int, int, int] = (30269, 30307, 30323)
WH_MULTIPLIERS: tuple[int, int, int] = (171, 172, 170)
WH_WORDS_COUNT: int = 3

# =============================================================================
# Marsaglia-Multicarry / Super-Duper
# =============================================================================

MM_MULTIPLIERS: tuple[int, int] = (36969, 18000)
MM_WORDS_COUNT: int = 2

SD_TAUSWORTHE_MASK: int = 0o377777  # 17 low bits
SD_CONGRUENTIAL_MULTIPLIER: int = 69069
SD_WORDS_COUNT: int = 2

# =============================================================================
# Mersenne-Twister
# =============================================================================

MT_TABLE_WORDS_COUNT: int = 624
MT_SHIFT_OFFSET: int = 397
MT_MATRIX_A: int = 0x9908B0DF
MT_UPPER_MASK: int = 0x80000000
MT_LOWER_MASK: int = 0x7FFFFFFF
MT_TEMPERING_MASK_B: int = 0x9D2C5680
MT_TEMPERING_MASK_C: int = 0xEFC60000
MT_DEFAULT_SEED: int = 4357  # sgenrand seed for a never-initialised table
MT_WORDS_COUNT: int = MT_TABLE_WORDS_COUNT + 1  # cursor + table

# =============================================================================
# Knuth TAOCP
# =============================================================================

KT_LONG_LAG: int = 100  # KK
KT_SHORT_LAG: int = 37  # LL
KT_MODULUS: int = 1 << 30  # MM
KT_SEPARATION: int = 70  # TT
KT_QUALITY_WORDS_COUNT: int = 1009
KT_WARMUP_CYCLES_COUNT: int = 10  # 2002 ran_start only
KT_WORDS_COUNT: int = KT_LONG_LAG + 1  # table + position

# =============================================================================
# L'Ecuyer-CMRG (MRG32k3a)
# =============================================================================

LECUYER_M1: int = 4294967087
LECUYER_M2: int = 4294944443
LECUYER_A12: int = 1403580
LECUYER_A13N: int = 810728
LECUYER_A21: int = 527612
LECUYER_A23N: int = 1370589
LECUYER_WORDS_COUNT: int = 6

# =============================================================================
# Normal Variates
# =============================================================================

NORMAL_INVERSION_BIG: int = 134217728  # 2^27
NORMAL_BOX_MULLER_RADIUS_FLOOR: float = 10 * 2.2250738585072014e-308  # 10 * DBL_MIN
NORMAL_REJECTION_ITERATIONS_MAX: int = 1_000_000  # fault, never a user error

# =============================================================================
# Snapshots
# =============================================================================

SNAPSHOT_FORMAT_VERSION: int = 1
SNAPSHOT_SIZE_BYTES_MAX: int = 64 * 1024  # largest state is 625 words
