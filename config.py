# File naming
BMP_EXTENSION = ".bmp"

# Fixed header layout (bytes)
HEADER_SIZE = 54
INFO_HEADER_SIZE = 40
BYTES_PER_PIXEL = 3
BITS_PER_PIXEL = 24

# Suffixes appended to the base name of derived images
COPY_SUFFIX = "_copy"
CHANNEL_REMOVED_SUFFIX = "_{channel}_channel_removed"
INVERTED_SUFFIX = "_inverted"
QUANTIZE_SUFFIX = "_quantize_{level}"
FLIPPED_SUFFIX = "_flipped_horizontally"

# Quantization clears between 0 and 7 low-order bits per channel
MIN_QUANTIZE_LEVEL = 0
MAX_QUANTIZE_LEVEL = 7

# Logging
LOG_LEVEL_ENVVAR = "BITMAP_OPS_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
