# protocol_constants.py

DEFAULT_BYTE_COUNT = 16     # Bytes drawn when no size is given
FLOAT_SOURCE_BYTES = 8      # Raw bytes behind one uniform float
FLOAT_SOURCE_BITS = 64      # Bits in those raw bytes
DEFAULT_DEVICE_PATH = "/dev/urandom"
