from .compress import ChannelSet, ColorType, compress, compress_channels
from .errors import (DecompositionUnavailableError, InvalidRankError,
                     SVDApproxError)
from .svd import Mode, approximate, decompose
