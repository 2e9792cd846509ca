import sys

import numpy as np
from PIL import Image

from .compress import ChannelSet


class Printer:

    def __init__(self, verbose=False, quiet=False):
        self.verbose = verbose
        self.quiet = quiet

    def print_verbose(self, *args, **kwargs):
        if self.verbose:
            print(*args, **kwargs)

    def print_quiet(self, *args, **kwargs):
        if not self.quiet:
            print(*args, **kwargs)

    def print(self, *args, **kwargs):
        print(*args, **kwargs)

    def print_error(self, *args, **kwargs):
        print(*args, file=sys.stderr, **kwargs)


def read_image(fp, grey=False):
    '''
    Decode an image file (any format Pillow can detect) into a `ChannelSet`.
    Pixel values are float32 in [0, 255].
    '''
    with Image.open(fp) as img:
        img = img.convert('L' if grey else 'RGB')
        arr = np.array(img, dtype=np.float32)
    return ChannelSet.from_array(arr)


def to_uint8(arr):
    # clamp first, the cast truncates
    return np.clip(arr, 0, 255).astype(np.uint8)


def save_image(channels, fp, format=None):
    '''
    Encode a `ChannelSet`. `format` is inferred from the file name if not given.
    '''
    # uint8 (H, W) maps to mode 'L', (H, W, 3) to 'RGB'
    img = Image.fromarray(to_uint8(channels.to_array()))
    img.save(fp, format=format)


def frobenius_error(matrix, approx, relative=False):
    matrix = np.asarray(matrix, dtype=np.float64)
    err = np.linalg.norm(matrix - np.asarray(approx, dtype=np.float64), 'fro')
    if relative:
        return err / max(1.0, np.linalg.norm(matrix, 'fro'))
    return err


def channels_error(channels, approx, relative=False):
    '''
    Frobenius error of the whole image, over all channels.
    '''
    return frobenius_error(channels.to_array().ravel()[None, :],
                           approx.to_array().ravel()[None, :],
                           relative=relative)


def compression_ratio(m, n, rank):
    '''
    Storage of the truncated factors (U_r, S_r, V_r) over the storage of
    the (m, n) matrix.
    '''
    return rank * (m + n + 1) / (m * n)
