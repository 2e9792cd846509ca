from enum import Enum
from typing import List

import numpy as np
from joblib import Parallel, delayed

from .errors import SVDApproxError
from .svd import DEFAULT_MODE, approximate, decompose, parse_mode

# one worker per color channel
DEFAULT_N_JOBS = 3


class ColorType(Enum):
    GREY = 1
    RGB = 3


class ChannelSet:
    '''
    The channel matrices of an image, each of shape (height, width).
    One matrix for a greyscale image, three (R, G, B) for a color one.
    '''

    def __init__(self, mats, width=None, height=None) -> None:
        self.mats: List[np.ndarray] = [
            np.asarray(mat, dtype=np.float32) for mat in mats
        ]
        self.width: int = width
        self.height: int = height

        self.check_shape()

    @classmethod
    def from_array(cls, img):
        '''
        (H, W) -> greyscale, (H, W, 3) -> RGB, (H, W, 4) -> RGB, alpha dropped
        '''
        img = np.asarray(img)
        if img.ndim == 2:
            return cls([img])
        if img.ndim == 3 and img.shape[2] in [3, 4]:
            return cls([img[:, :, i] for i in range(3)])
        raise ValueError(f'Unsupported image shape: {img.shape}')

    @property
    def color_type(self) -> ColorType:
        return ColorType(len(self.mats))

    @property
    def shape(self):
        return (self.height, self.width)

    @property
    def max_rank(self):
        return min(self.shape)

    def check_shape(self):

        try:
            ColorType(len(self.mats))
        except ValueError:
            raise ValueError(
                f'Expected 1 or 3 channels, got {len(self.mats)}') from None

        shape = self.mats[0].shape
        if len(shape) != 2:
            raise ValueError(f'Channels must be 2D, got shape {shape}')
        for i, mat in enumerate(self.mats):
            if mat.shape != shape:
                raise ValueError(
                    f'Shape mismatch: {shape} != {mat.shape} for channel {i}')

        if self.height is None:
            self.height = shape[0]
        if self.width is None:
            self.width = shape[1]
        if (self.height, self.width) != shape:
            raise ValueError(
                f'Size mismatch: (height, width) = {(self.height, self.width)} '
                f'but the channels have shape {shape}')

    def to_array(self):
        if self.color_type is ColorType.GREY:
            return self.mats[0].copy()
        return np.stack(self.mats, axis=-1)

    def compress(self, rank, mode=DEFAULT_MODE, **kwargs):
        return compress(self, rank, mode=mode, **kwargs)


def _approximate_channel(channel, mat, rank, mode, decompose):
    try:
        return approximate(mat, rank, mode=mode, decompose=decompose)
    except SVDApproxError as err:
        err.channel = channel
        raise


def compress_channels(mats,
                      rank,
                      mode=DEFAULT_MODE,
                      n_jobs=DEFAULT_N_JOBS,
                      decompose=decompose):
    """
    Approximate each channel matrix independently.

    Parameters
    ----------
    mats : list of array-like
        The channel matrices. Each one is validated on its own.
    rank : int
        The rank of the approximation of every channel.
    mode : {'best', 'worst'} or Mode, optional
        See `svdimg.svd.approximate`. Default is 'best'.
    n_jobs : int, optional
        The number of worker threads used when there is more than one
        channel. Default is 3.
    decompose : callable, optional
        The decomposition used by `approximate`.

    Returns
    -------
    mats : list of ndarray
        The approximated matrices, in the order of the input.

    Raises
    ------
    SVDApproxError
        The error of the first failed channel. For more than one channel its
        `channel` attribute holds the index of that channel.
    """

    mode = parse_mode(mode)

    if len(mats) == 1:
        return [approximate(mats[0], rank, mode=mode, decompose=decompose)]

    # results come back in submission order, whatever order they finish in
    return Parallel(n_jobs=n_jobs, prefer='threads')(
        delayed(_approximate_channel)(i, mat, rank, mode, decompose)
        for i, mat in enumerate(mats))


def compress(channels,
             rank,
             mode=DEFAULT_MODE,
             n_jobs=DEFAULT_N_JOBS,
             decompose=decompose):
    '''
    Compress a `ChannelSet` with a rank-`rank` approximation of every channel.
    Width and height pass through unchanged.
    '''
    mats = compress_channels(channels.mats,
                             rank,
                             mode=mode,
                             n_jobs=n_jobs,
                             decompose=decompose)
    return ChannelSet(mats, width=channels.width, height=channels.height)
