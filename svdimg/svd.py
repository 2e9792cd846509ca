import warnings
from enum import Enum

import numpy as np

from .errors import DecompositionUnavailableError, InvalidRankError


class Mode(str, Enum):
    '''
    Which end of the singular spectrum an approximation keeps.
    '''
    BEST = 'best'
    WORST = 'worst'


DEFAULT_MODE = Mode.BEST


def parse_mode(mode):
    try:
        return Mode(mode)
    except ValueError:
        raise ValueError('mode must be best or worst') from None


def decompose(matrix):
    """
    Full singular value decomposition of a 2D array.

    Parameters
    ----------
    matrix : array-like
        The (m, n) array to decompose.

    Returns
    -------
    U : ndarray
        (m, m) array, columns are the left singular vectors.
    S : ndarray
        (min(m, n),) singular values, in descending order.
    Vh : ndarray
        (n, n) array, rows are the right singular vectors.

    Raises
    ------
    DecompositionUnavailableError
        If numpy cannot allocate the workspace or the SVD does not converge.
    """
    try:
        return np.linalg.svd(matrix, full_matrices=True)
    except MemoryError as err:
        raise DecompositionUnavailableError(
            f'Failed to allocate the SVD workspace for a {np.shape(matrix)} matrix.'
        ) from err
    except np.linalg.LinAlgError as err:
        raise DecompositionUnavailableError(f'SVD failed: {err}') from err


def sort_svd(U, S, Vh):
    '''
    Make sure the singular values are in descending order,
    reordering the singular vectors along with them.
    '''
    if np.all(np.diff(S) <= 0):
        return U, S, Vh

    warnings.warn(
        'The decomposition returned singular values not in descending order, '
        'reordering them.', RuntimeWarning)
    order = np.argsort(-S, kind='stable')
    k = len(S)
    U = U.copy()
    Vh = Vh.copy()
    U[:, :k] = U[:, order]
    Vh[:k, :] = Vh[order, :]
    return U, S[order], Vh


def get_block(max_rank, rank, mode):
    # S is descending: best keeps the head, worst keeps the tail
    if mode is Mode.BEST:
        return slice(0, rank)
    return slice(max_rank - rank, max_rank)


def isvd(U, S, Vh, block):
    return (U[:, block] * S[block]) @ Vh[block, :]


def approximate(matrix, rank, mode=DEFAULT_MODE, decompose=decompose):
    """
    Rank-limited approximation of a matrix by truncated SVD.

    Parameters
    ----------
    matrix : array-like
        The (m, n) array to approximate. Converted to float32.
    rank : int
        The rank of the approximation, 1 <= rank <= min(m, n).
    mode : {'best', 'worst'} or Mode, optional
        'best' keeps the `rank` largest singular values, which gives the
        Frobenius-optimal approximation (Eckart-Young-Mirsky theorem).
        'worst' keeps the `rank` smallest ones. Default is 'best'.
    decompose : callable, optional
        Returns (U, S, Vh) for a matrix, see `decompose`.

    Returns
    -------
    approx : ndarray
        The (m, n) float32 approximation. A copy of the input when
        rank == min(m, n).

    Raises
    ------
    InvalidRankError
        If `rank` is out of range. Raised before any decomposition.
    DecompositionUnavailableError
        If the decomposition cannot be computed.
    """

    mode = parse_mode(mode)
    matrix = np.asarray(matrix, dtype=np.float32)
    if matrix.ndim != 2:
        raise ValueError(f'matrix must be 2D, got shape {matrix.shape}')
    if isinstance(rank, bool) or not isinstance(rank, (int, np.integer)):
        raise TypeError(f'rank must be an integer, got {type(rank).__name__}')

    m, n = matrix.shape
    max_rank = min(m, n)

    if rank < 1 or rank > max_rank:
        raise InvalidRankError(rank, max_rank)

    if rank == max_rank:
        return matrix.copy()

    U, S, Vh = sort_svd(*decompose(matrix))
    block = get_block(max_rank, rank, mode)
    return isvd(U, S, Vh, block).astype(np.float32, copy=False)
