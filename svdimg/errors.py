class SVDApproxError(Exception):
    '''
    Base class of the errors raised while building a low-rank approximation.
    '''


class InvalidRankError(SVDApproxError, ValueError):

    def __init__(self, requested, max_rank):
        self.requested = requested
        self.max_rank = max_rank
        super().__init__(
            f'`rank` must be between 1 and {max_rank}, got {requested}.')

    def __reduce__(self):
        # keep `channel` and friends when sent back from a worker process
        return (type(self), (self.requested, self.max_rank), self.__dict__)


class DecompositionUnavailableError(SVDApproxError, RuntimeError):

    def __init__(self, message='Failed to compute the SVD of the matrix.'):
        super().__init__(message)
