"""Command line driver: compress an image file with truncated SVD."""

import argparse
import sys

from .compress import DEFAULT_N_JOBS, compress
from .errors import SVDApproxError
from .svd import Mode
from .utils import (Printer, channels_error, compression_ratio, read_image,
                    save_image)


def build_parser():
    parser = argparse.ArgumentParser(
        prog='svdimg',
        description='Lossy image compression by low-rank (truncated SVD) '
        'approximation of every color channel.')
    parser.add_argument('input', help='image to compress')
    parser.add_argument('output', help='where to write the compressed image')
    parser.add_argument('-r', '--rank', type=int, required=True,
                        help='rank of the approximation of each channel')
    parser.add_argument('--worst', action='store_true',
                        help='keep the smallest singular values instead of '
                        'the largest ones')
    parser.add_argument('--grey', action='store_true',
                        help='convert the image to greyscale first')
    parser.add_argument('--format', default=None,
                        help='output format, inferred from OUTPUT if omitted')
    parser.add_argument('--n-jobs', type=int, default=DEFAULT_N_JOBS,
                        help='worker threads for color images')
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument('-v', '--verbose', action='store_true')
    verbosity.add_argument('-q', '--quiet', action='store_true')
    return parser


def run(args, printer):
    mode = Mode.WORST if args.worst else Mode.BEST

    channels = read_image(args.input, grey=args.grey)
    printer.print_verbose(
        f'Read {args.input}: {channels.width}x{channels.height}, '
        f'{channels.color_type.name}')

    compressed = compress(channels, args.rank, mode=mode, n_jobs=args.n_jobs)
    save_image(compressed, args.output, format=args.format)
    printer.print_verbose(f'Saved {args.output}')

    error = channels_error(channels, compressed, relative=True)
    ratio = compression_ratio(channels.height, channels.width, args.rank)
    printer.print_quiet(f'rank = {args.rank}, mode = {mode.value}, '
                        f'relative error = {error:.4f}, '
                        f'storage ratio = {ratio:.4f}')


def main(argv=None):
    args = build_parser().parse_args(argv)
    printer = Printer(verbose=args.verbose, quiet=args.quiet)

    try:
        run(args, printer)
    except SVDApproxError as err:
        channel = getattr(err, 'channel', None)
        if channel is not None:
            printer.print_error(f'Channel {channel}: {err}')
        else:
            printer.print_error(err)
        return 1
    except (OSError, ValueError) as err:
        printer.print_error(err)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
