"""Utilities for the command line program."""

from .config import CHART_SCALINGS, Config

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

def add_input_image(parser):
    """
    Add an optional input argument. If it is not given then the file name is asked for with
    prompt_input_filename.
    """
    parser.add_argument('input', nargs='?', help='input image file, asked for if not given')
    parser.add_argument('--output', '-o', metavar='FILE',
                        help='output image file, defaults to equalized_image with the same '
                        'extension as the input in the current directory')

def add_config_args(parser):
    """Add arguments for all of the settings in Config."""
    defaults = Config()
    parser.add_argument('--workers', '-w', type=int, metavar='N',
                        help='number of worker threads, default is one per CPU')
    parser.add_argument('--serial', action='store_true',
                        help='do not use worker threads at all')
    parser.add_argument('--quality', '-q', type=int, default=defaults.quality, metavar='Q',
                        help='JPEG quality of written images from 0 to 100, default is %d'
                        % defaults.quality)
    parser.add_argument('--no-charts', dest='charts', action='store_false',
                        help='do not write the histogram before and after charts')
    parser.add_argument('--chart-dir', default='.', metavar='DIR',
                        help='directory to write the histogram charts to, default is the current '
                        'directory')
    parser.add_argument('--chart-scaling', choices=CHART_SCALINGS, default=defaults.chart_scaling,
                        help="how the bars are scaled, 'max' scales by the largest bin and 'fixed' "
                        'by --chart-divisor, default is %s' % defaults.chart_scaling)
    parser.add_argument('--chart-divisor', type=float, default=defaults.chart_divisor,
                        metavar='D', help='bin count of a full height bar with fixed scaling, '
                        'default is %d' % defaults.chart_divisor)

def get_config(args):
    """Create a Config from the parsed arguments of add_config_args."""
    return Config(workers=args.workers, quality=args.quality, chart_scaling=args.chart_scaling,
                  chart_divisor=args.chart_divisor)

def prompt_input_filename():
    """Ask the user for the name of the input image."""
    return input('Enter the image file name (with extension): ').strip()

def default_output_filename(input_filename):
    """The default output file name: equalized_image with the extension of the input."""
    import os.path
    return 'equalized_image' + os.path.splitext(input_filename)[1]

def setup_logging(verbose=False):
    """Send log messages to stderr, including debug messages if verbose."""
    import logging
    logging.basicConfig(format=LOG_FORMAT, level=logging.DEBUG if verbose else logging.INFO)
