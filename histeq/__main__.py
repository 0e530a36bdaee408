"""
Simple main program to perform histogram equalization on an image and save charts of its histogram
before and after.
"""

import logging

logger = logging.getLogger('histeq')

def main(argv=None):
    """Main function that runs histogram equalization on an image. Returns the exit status."""
    import argparse
    import os.path
    from . import histeq
    from .codec import check_extension, decode, encode
    from .util import HistEqError
    import histeq._cmd_line_util as cui

    parser = argparse.ArgumentParser(prog='python3 -m histeq',
                                     description='Perform histogram equalization on an image')
    cui.add_input_image(parser)
    cui.add_config_args(parser)
    parser.add_argument('--verbose', '-v', action='store_true', help='show debug messages')
    args = parser.parse_args(argv)
    cui.setup_logging(args.verbose)

    try:
        config = cui.get_config(args)
        filename = args.input if args.input else cui.prompt_input_filename()
        output = args.output or cui.default_output_filename(filename)
        check_extension(filename)
        check_extension(output)

        # Load image
        im, width, height, color_space = decode(filename)
        logger.info("Read %dx%d %s image from '%s'", width, height, color_space.name.lower(),
                    filename)

        # Run HE
        result = histeq(im, config, diagnostics=args.charts, parallel=not args.serial)

        # Save
        encode(output, result.image, config.quality)
        logger.info("Equalized image saved as '%s'", output)
        if args.charts:
            for name, chart in (('histogram_before.jpg', result.chart_before),
                                ('histogram_after.jpg', result.chart_after)):
                path = os.path.join(args.chart_dir, name)
                encode(path, chart, config.quality)
                logger.info("Histogram chart saved as '%s'", path)
    except (HistEqError, OSError, MemoryError) as ex:
        logger.error('%s', ex)
        return 1
    return 0


if __name__ == "__main__":
    import sys
    sys.exit(main())
