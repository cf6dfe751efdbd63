import sys

from silence_reporter.cli import main


if __name__ == '__main__':
    sys.exit(main())
