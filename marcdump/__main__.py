import sys

from marcdump.dump import main

if __name__ == '__main__':
    sys.exit(main())
