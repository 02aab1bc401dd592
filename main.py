import sys

from lineintersection.main import main

if __name__ == "__main__":
    sys.exit(main())
