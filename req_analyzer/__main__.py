"""Allow running as: python -m req_analyzer"""

import sys

from req_analyzer.main import main

if __name__ == "__main__":
    sys.exit(main())
