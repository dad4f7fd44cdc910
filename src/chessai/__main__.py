import sys

from chessai.app import main

sys.exit(main())
