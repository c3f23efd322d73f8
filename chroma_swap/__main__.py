import sys

from chroma_swap.cli import main

sys.exit(main())
