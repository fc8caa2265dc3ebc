"""Entry point for DeepContext Context Server."""

import sys
from pathlib import Path

# Add the src directory to the Python path
src_root = Path(__file__).parent.parent.parent / "src"
sys.path.insert(0, str(src_root))

from deepcontext.context_server.server import main

if __name__ == "__main__":
    main()
