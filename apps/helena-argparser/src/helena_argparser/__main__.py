"""helena executable module.

The console script entry point is cli.main(), which is also the error
boundary; this module only serves `python -m helena_argparser`.
"""

from __future__ import annotations

import sys

from .cli import main


if __name__ == "__main__":
    sys.exit(main())
