# -*- coding: utf-8 -*-
"""Entry point for ``python -m lsatsom``."""

import sys

from lsatsom.cli import main

sys.exit(main())
