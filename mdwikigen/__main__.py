"""Allow ``python -m mdwikigen``."""

from mdwikigen.cli import main

raise SystemExit(main())
