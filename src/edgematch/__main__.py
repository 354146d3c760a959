"""Allow running the solver with `python -m edgematch`."""

from edgematch import main

main()
