"""
So that `python -m reptag` works like the `reptag` console script.
"""
from reptag.cmdline import main

main()
