"""Package entry point for ``python -m podcast_metadata``.

WHY: Users run the tool as ``python -m podcast_metadata episode.txt``.
Python's ``-m`` flag looks for ``__main__.py`` inside the package and
executes it.

HOW: Delegates to the CLI's main() function.
"""

from podcast_metadata.cli import main

if __name__ == "__main__":
    main()
