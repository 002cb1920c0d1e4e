"""Package entry point for ``python -m stream_embed``.

WHY: Users pipe data through the tool as
``cat logo.png | python -m stream_embed -b > logo.inc``.

HOW: Delegates straight to the CLI's main() function.
"""

from stream_embed.cli import main

if __name__ == "__main__":
    main()
