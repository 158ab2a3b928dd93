"""Allow `python3 -m cc_statusline` as an alternative entry point."""

from .cli import main

if __name__ == "__main__":
    main(prog_name="cc-statusline")
