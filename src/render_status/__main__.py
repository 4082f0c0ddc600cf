"""Allow running the action with ``python -m render_status``."""

from render_status.cli.main import main

if __name__ == "__main__":
    main()
