"""Entry point for running agentlink as a module."""

from agentlink.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
