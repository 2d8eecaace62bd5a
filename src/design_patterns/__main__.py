"""Allow ``python -m design_patterns``."""

from design_patterns.cli.main import run

if __name__ == "__main__":
    run()
