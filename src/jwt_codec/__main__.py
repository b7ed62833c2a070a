"""
Top-level entry point: python -m jwt_codec <subcommand>
"""

from .cli import main


if __name__ == "__main__":
    main()
