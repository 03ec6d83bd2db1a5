"""
Entry point for: python -m lspword
"""
from lspword.main import main

if __name__ == "__main__":
    main()
