"""Entry point: python -m parsequery [QUERY] [options]"""
from parsequery.cli import main

if __name__ == "__main__":
    main()
