"""Allow `python -m studyaid`."""
from studyaid.cli.main import app

if __name__ == "__main__":
    app()
