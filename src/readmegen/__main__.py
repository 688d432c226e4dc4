"""Entry point for running readmegen as a module.

Usage:
    python -m readmegen [command] [options]

Example:
    python -m readmegen generate "My App" my-app 1.0.0 "Demo service"
    python -m readmegen check
"""

from readmegen.cli import app

if __name__ == "__main__":
    app()
