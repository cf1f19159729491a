"""config_loading.py"""
from pathlib import Path

from pino_argparse.config import loader

cli = loader(Path(__file__).parent / "pino.yaml")

if __name__ == "__main__":
    cli.run()
