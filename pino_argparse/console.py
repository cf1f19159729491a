# Pino Argparse — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for pino-argparse output."""
from rich.console import Console

console = Console()
