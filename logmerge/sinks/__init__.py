from .printer import ConsolePrinter, PrintStats

__all__ = ["ConsolePrinter", "PrintStats"]
