"""Gestión de préstamos de libros, DVDs y revistas, con menú de consola."""

__version__ = "0.1.0"
__all__ = ["biblioteca", "cli", "materiales", "personas"]