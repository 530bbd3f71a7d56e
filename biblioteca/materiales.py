"""Library materials: books, DVDs and magazines."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar


class Material(ABC):
    """An item of the library's collection that can be lent and returned."""

    tipo: ClassVar[str]

    def __init__(self, id: str, titulo: str, genero: str) -> None:
        self.id = id
        self.titulo = titulo
        self.genero = genero
        self.disponible = True

    def prestar(self) -> None:
        """Mark the material as lent out."""
        self.disponible = False

    def devolver(self) -> None:
        """Mark the material as available again."""
        self.disponible = True

    @abstractmethod
    def info(self) -> str:
        """Return a human-readable description of the material."""

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self.id!r}, titulo={self.titulo!r}, "
            f"disponible={self.disponible!r})"
        )


class Libro(Material):
    """A book, identified by its ISBN."""

    tipo: ClassVar[str] = "Libro"

    def __init__(
        self, isbn: str, titulo: str, autor: str, genero: str, paginas: int
    ) -> None:
        super().__init__(isbn, titulo, genero)
        self.autor = autor
        self.paginas = paginas

    @property
    def isbn(self) -> str:
        return self.id

    def info(self) -> str:
        disponible = "Si" if self.disponible else "No"
        return (
            f"LIBRO - ISBN: {self.id}\n"
            f"Titulo: {self.titulo}\n"
            f"Autor: {self.autor}\n"
            f"Genero: {self.genero}\n"
            f"Paginas: {self.paginas}\n"
            f"Disponible: {disponible}"
        )


class DVD(Material):
    """A film on DVD; duration is in minutes."""

    tipo: ClassVar[str] = "DVD"

    def __init__(
        self, id: str, titulo: str, director: str, genero: str, duracion: int
    ) -> None:
        super().__init__(id, titulo, genero)
        self.director = director
        self.duracion = duracion

    def info(self) -> str:
        disponible = "Si" if self.disponible else "No"
        return (
            f"DVD - ID: {self.id}\n"
            f"Titulo: {self.titulo}\n"
            f"Director: {self.director}\n"
            f"Genero: {self.genero}\n"
            f"Duracion: {self.duracion} min\n"
            f"Disponible: {disponible}"
        )


class Revista(Material):
    """A magazine issue; its theme doubles as its genre."""

    tipo: ClassVar[str] = "Revista"

    def __init__(self, id: str, nombre: str, tematica: str, edicion: str) -> None:
        super().__init__(id, nombre, tematica)
        self.edicion = edicion

    @property
    def nombre(self) -> str:
        return self.titulo

    @property
    def tematica(self) -> str:
        return self.genero

    def info(self) -> str:
        disponible = "Si" if self.disponible else "No"
        return (
            f"REVISTA - ID: {self.id}\n"
            f"Nombre: {self.titulo}\n"
            f"Tematica: {self.tematica}\n"
            f"Edicion: {self.edicion}\n"
            f"Disponible: {disponible}"
        )