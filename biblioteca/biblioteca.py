"""The library: its collection, members, assistants, loans and log."""

from __future__ import annotations

import os
import re
import time
from collections.abc import Iterable
from pathlib import Path
from typing import TypeVar

from .materiales import DVD, Libro, Material, Revista
from .personas import Asistente, LimitePrestamosError, Persona, Usuario

SEPARADOR = " - "
LINEA_DIVISORIA = "-----------------"

_ENTERO = re.compile(r"\s*[+-]?\d+")

_P = TypeVar("_P", bound=Persona)


class BibliotecaError(Exception):
    """Base class for failed library operations."""


class DatosNoEncontradosError(BibliotecaError):
    """Raised when the material, user or assistant of an operation is unknown."""

    def __init__(self, mensaje: str = "No se encontraron los datos necesarios") -> None:
        super().__init__(mensaje)


class MaterialNoDisponibleError(BibliotecaError):
    """Raised when a material that is already lent is requested."""

    def __init__(self, mensaje: str = "El material no esta disponible") -> None:
        super().__init__(mensaje)


def _entero(texto: str) -> int:
    """Read the integer at the start of the text, ignoring what follows it."""
    coincidencia = _ENTERO.match(texto)
    if coincidencia is None:
        raise ValueError(f"no es un numero entero: {texto!r}")
    return int(coincidencia.group())


def _campos(linea: str, cantidad: int) -> list[str]:
    partes = linea.rstrip("\r\n").split(SEPARADOR, cantidad - 1)
    if len(partes) != cantidad:
        raise ValueError(
            f"se esperaban {cantidad} campos separados por {SEPARADOR!r}: {linea!r}"
        )
    return partes


def parse_libro(linea: str) -> Libro:
    """Parse ``isbn - titulo - autor - genero - paginas``."""
    isbn, titulo, autor, genero, paginas = _campos(linea, 5)
    return Libro(isbn, titulo, autor, genero, _entero(paginas))


def parse_dvd(linea: str) -> DVD:
    """Parse ``id - titulo - genero - director - duracion``."""
    id_dvd, titulo, genero, director, duracion = _campos(linea, 5)
    return DVD(id_dvd, titulo, director, genero, _entero(duracion))


def parse_revista(linea: str) -> Revista:
    """Parse ``id - nombre - tematica - edicion``."""
    id_revista, nombre, tematica, edicion = _campos(linea, 4)
    return Revista(id_revista, nombre, tematica, edicion)


def _buscar(elementos: Iterable[_P], id_buscado: str) -> _P | None:
    return next((elemento for elemento in elementos if elemento.id == id_buscado), None)


class Biblioteca:
    """A collection of materials lent to users under an assistant's authority."""

    def __init__(self, registro: str | os.PathLike[str] | None = "registro.txt") -> None:
        self.registro = Path(registro) if registro is not None else None
        self._materiales: list[Material] = []
        self._usuarios: list[Usuario] = []
        self._asistentes: list[Asistente] = []

    @property
    def materiales(self) -> tuple[Material, ...]:
        return tuple(self._materiales)

    @property
    def usuarios(self) -> tuple[Usuario, ...]:
        return tuple(self._usuarios)

    @property
    def asistentes(self) -> tuple[Asistente, ...]:
        return tuple(self._asistentes)

    def _registrar_operacion(self, tipo: str, id_material: str, id_persona: str) -> None:
        if self.registro is None:
            return
        linea = (
            f"[{time.ctime()}] {tipo} - Material: {id_material} "
            f"- Persona: {id_persona}\n"
        )
        try:
            with self.registro.open("a", encoding="utf-8") as archivo:
                archivo.write(linea)
        except OSError:
            # An unwritable log never stops a loan or a return.
            pass

    def agregar_material(self, material: Material) -> None:
        self._materiales.append(material)

    def agregar_usuario(self, usuario: Usuario) -> None:
        self._usuarios.append(usuario)

    def agregar_asistente(self, asistente: Asistente) -> None:
        self._asistentes.append(asistente)

    def buscar_material(self, id_material: str) -> Material | None:
        """The first material with this id, or None."""
        return next((m for m in self._materiales if m.id == id_material), None)

    def buscar_usuario(self, id_usuario: str) -> Usuario | None:
        """The first user with this id, or None."""
        return _buscar(self._usuarios, id_usuario)

    def buscar_asistente(self, id_asistente: str) -> Asistente | None:
        """The first assistant with this id, or None."""
        return _buscar(self._asistentes, id_asistente)

    def _participantes(
        self, id_material: str, id_usuario: str, id_asistente: str
    ) -> tuple[Material, Usuario]:
        material = self.buscar_material(id_material)
        usuario = self.buscar_usuario(id_usuario)
        asistente = self.buscar_asistente(id_asistente)
        if material is None or usuario is None or asistente is None:
            raise DatosNoEncontradosError()
        return material, usuario

    def prestar_material(self, id_material: str, id_usuario: str, id_asistente: str) -> None:
        """Lend a material to a user and log the loan."""
        material, usuario = self._participantes(id_material, id_usuario, id_asistente)
        if not material.disponible:
            raise MaterialNoDisponibleError()
        if not usuario.puede_prestar():
            raise LimitePrestamosError("El usuario ha alcanzado el limite de prestamos")
        usuario.prestar_material(material)
        self._registrar_operacion("PRESTAMO", id_material, id_usuario)

    def devolver_material(self, id_material: str, id_usuario: str, id_asistente: str) -> None:
        """Take a material back from a user and log the return."""
        material, usuario = self._participantes(id_material, id_usuario, id_asistente)
        usuario.devolver_material(material)
        self._registrar_operacion("DEVOLUCION", id_material, id_usuario)

    def listado_materiales(self) -> str:
        """Describe every material, lent or not."""
        partes = ["MATERIALES DISPONIBLES:"]
        for material in self._materiales:
            partes.extend((material.info(), LINEA_DIVISORIA))
        return "\n".join(partes)

    def listado_por_tipo(self, tipo: str) -> str:
        """Describe the available materials of one type."""
        partes = [f"=== {tipo} DISPONIBLES ==="]
        for material in self._materiales:
            if material.tipo == tipo and material.disponible:
                partes.extend((material.info(), LINEA_DIVISORIA))
        if len(partes) == 1:
            partes.append(f"No hay {tipo} disponibles actualmente.")
        return "\n".join(partes)

    def cargar_datos_iniciales(self, directorio: str | os.PathLike[str] = "datos") -> None:
        """Load books, DVDs and magazines from the data directory; missing files are skipped."""
        base = Path(directorio)
        fuentes = (
            ("libros.txt", parse_libro),
            ("DVDs.txt", parse_dvd),
            ("Revistas.txt", parse_revista),
        )
        for nombre, parser in fuentes:
            try:
                archivo = (base / nombre).open(encoding="utf-8")
            except OSError:
                continue
            with archivo:
                for linea in archivo:
                    self.agregar_material(parser(linea))