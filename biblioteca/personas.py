"""People who borrow materials: library users and assistants."""

from __future__ import annotations

from .materiales import Material

MAX_PRESTAMOS = 3


class LimitePrestamosError(Exception):
    """Raised when a person already holds the maximum number of loans."""


class Persona:
    """A person who can borrow up to three materials at once."""

    def __init__(self, nombre: str, id: str) -> None:
        self.nombre = nombre
        self.id = id
        self._prestados: list[Material] = []

    @property
    def materiales_prestados(self) -> tuple[Material, ...]:
        return tuple(self._prestados)

    def puede_prestar(self) -> bool:
        """Whether this person may take another loan."""
        return len(self._prestados) < MAX_PRESTAMOS

    def prestar_material(self, material: Material) -> None:
        """Lend the material to this person."""
        if not self.puede_prestar():
            raise LimitePrestamosError(
                f"Limite de prestamos alcanzado (max {MAX_PRESTAMOS})"
            )
        material.prestar()
        self._prestados.append(material)

    def devolver_material(self, material: Material) -> None:
        """Return a borrowed material; a material not held is ignored."""
        for posicion, prestado in enumerate(self._prestados):
            if prestado.id == material.id:
                material.devolver()
                del self._prestados[posicion]
                return

    def materiales_prestados_info(self) -> str:
        """Describe every material this person currently holds."""
        partes = [f"Materiales prestados a {self.nombre}:"]
        for material in self._prestados:
            partes.append(material.info())
            partes.append("-----------------")
        return "\n".join(partes)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(nombre={self.nombre!r}, id={self.id!r})"


class Usuario(Persona):
    """A library member."""


class Asistente(Persona):
    """A library assistant who authorises loans and returns."""