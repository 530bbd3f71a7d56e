"""Interactive menu for the library system."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from .biblioteca import Biblioteca, BibliotecaError
from .personas import Asistente, LimitePrestamosError, Usuario

_TIPOS_FILTRO = {1: "Libro", 2: "DVD", 3: "Revista"}


def mostrar_menu() -> None:
    """Print the main menu and the option prompt."""
    print("\nSISTEMA DE GESTION DE BIBLIOTECA")
    print("1. Mostrar materiales disponibles")
    print("2. Registrar prestamo")
    print("3. Registrar devolucion")
    print("4. Salir")
    print("Seleccione una opcion: ", end="", flush=True)


def _leer_opcion() -> int | None:
    """Read a number; None for anything that is not one. EOFError propagates."""
    try:
        return int(input().strip())
    except ValueError:
        return None


def _leer_ids() -> tuple[str, str, str]:
    id_material = input("Ingrese ID del material: ")
    id_usuario = input("Ingrese ID del usuario: ")
    id_asistente = input("Ingrese ID del asistente: ")
    return id_material, id_usuario, id_asistente


def _mostrar(biblioteca: Biblioteca) -> None:
    print("\n=== FILTRAR MATERIALES ===")
    print("1. Libros")
    print("2. DVDs")
    print("3. Revistas")
    print("4. Todos")
    print("Seleccione el tipo: ", end="", flush=True)
    opcion = _leer_opcion()
    if opcion in _TIPOS_FILTRO:
        print("\n" + biblioteca.listado_por_tipo(_TIPOS_FILTRO[opcion]))
    elif opcion == 4:
        print("\n" + biblioteca.listado_materiales())
    else:
        print("Opción no válida")


def _prestar(biblioteca: Biblioteca) -> None:
    try:
        biblioteca.prestar_material(*_leer_ids())
    except (BibliotecaError, LimitePrestamosError) as error:
        print(error)
    else:
        print("Prestamo realizado con exito")


def _devolver(biblioteca: Biblioteca) -> None:
    try:
        biblioteca.devolver_material(*_leer_ids())
    except BibliotecaError as error:
        print(error)
    else:
        print("Devolucion realizada con exito")


def _crear_biblioteca(datos: str, registro: str) -> Biblioteca:
    biblioteca = Biblioteca(registro)
    biblioteca.cargar_datos_iniciales(datos)
    biblioteca.agregar_usuario(Usuario("Juan Perez", "USR001"))
    biblioteca.agregar_usuario(Usuario("Maria Gomez", "USR002"))
    biblioteca.agregar_asistente(Asistente("Carlos Ruiz", "AST001"))
    biblioteca.agregar_asistente(Asistente("Ana Torres", "AST002"))
    return biblioteca


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive menu until the user leaves or input ends."""
    parser = argparse.ArgumentParser(
        prog="biblioteca", description="Sistema de gestion de biblioteca"
    )
    parser.add_argument("--datos", default="datos", help="directorio de datos iniciales")
    parser.add_argument("--registro", default="registro.txt", help="archivo de registro")
    args = parser.parse_args(argv)

    biblioteca = _crear_biblioteca(args.datos, args.registro)
    acciones = {1: _mostrar, 2: _prestar, 3: _devolver}

    try:
        while True:
            mostrar_menu()
            opcion = _leer_opcion()
            if opcion == 4:
                print("Saliendo del sistema...")
                break
            accion = acciones.get(opcion) if opcion is not None else None
            if accion is None:
                print("Opcion no valida")
            else:
                accion(biblioteca)
    except EOFError:
        print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())