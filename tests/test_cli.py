import io

import pytest

from biblioteca.cli import main, mostrar_menu


@pytest.fixture
def entorno(tmp_path):
    datos = tmp_path / "datos"
    datos.mkdir()
    (datos / "libros.txt").write_text(
        "978-1 - Rayuela - Cortazar - Novela - 600\n", encoding="utf-8"
    )
    (datos / "DVDs.txt").write_text("D1 - Roma - Drama - Cuaron - 135\n", encoding="utf-8")
    registro = tmp_path / "registro.txt"
    return ["--datos", str(datos), "--registro", str(registro)], registro


def _ejecutar(monkeypatch, argv, entrada):
    monkeypatch.setattr("sys.stdin", io.StringIO(entrada))
    return main(argv)


def test_mostrar_menu(capsys):
    mostrar_menu()
    salida = capsys.readouterr().out
    assert "SISTEMA DE GESTION DE BIBLIOTECA" in salida
    assert "4. Salir" in salida
    assert salida.endswith("Seleccione una opcion: ")


def test_salir(monkeypatch, capsys, entorno):
    argv, _ = entorno
    assert _ejecutar(monkeypatch, argv, "4\n") == 0
    assert "Saliendo del sistema..." in capsys.readouterr().out


def test_opcion_invalida(monkeypatch, capsys, entorno):
    argv, _ = entorno
    _ejecutar(monkeypatch, argv, "9\nabc\n4\n")
    assert capsys.readouterr().out.count("Opcion no valida") == 2


def test_fin_de_entrada(monkeypatch, capsys, entorno):
    argv, _ = entorno
    assert _ejecutar(monkeypatch, argv, "") == 0
    assert "Saliendo del sistema..." not in capsys.readouterr().out


def test_prestamo_y_listado(monkeypatch, capsys, entorno):
    argv, registro = entorno
    entrada = "2\n978-1\nUSR001\nAST001\n1\n1\n4\n"
    _ejecutar(monkeypatch, argv, entrada)
    salida = capsys.readouterr().out
    assert "Prestamo realizado con exito" in salida
    assert "No hay Libro disponibles actualmente." in salida
    assert "PRESTAMO - Material: 978-1 - Persona: USR001" in registro.read_text(
        encoding="utf-8"
    )


def test_prestamo_repetido(monkeypatch, capsys, entorno):
    argv, _ = entorno
    entrada = "2\nD1\nUSR001\nAST001\n2\nD1\nUSR002\nAST002\n4\n"
    _ejecutar(monkeypatch, argv, entrada)
    assert "El material no esta disponible" in capsys.readouterr().out


def test_datos_no_encontrados(monkeypatch, capsys, entorno):
    argv, _ = entorno
    _ejecutar(monkeypatch, argv, "3\nD1\nUSR009\nAST001\n4\n")
    assert "No se encontraron los datos necesarios" in capsys.readouterr().out


def test_devolucion(monkeypatch, capsys, entorno):
    argv, registro = entorno
    entrada = "2\nD1\nUSR001\nAST001\n3\nD1\nUSR001\nAST001\n1\n2\n4\n"
    _ejecutar(monkeypatch, argv, entrada)
    salida = capsys.readouterr().out
    assert "Devolucion realizada con exito" in salida
    assert "=== DVD DISPONIBLES ===" in salida
    assert "Disponible: Si" in salida
    assert "DEVOLUCION" in registro.read_text(encoding="utf-8")


def test_listado_todos_y_filtro_invalido(monkeypatch, capsys, entorno):
    argv, _ = entorno
    _ejecutar(monkeypatch, argv, "1\n4\n1\n7\n4\n")
    salida = capsys.readouterr().out
    assert "MATERIALES DISPONIBLES:" in salida
    assert "Rayuela" in salida and "Roma" in salida
    assert "Opción no válida" in salida