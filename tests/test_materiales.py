import pytest

from biblioteca.materiales import DVD, Libro, Material, Revista


@pytest.fixture
def libro():
    return Libro("978-0", "Rayuela", "Cortazar", "Novela", 600)


@pytest.fixture
def dvd():
    return DVD("DVD01", "Solaris", "Tarkovsky", "Ciencia ficcion", 167)


@pytest.fixture
def revista():
    return Revista("REV01", "Ciencia Hoy", "Divulgacion", "Marzo")


def test_material_is_abstract():
    with pytest.raises(TypeError):
        Material("X", "Y", "Z")


def test_new_material_is_available(libro, dvd, revista):
    assert libro.disponible is True
    assert dvd.disponible is True
    assert revista.disponible is True


def test_prestar_and_devolver_toggle_availability(libro):
    libro.prestar()
    assert libro.disponible is False
    libro.devolver()
    assert libro.disponible is True


def test_tipos(libro, dvd, revista):
    assert libro.tipo == "Libro"
    assert dvd.tipo == "DVD"
    assert revista.tipo == "Revista"


def test_libro_fields(libro):
    assert libro.id == "978-0"
    assert libro.isbn == "978-0"
    assert libro.autor == "Cortazar"
    assert libro.paginas == 600
    assert libro.genero == "Novela"


def test_libro_info(libro):
    lines = libro.info().split("\n")
    assert lines == [
        "LIBRO - ISBN: 978-0",
        "Titulo: Rayuela",
        "Autor: Cortazar",
        "Genero: Novela",
        "Paginas: 600",
        "Disponible: Si",
    ]


def test_libro_info_when_lent(libro):
    libro.prestar()
    assert libro.info().endswith("Disponible: No")


def test_dvd_info(dvd):
    lines = dvd.info().split("\n")
    assert lines == [
        "DVD - ID: DVD01",
        "Titulo: Solaris",
        "Director: Tarkovsky",
        "Genero: Ciencia ficcion",
        "Duracion: 167 min",
        "Disponible: Si",
    ]


def test_revista_info(revista):
    lines = revista.info().split("\n")
    assert lines == [
        "REVISTA - ID: REV01",
        "Nombre: Ciencia Hoy",
        "Tematica: Divulgacion",
        "Edicion: Marzo",
        "Disponible: Si",
    ]


def test_revista_theme_is_genre(revista):
    assert revista.genero == "Divulgacion"
    assert revista.tematica == revista.genero
    assert revista.nombre == revista.titulo == "Ciencia Hoy"


def test_revista_info_when_lent(revista):
    revista.prestar()
    assert revista.info().endswith("Disponible: No")