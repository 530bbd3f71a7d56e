# biblioteca

Un sistema sencillo, de consola, para gestionar los préstamos de una biblioteca:
libros, DVDs y revistas que se prestan a usuarios y se devuelven con la
intervención de un asistente.

## Instalación

```
pip install .
```

Para ejecutar las pruebas:

```
pip install .[test]
pytest
```

## Uso desde la consola

```
biblioteca
biblioteca --datos otro_directorio --registro otro_registro.txt
```

Opciones:

- `--datos`: directorio de datos iniciales (por defecto `datos`, relativo al
  directorio de trabajo actual).
- `--registro`: fichero donde se anotan los préstamos y devoluciones (por
  defecto `registro.txt`).

El directorio de datos puede contener:

- `libros.txt`: `ISBN - Titulo - Autor - Genero - Paginas`
- `DVDs.txt`: `ID - Titulo - Genero - Director - Duracion`
- `Revistas.txt`: `ID - Nombre - Tematica - Edicion`

Una línea por material, con los campos separados por `" - "`. Un fichero que
falta se omite sin más; una línea mal formada produce un `ValueError`. Al
arrancar se registran además dos usuarios de prueba (`USR001`, `USR002`) y dos
asistentes (`AST001`, `AST002`).

El menú permite:

1. Mostrar materiales: los libros, DVDs o revistas disponibles, o todos los
   materiales (prestados o no).
2. Registrar un préstamo (ID de material, usuario y asistente).
3. Registrar una devolución.
4. Salir.

El programa termina también al acabarse la entrada.

Cada usuario puede tener como máximo tres materiales prestados a la vez. Cada
préstamo y cada devolución se anotan, con fecha y hora, en el fichero de
registro; si no se puede escribir en él, la operación se realiza igualmente.

## Uso como biblioteca

```python
from biblioteca.biblioteca import Biblioteca, MaterialNoDisponibleError
from biblioteca.materiales import Libro
from biblioteca.personas import Usuario, Asistente

bib = Biblioteca("registro.txt")   # Biblioteca(None) no anota nada
bib.agregar_material(Libro("978-0", "Libro de ejemplo", "Autora Ejemplo", "Novela", 600))
bib.agregar_usuario(Usuario("Usuario Ejemplo", "USR001"))
bib.agregar_asistente(Asistente("Asistente Ejemplo", "AST001"))

bib.prestar_material("978-0", "USR001", "AST001")
try:
    bib.prestar_material("978-0", "USR001", "AST001")
except MaterialNoDisponibleError:
    print("Ya está prestado")

print(bib.listado_por_tipo("Libro"))
bib.devolver_material("978-0", "USR001", "AST001")
```

Los errores se lanzan como excepciones: `DatosNoEncontradosError` cuando no
existe el material, el usuario o el asistente, `MaterialNoDisponibleError`
cuando el material ya está prestado (ambas derivan de `BibliotecaError`), y
`LimitePrestamosError` (en `biblioteca.personas`) cuando el usuario ha llegado
al límite de préstamos. Devolver un material que el usuario no tiene no cambia
nada, pero la operación se anota igualmente.

`buscar_material`, `buscar_usuario` y `buscar_asistente` devuelven el elemento
con ese ID o `None`. `listado_materiales()` y `listado_por_tipo(tipo)`
devuelven el texto de los listados; los tipos son `"Libro"`, `"DVD"` y
`"Revista"`. `Persona.materiales_prestados_info()` describe lo que una persona
tiene prestado.

Para leer líneas sueltas de los ficheros de datos están `parse_libro`,
`parse_dvd` y `parse_revista`, y `Biblioteca.cargar_datos_iniciales(directorio)`
carga un directorio entero.

## Lo que no hace

Los préstamos, usuarios y asistentes viven solo en memoria: al salir del
programa se pierden, y no hay forma de dar de alta usuarios o materiales desde
el menú. El fichero de registro solo se escribe; nunca se vuelve a leer.